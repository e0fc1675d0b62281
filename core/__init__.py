"""core — account and timeline use cases."""
