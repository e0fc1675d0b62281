"""api — tweet routes, shared dependencies and middleware."""
