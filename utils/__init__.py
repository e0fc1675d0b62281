"""utils — error taxonomy and shared schemas."""
