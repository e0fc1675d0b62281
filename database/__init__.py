"""database — ORM models, engine setup and the tweet store."""
