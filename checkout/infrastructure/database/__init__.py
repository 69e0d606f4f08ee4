"""Database infrastructure - SQLAlchemy models, engine and repositories."""
