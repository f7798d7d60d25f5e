"""Database metadata: the declarative Base shared by all ORM models."""
