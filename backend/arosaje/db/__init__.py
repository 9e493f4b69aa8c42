"""Database Declarations — SQLAlchemy declarative Base shared by all models."""
