"""Persistence layer: SQLAlchemy tables, mappers and repositories."""
