"""PostgreSQL repository implementations."""

from gallery.persistence.repository.user import PostgresUserRepository

__all__ = ["PostgresUserRepository"]
