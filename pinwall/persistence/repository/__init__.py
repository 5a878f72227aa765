"""PostgreSQL repository implementations."""

from pinwall.persistence.repository.image import PostgresImageRepository
from pinwall.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresUserRepository",
    "PostgresImageRepository",
]
