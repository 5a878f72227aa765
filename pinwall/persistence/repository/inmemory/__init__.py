"""In-memory repository implementations (tests and database-less runs)."""

from .image import InMemoryImageRepository
from .session import InMemorySessionRepository
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryImageRepository",
    "InMemorySessionRepository",
    "InMemoryUserRepository",
]
