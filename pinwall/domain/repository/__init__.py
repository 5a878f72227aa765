"""Repository interfaces for the Pinwall domain.

Implementations live in the persistence layer.
"""

from pinwall.domain.repository.image import ImageRepository
from pinwall.domain.repository.session import SessionRepository
from pinwall.domain.repository.user import UserRepository

__all__ = [
    "UserRepository",
    "ImageRepository",
    "SessionRepository",
]
