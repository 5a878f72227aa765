"""Domain model entities for Pinwall."""

from pinwall.domain.model.image import Image
from pinwall.domain.model.user import User

__all__ = [
    "User",
    "Image",
]
