"""Mappers between database rows and domain models.

Domain models are immutable pydantic models, so rows are mapped by hand
rather than through SQLAlchemy's ORM.
"""

from typing import Any, Dict, Mapping
from uuid import UUID

from pinwall.domain.model import Image, User
from pinwall.domain.value import ImageId, ImageUrl, UserId, Username


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_user(row: Mapping[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row mapping

    Returns:
        User domain model
    """
    return User(
        id=UserId(_uuid(row["id"])),
        external_id=row["external_id"],
        username=Username(row["username"]),
        created_at=row["created_at"],
    )


def row_to_image(row: Mapping[str, Any]) -> Image:
    """Convert database row to Image domain model.

    Args:
        row: Database row mapping

    Returns:
        Image domain model
    """
    return Image(
        id=ImageId(_uuid(row["id"])),
        url=ImageUrl(row["url"]),
        description=row["description"] or "",
        owner_id=UserId(_uuid(row["owner_id"])),
        created_at=row["created_at"],
    )


def image_to_dict(image: Image) -> Dict[str, Any]:
    """Convert Image domain model to a dict for insertion.

    Args:
        image: Image domain model

    Returns:
        Column values keyed by column name
    """
    return image.model_dump()
