"""PostgreSQL implementation of Image repository."""

from typing import List, Optional

import logfire
from sqlalchemy import delete, desc, insert, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from pinwall.domain.error import StoreError
from pinwall.domain.model import Image
from pinwall.domain.repository import ImageRepository
from pinwall.domain.value import ImageId, UserId
from pinwall.persistence.mappers import image_to_dict, row_to_image
from pinwall.persistence.tables import images_table


class PostgresImageRepository(ImageRepository):
    """PostgreSQL implementation of ImageRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def save(self, image: Image) -> Image:
        """Insert an image and commit it before returning."""
        with logfire.span("image_repository.save", image_id=str(image.id)):
            stmt = insert(images_table).values(**image_to_dict(image))
            try:
                await self.session.execute(stmt)
                await self.session.commit()
            except SQLAlchemyError as e:
                await self.session.rollback()
                raise StoreError(f"Image insert failed: {e}") from e
            return image

    async def find_by_owner(self, owner_id: UserId) -> List[Image]:
        """Find an owner's images, newest first."""
        return await self.find_all(owner_id=owner_id)

    async def find_all(self, owner_id: Optional[UserId] = None) -> List[Image]:
        """Find images, newest first, optionally for a single owner."""
        with logfire.span(
            "image_repository.find_all",
            owner_id=str(owner_id) if owner_id else None,
        ):
            stmt = select(images_table)
            if owner_id is not None:
                stmt = stmt.where(images_table.c.owner_id == owner_id)
            stmt = stmt.order_by(
                desc(images_table.c.created_at), desc(images_table.c.id)
            )

            try:
                result = await self.session.execute(stmt)
            except SQLAlchemyError as e:
                raise StoreError(f"Image query failed: {e}") from e

            return [row_to_image(row) for row in result.mappings().all()]

    async def delete_owned(
        self, image_id: ImageId, owner_id: UserId
    ) -> Optional[Image]:
        """DELETE ... WHERE id AND owner_id RETURNING, as one statement."""
        with logfire.span(
            "image_repository.delete_owned",
            image_id=str(image_id),
            owner_id=str(owner_id),
        ):
            stmt = (
                delete(images_table)
                .where(
                    images_table.c.id == image_id,
                    images_table.c.owner_id == owner_id,
                )
                .returning(*images_table.c)
            )
            try:
                result = await self.session.execute(stmt)
                row = result.mappings().first()
                await self.session.commit()
            except SQLAlchemyError as e:
                await self.session.rollback()
                raise StoreError(f"Image delete failed: {e}") from e

            return row_to_image(row) if row else None
