"""SQLAlchemy table definitions for Pinwall.

They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Column,
    ForeignKey,
    Index,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

metadata = MetaData()

# ============================================================================
# USERS TABLE (identity store)
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("external_id", String(255), nullable=False),  # GitHub account id
    Column("username", String(255), nullable=False),  # GitHub login
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("external_id", name="uq_users_external_id"),
    UniqueConstraint("username", name="uq_users_username"),
)

# ============================================================================
# IMAGES TABLE (resource store)
# ============================================================================
images_table = Table(
    "images",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("url", Text, nullable=False),
    Column("description", Text, nullable=False, server_default=""),
    # No cascade: deleting users is not supported
    Column(
        "owner_id",
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="RESTRICT"),
        nullable=False,
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index(
    "idx_images_owner_created_at",
    images_table.c.owner_id,
    images_table.c.created_at.desc(),
)
Index("idx_images_created_at", images_table.c.created_at.desc())
