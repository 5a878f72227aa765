"""Domain value objects for Pinwall.

Value objects are immutable and defined by their values, not identity.
"""

from pydantic import field_validator

from pinwall.domain.value.common import RootValueObject, ValueObject


class Username(RootValueObject[str]):
    """Display name of a user, taken from the identity provider login.

    Unique across Pinwall.
    """

    @field_validator("root")
    @classmethod
    def validate_username(cls, v: str) -> str:
        """Validate username is not empty and within length limits."""
        if len(v) < 1 or len(v) > 255:
            raise ValueError("Username must be 1-255 characters")
        return v


class ImageUrl(RootValueObject[str]):
    """Remote location of an image.

    Only the lexical shape is checked: the URL must be non-blank. Whether it
    points at anything displayable is the client's business.
    """

    @field_validator("root")
    @classmethod
    def validate_url(cls, v: str) -> str:
        """Strip surrounding whitespace and reject blank URLs."""
        v = v.strip()
        if not v:
            raise ValueError("Image URL is required")
        if len(v) > 2048:
            raise ValueError("Image URL must be at most 2048 characters")
        return v


class OAuthProviderInfo(ValueObject):
    """Profile returned by the external identity provider after login."""

    external_id: str  # Permanent provider user id
    username: str  # Login name, used as the Pinwall username
    display_name: str | None = None
    avatar_url: str | None = None
