"""Domain value objects for Pinwall."""

from pinwall.domain.value.identifiers import ImageId, SessionId, UserId
from pinwall.domain.value.types import ImageUrl, OAuthProviderInfo, Username

__all__ = [
    # Identifiers
    "UserId",
    "ImageId",
    "SessionId",
    # Types
    "Username",
    "ImageUrl",
    "OAuthProviderInfo",
]
