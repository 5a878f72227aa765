"""Test configuration and fixtures."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import logfire
import pytest

from pinwall.config import AuthSettings
from pinwall.domain.model import Image, User
from pinwall.domain.value import ImageId, ImageUrl, UserId, Username

# Keep spans local during tests
logfire.configure(send_to_logfire=False, console=False)


@pytest.fixture
def auth_settings() -> AuthSettings:
    """Auth settings with a fixed test secret."""
    return AuthSettings(session_secret="test-secret-with-at-least-32-bytes!!")


def make_user(username: str = "octocat", external_id: str | None = None) -> User:
    """Build a user with sensible defaults."""
    return User(
        id=UserId(uuid4()),
        external_id=external_id or f"gh-{username}",
        username=Username(username),
        created_at=datetime.now(timezone.utc),
    )


def make_image(
    owner_id: UserId,
    url: str = "https://example.com/cat.png",
    description: str = "",
    age: timedelta = timedelta(0),
) -> Image:
    """Build an image, optionally backdated by ``age``."""
    return Image(
        id=ImageId(uuid4()),
        url=ImageUrl(url),
        description=description,
        owner_id=owner_id,
        created_at=datetime.now(timezone.utc) - age,
    )
