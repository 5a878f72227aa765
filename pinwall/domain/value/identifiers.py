"""Strongly typed identifiers for Pinwall entities."""

from typing import NewType
from uuid import UUID

UserId = NewType("UserId", UUID)
ImageId = NewType("ImageId", UUID)
SessionId = NewType("SessionId", UUID)
