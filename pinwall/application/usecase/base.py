"""Base use case and response model."""

from abc import ABC, abstractmethod
from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class BaseUseCase(ABC):
    """Base use case for orchestrating domain services."""

    @abstractmethod
    async def execute(self, request: Any) -> Any:
        pass


class ResponseModel(BaseModel):
    """Use case response serialized with camelCase keys (``ownerId``)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
