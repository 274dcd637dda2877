"""Base use case."""

from abc import ABC, abstractmethod
from typing import Any, Callable, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

from tube.domain.error import ValidationError

V = TypeVar("V")


class BaseUseCase(ABC):
    """Base use case for orchestrating domain services."""

    @abstractmethod
    async def execute(self, request: Any) -> Any:
        pass


class CamelModel(BaseModel):
    """Response model rendered with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


def parse_value(factory: Callable[[Any], V], raw: Any, field: str) -> V:
    """Build a value object from raw request input.

    Args:
        factory: Value object type (or any callable raising on bad input)
        raw: Raw input value
        field: Field name used in the error message

    Returns:
        The parsed value

    Raises:
        ValidationError: If the input is malformed
    """
    try:
        return factory(raw)
    except PydanticValidationError as e:
        message = e.errors()[0]["msg"].removeprefix("Value error, ")
        raise ValidationError(f"Invalid {field}: {message}") from e
    except ValueError as e:
        raise ValidationError(f"Invalid {field}") from e
