"""Shared helpers for interaction use cases."""

from uuid import UUID

from tube.application.usecase.base import parse_value
from tube.domain.value import TargetRef, TargetType


def parse_target(target_type: str | TargetType, target_id: str) -> TargetRef:
    """Parse a raw (type, id) pair into a target reference.

    Raises:
        ValidationError: If the type is unknown or the id is not a UUID
    """
    return TargetRef(
        target_type=parse_value(TargetType, target_type, "target type"),
        target_id=parse_value(UUID, target_id, "target id"),
    )
