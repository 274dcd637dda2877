"""Domain value objects for Tube.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

import re
from enum import Enum
from uuid import UUID

from pydantic import field_validator

from tube.domain.value.common import RootValueObject, ValueObject


class Role(str, Enum):
    """Account role carried in access tokens."""

    USER = "user"
    ADMIN = "admin"


class TargetType(str, Enum):
    """Type of entity that can be liked or disliked."""

    VIDEO = "video"
    COMMENT = "comment"


class VoteKind(str, Enum):
    """Stance of a vote."""

    LIKE = "like"
    DISLIKE = "dislike"

    @property
    def counter_field(self) -> "CounterField":
        """Counter on the target that tracks this kind."""
        return (
            CounterField.LIKES if self is VoteKind.LIKE else CounterField.DISLIKES
        )


class CounterField(str, Enum):
    """Denormalized engagement counter columns on a target."""

    LIKES = "likes_count"
    DISLIKES = "dislikes_count"


class VoteOutcome(str, Enum):
    """Transition taken by a single cast of a vote.

    NoVote -> Liked/Disliked is RECORDED, same kind again is RETRACTED,
    opposite kind is SWITCHED.
    """

    RECORDED = "Recorded"
    RETRACTED = "Retracted"
    SWITCHED = "Switched"


class TokenKind(str, Enum):
    """Kind of bearer token. Each kind has its own signing secret."""

    ACCESS = "access"
    REFRESH = "refresh"


class Email(RootValueObject[str]):
    """Account email address, normalized to lower case."""

    @field_validator("root")
    @classmethod
    def validate_email(cls, v: str) -> str:
        """Validate email shape and normalize case."""
        v = v.strip().lower()
        if len(v) > 255:
            raise ValueError("Email must be at most 255 characters")
        if not re.match(r"^[^@\s]+@[^@\s]+\.[^@\s]+$", v):
            raise ValueError("Email address is not valid")
        return v


class Username(RootValueObject[str]):
    """Public account name.

    3-50 characters: letters, digits, underscores, dots and hyphens.
    """

    @field_validator("root")
    @classmethod
    def validate_username(cls, v: str) -> str:
        """Validate username format."""
        if not re.match(r"^[A-Za-z0-9_.-]{3,50}$", v):
            raise ValueError(
                "Username must be 3-50 characters of letters, digits, '_', '.' or '-'"
            )
        return v


class TargetRef(ValueObject):
    """Reference to a likeable entity."""

    target_type: TargetType
    target_id: UUID  # VideoId or CommentId (both are UUIDs)

    def __str__(self) -> str:
        return f"{self.target_type.value}:{self.target_id}"
