"""Domain value objects for Tube."""

from tube.domain.value.identifiers import (
    CommentId,
    UserId,
    VideoId,
    VoteId,
)
from tube.domain.value.types import (
    CounterField,
    Email,
    Role,
    TargetRef,
    TargetType,
    TokenKind,
    Username,
    VoteKind,
    VoteOutcome,
)

__all__ = [
    # Identifiers
    "UserId",
    "VideoId",
    "CommentId",
    "VoteId",
    # Types
    "CounterField",
    "Email",
    "Role",
    "TargetRef",
    "TargetType",
    "TokenKind",
    "Username",
    "VoteKind",
    "VoteOutcome",
]
