"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from tube.domain.model import Comment, User, Video, Vote
from tube.domain.value import (
    CommentId,
    Email,
    Role,
    TargetType,
    UserId,
    Username,
    VideoId,
    VoteId,
    VoteKind,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(_uuid(row["id"])),
        username=Username(row["username"]),
        email=Email(row["email"]),
        password_hash=row["password_hash"],
        role=Role(row["role"]),
        is_active=row["is_active"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict.

    Args:
        user: User domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return {
        "id": user.id,
        "username": user.username.root,
        "email": user.email.root,
        "password_hash": user.password_hash,
        "role": user.role.value,
        "is_active": user.is_active,
        "created_at": user.created_at,
        "updated_at": user.updated_at,
    }


def row_to_video(row: Dict[str, Any]) -> Video:
    """Convert database row to Video domain model."""
    return Video(
        id=VideoId(_uuid(row["id"])),
        user_id=UserId(_uuid(row["user_id"])),
        title=row["title"],
        likes_count=row["likes_count"],
        dislikes_count=row["dislikes_count"],
        created_at=row["created_at"],
    )


def video_to_dict(video: Video) -> Dict[str, Any]:
    """Convert Video domain model to database dict."""
    return video.model_dump()


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model."""
    return Comment(
        id=CommentId(_uuid(row["id"])),
        video_id=VideoId(_uuid(row["video_id"])),
        user_id=UserId(_uuid(row["user_id"])),
        content=row["content"],
        likes_count=row["likes_count"],
        dislikes_count=row["dislikes_count"],
        created_at=row["created_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict."""
    return comment.model_dump()


def row_to_vote(row: Dict[str, Any]) -> Vote:
    """Convert database row to Vote domain model.

    Args:
        row: Database row as dict

    Returns:
        Vote domain model
    """
    return Vote(
        id=VoteId(_uuid(row["id"])),
        user_id=UserId(_uuid(row["user_id"])),
        target_type=TargetType(row["target_type"]),
        target_id=_uuid(row["target_id"]),
        kind=VoteKind(row["kind"]),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def vote_to_dict(vote: Vote) -> Dict[str, Any]:
    """Convert Vote domain model to database dict.

    Args:
        vote: Vote domain model

    Returns:
        Dict suitable for database insertion
    """
    return {
        "id": vote.id,
        "user_id": vote.user_id,
        "target_type": vote.target_type.value,
        "target_id": vote.target_id,
        "kind": vote.kind.value,
        "created_at": vote.created_at,
        "updated_at": vote.updated_at,
    }
