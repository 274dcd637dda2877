"""Test configuration and fixtures."""

import os
from datetime import datetime
from uuid import uuid4

import logfire
import pytest

# Must be set before tube.config.Settings is first instantiated
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("AUTH__BCRYPT_ROUNDS", "4")

logfire.configure(send_to_logfire=False, console=False)

from tube.config import AuthSettings  # noqa: E402
from tube.domain.model import Comment, User, Video  # noqa: E402
from tube.domain.value import (  # noqa: E402
    CommentId,
    Email,
    Role,
    UserId,
    Username,
    VideoId,
)


def make_user(
    username: str = "alice",
    email: str = "alice@example.com",
    role: Role = Role.USER,
    is_active: bool = True,
    password_hash: str = "not-a-real-hash",
) -> User:
    """Build a user entity for tests."""
    now = datetime.now()
    return User(
        id=UserId(uuid4()),
        username=Username(username),
        email=Email(email),
        password_hash=password_hash,
        role=role,
        is_active=is_active,
        created_at=now,
        updated_at=now,
    )


def make_video(user_id: UserId | None = None, title: str = "Test video") -> Video:
    """Build a video entity with zero counters."""
    return Video(
        id=VideoId(uuid4()),
        user_id=user_id or UserId(uuid4()),
        title=title,
        likes_count=0,
        dislikes_count=0,
        created_at=datetime.now(),
    )


def make_comment(video_id: VideoId, user_id: UserId | None = None) -> Comment:
    """Build a comment entity with zero counters."""
    return Comment(
        id=CommentId(uuid4()),
        video_id=video_id,
        user_id=user_id or UserId(uuid4()),
        content="Nice video",
        likes_count=0,
        dislikes_count=0,
        created_at=datetime.now(),
    )


@pytest.fixture
def auth_settings() -> AuthSettings:
    """Auth settings with fast hashing and fixed secrets."""
    return AuthSettings(
        access_secret="test-access-secret",
        refresh_secret="test-refresh-secret",
        bcrypt_rounds=4,
        cookie_secure=False,
    )
