"""User aggregate root.

The user record is the identity that access tokens point at. Only its id,
email, role and active flag matter to request authentication.
"""

from datetime import datetime

from pydantic import Field

from tube.domain.model.common import DomainModel
from tube.domain.value import Email, Role, UserId, Username


class User(DomainModel):
    """User aggregate root.

    Business rules:
    - Email is unique (case-insensitive, stored lower-cased)
    - Username is unique
    - Deactivated users cannot authenticate, even with an unexpired token
    """

    id: UserId
    username: Username
    email: Email
    password_hash: str = Field(repr=False)
    role: Role = Role.USER
    is_active: bool = True
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
