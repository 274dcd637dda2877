"""Administration use cases."""

from .set_user_active import (
    SetUserActiveRequest,
    SetUserActiveResponse,
    SetUserActiveUseCase,
)

__all__ = ["SetUserActiveRequest", "SetUserActiveResponse", "SetUserActiveUseCase"]
