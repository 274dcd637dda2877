"""Administration routes."""

import logging

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request

from tube.application.usecase.admin import (
    SetUserActiveRequest,
    SetUserActiveResponse,
    SetUserActiveUseCase,
)
from tube.application.usecase.base import CamelModel
from tube.application.usecase.interaction import (
    ReconcileCountersRequest,
    ReconcileCountersResponse,
    ReconcileCountersUseCase,
)
from tube.config import AuthSettings
from tube.domain.service import AuthGuard
from tube.interface.api.deps import require_admin

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admin", tags=["admin"], route_class=DishkaRoute)


class SetUserActiveBody(CamelModel):
    """Body of the set user active request."""

    is_active: bool


@router.post(
    "/engagement/{target_type}/{target_id}/reconcile",
    response_model=ReconcileCountersResponse,
)
async def reconcile_counters(
    target_type: str,
    target_id: str,
    http_request: Request,
    reconcile_use_case: FromDishka[ReconcileCountersUseCase],
    auth_guard: FromDishka[AuthGuard],
    auth_settings: FromDishka[AuthSettings],
) -> ReconcileCountersResponse:
    """Recompute a target's like/dislike counters from its vote records.

    Requires the admin role.

    Args:
        target_type: "video" or "comment"
        target_id: Target UUID
        http_request: Incoming request
        reconcile_use_case: Reconcile counters use case from DI
        auth_guard: Auth guard from DI
        auth_settings: Auth settings from DI

    Returns:
        Corrected counters
    """
    admin = await require_admin(http_request, auth_guard, auth_settings)
    logger.info(f"Admin {admin.id} reconciling {target_type}:{target_id}")
    return await reconcile_use_case.execute(
        ReconcileCountersRequest(target_type=target_type, target_id=target_id)
    )


@router.post("/users/{user_id}/active", response_model=SetUserActiveResponse)
async def set_user_active(
    user_id: str,
    body: SetUserActiveBody,
    http_request: Request,
    set_user_active_use_case: FromDishka[SetUserActiveUseCase],
    auth_guard: FromDishka[AuthGuard],
    auth_settings: FromDishka[AuthSettings],
) -> SetUserActiveResponse:
    """Deactivate or reactivate an account.

    Requires the admin role.

    Args:
        user_id: Target user UUID
        body: New active flag
        http_request: Incoming request
        set_user_active_use_case: Set user active use case from DI
        auth_guard: Auth guard from DI
        auth_settings: Auth settings from DI

    Returns:
        The account's new state
    """
    admin = await require_admin(http_request, auth_guard, auth_settings)
    logger.info(f"Admin {admin.id} setting user {user_id} active={body.is_active}")
    return await set_user_active_use_case.execute(
        SetUserActiveRequest(user_id=user_id, is_active=body.is_active)
    )
