"""Like/dislike routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query, Request

from tube.application.usecase.interaction import (
    CastVoteRequest,
    CastVoteResponse,
    CastVoteUseCase,
    GetLikeStatusRequest,
    GetLikeStatusResponse,
    GetLikeStatusUseCase,
)
from tube.config import AuthSettings
from tube.domain.service import AuthGuard
from tube.domain.value import TargetType, VoteKind
from tube.interface.api.deps import authenticate

router = APIRouter(tags=["interactions"], route_class=DishkaRoute)


async def _cast(
    http_request: Request,
    target_type: TargetType,
    target_id: str,
    kind: VoteKind,
    cast_vote_use_case: CastVoteUseCase,
    auth_guard: AuthGuard,
    auth_settings: AuthSettings,
) -> CastVoteResponse:
    user = await authenticate(http_request, auth_guard, auth_settings)
    return await cast_vote_use_case.execute(
        user,
        CastVoteRequest(target_type=target_type, target_id=target_id, kind=kind),
    )


@router.post("/videos/{video_id}/like", response_model=CastVoteResponse)
async def like_video(
    video_id: str,
    http_request: Request,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
    auth_guard: FromDishka[AuthGuard],
    auth_settings: FromDishka[AuthSettings],
) -> CastVoteResponse:
    """Toggle a like on a video.

    Requires authentication. Liking an already liked video removes the
    like; liking a disliked video switches the vote.

    Args:
        video_id: Video UUID
        http_request: Incoming request
        cast_vote_use_case: Cast vote use case from DI
        auth_guard: Auth guard from DI
        auth_settings: Auth settings from DI

    Returns:
        Transition message and the video's counters
    """
    return await _cast(
        http_request,
        TargetType.VIDEO,
        video_id,
        VoteKind.LIKE,
        cast_vote_use_case,
        auth_guard,
        auth_settings,
    )


@router.post("/videos/{video_id}/dislike", response_model=CastVoteResponse)
async def dislike_video(
    video_id: str,
    http_request: Request,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
    auth_guard: FromDishka[AuthGuard],
    auth_settings: FromDishka[AuthSettings],
) -> CastVoteResponse:
    """Toggle a dislike on a video.

    Requires authentication.
    """
    return await _cast(
        http_request,
        TargetType.VIDEO,
        video_id,
        VoteKind.DISLIKE,
        cast_vote_use_case,
        auth_guard,
        auth_settings,
    )


@router.post("/comments/{comment_id}/like", response_model=CastVoteResponse)
async def like_comment(
    comment_id: str,
    http_request: Request,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
    auth_guard: FromDishka[AuthGuard],
    auth_settings: FromDishka[AuthSettings],
) -> CastVoteResponse:
    """Toggle a like on a comment.

    Requires authentication.
    """
    return await _cast(
        http_request,
        TargetType.COMMENT,
        comment_id,
        VoteKind.LIKE,
        cast_vote_use_case,
        auth_guard,
        auth_settings,
    )


@router.post("/comments/{comment_id}/dislike", response_model=CastVoteResponse)
async def dislike_comment(
    comment_id: str,
    http_request: Request,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
    auth_guard: FromDishka[AuthGuard],
    auth_settings: FromDishka[AuthSettings],
) -> CastVoteResponse:
    """Toggle a dislike on a comment.

    Requires authentication.
    """
    return await _cast(
        http_request,
        TargetType.COMMENT,
        comment_id,
        VoteKind.DISLIKE,
        cast_vote_use_case,
        auth_guard,
        auth_settings,
    )


@router.get("/interactions/like-status", response_model=GetLikeStatusResponse)
async def get_like_status(
    http_request: Request,
    get_like_status_use_case: FromDishka[GetLikeStatusUseCase],
    auth_guard: FromDishka[AuthGuard],
    auth_settings: FromDishka[AuthSettings],
    target_id: str = Query(...),
    target_type: str = Query(...),
) -> GetLikeStatusResponse:
    """Get whether the caller likes or dislikes a target.

    Requires authentication.

    Args:
        http_request: Incoming request
        get_like_status_use_case: Get like status use case from DI
        auth_guard: Auth guard from DI
        auth_settings: Auth settings from DI
        target_id: Target UUID
        target_type: "video" or "comment"

    Returns:
        Liked and disliked flags
    """
    user = await authenticate(http_request, auth_guard, auth_settings)
    return await get_like_status_use_case.execute(
        user, GetLikeStatusRequest(target_type=target_type, target_id=target_id)
    )
