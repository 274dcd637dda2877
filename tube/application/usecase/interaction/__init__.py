"""Interaction (like/dislike) use cases."""

from .cast_vote import CastVoteRequest, CastVoteResponse, CastVoteUseCase
from .get_like_status import (
    GetLikeStatusRequest,
    GetLikeStatusResponse,
    GetLikeStatusUseCase,
)
from .reconcile_counters import (
    ReconcileCountersRequest,
    ReconcileCountersResponse,
    ReconcileCountersUseCase,
)

__all__ = [
    "CastVoteRequest",
    "CastVoteResponse",
    "CastVoteUseCase",
    "GetLikeStatusRequest",
    "GetLikeStatusResponse",
    "GetLikeStatusUseCase",
    "ReconcileCountersRequest",
    "ReconcileCountersResponse",
    "ReconcileCountersUseCase",
]
