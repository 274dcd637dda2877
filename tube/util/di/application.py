"""Application layer DI providers."""

from dishka import Scope, provide

from tube.application.usecase.admin import SetUserActiveUseCase
from tube.application.usecase.auth import (
    GetCurrentUserUseCase,
    LoginUseCase,
    LogoutUseCase,
    RefreshUseCase,
    SignupUseCase,
)
from tube.application.usecase.interaction import (
    CastVoteUseCase,
    GetLikeStatusUseCase,
    ReconcileCountersUseCase,
)
from tube.domain.service import (
    AuthService,
    EngagementLedger,
    SessionService,
    UserService,
)
from tube.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Auth use cases
    @provide(scope=Scope.REQUEST)
    def get_signup_use_case(self, auth_service: AuthService) -> SignupUseCase:
        """Provide signup use case."""
        return SignupUseCase(auth_service=auth_service)

    @provide(scope=Scope.REQUEST)
    def get_login_use_case(self, auth_service: AuthService) -> LoginUseCase:
        """Provide login use case."""
        return LoginUseCase(auth_service=auth_service)

    @provide(scope=Scope.REQUEST)
    def get_refresh_use_case(self, auth_service: AuthService) -> RefreshUseCase:
        """Provide refresh use case."""
        return RefreshUseCase(auth_service=auth_service)

    @provide(scope=Scope.REQUEST)
    def get_logout_use_case(self, auth_service: AuthService) -> LogoutUseCase:
        """Provide logout use case."""
        return LogoutUseCase(auth_service=auth_service)

    @provide(scope=Scope.REQUEST)
    def get_current_user_use_case(self) -> GetCurrentUserUseCase:
        """Provide get current user use case."""
        return GetCurrentUserUseCase()

    # Interaction use cases
    @provide(scope=Scope.REQUEST)
    def get_cast_vote_use_case(
        self, engagement_ledger: EngagementLedger
    ) -> CastVoteUseCase:
        """Provide cast vote use case."""
        return CastVoteUseCase(engagement_ledger=engagement_ledger)

    @provide(scope=Scope.REQUEST)
    def get_like_status_use_case(
        self, engagement_ledger: EngagementLedger
    ) -> GetLikeStatusUseCase:
        """Provide get like status use case."""
        return GetLikeStatusUseCase(engagement_ledger=engagement_ledger)

    @provide(scope=Scope.REQUEST)
    def get_reconcile_counters_use_case(
        self, engagement_ledger: EngagementLedger
    ) -> ReconcileCountersUseCase:
        """Provide reconcile counters use case."""
        return ReconcileCountersUseCase(engagement_ledger=engagement_ledger)

    # Admin use cases
    @provide(scope=Scope.REQUEST)
    def get_set_user_active_use_case(
        self, user_service: UserService, session_service: SessionService
    ) -> SetUserActiveUseCase:
        """Provide set user active use case."""
        return SetUserActiveUseCase(
            user_service=user_service, session_service=session_service
        )
