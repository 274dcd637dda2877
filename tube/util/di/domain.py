"""Domain layer DI providers."""

from dishka import Scope, provide

from tube.config import AuthSettings, EngagementSettings, SessionStoreSettings
from tube.domain.repository import (
    CommentRepository,
    EngagementCounterRepository,
    SessionStore,
    TransactionManager,
    UserRepository,
    VideoRepository,
    VoteRepository,
)
from tube.domain.service import (
    AuthGuard,
    AuthService,
    EngagementLedger,
    JWTService,
    PasswordHasher,
    SessionService,
    UserService,
)
from tube.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_password_hasher(self, auth_settings: AuthSettings) -> PasswordHasher:
        """Provide password hashing service."""
        return PasswordHasher(auth_settings=auth_settings)

    @provide
    def get_session_service(
        self,
        session_store: SessionStore,
        session_settings: SessionStoreSettings,
        auth_settings: AuthSettings,
    ) -> SessionService:
        """Provide refresh-token session service."""
        return SessionService(
            session_store=session_store,
            session_settings=session_settings,
            auth_settings=auth_settings,
        )

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)

    @provide
    def get_auth_guard(
        self, jwt_service: JWTService, user_repository: UserRepository
    ) -> AuthGuard:
        """Provide request authentication guard."""
        return AuthGuard(jwt_service=jwt_service, user_repository=user_repository)

    @provide
    def get_auth_service(
        self,
        user_service: UserService,
        password_hasher: PasswordHasher,
        jwt_service: JWTService,
        session_service: SessionService,
    ) -> AuthService:
        """Provide authentication domain service."""
        return AuthService(
            user_service=user_service,
            password_hasher=password_hasher,
            jwt_service=jwt_service,
            session_service=session_service,
        )

    @provide
    def get_engagement_ledger(
        self,
        vote_repository: VoteRepository,
        counter_repository: EngagementCounterRepository,
        transaction_manager: TransactionManager,
        video_repository: VideoRepository,
        comment_repository: CommentRepository,
        engagement_settings: EngagementSettings,
    ) -> EngagementLedger:
        """Provide engagement ledger domain service."""
        return EngagementLedger(
            vote_repository=vote_repository,
            counter_repository=counter_repository,
            transaction_manager=transaction_manager,
            video_repository=video_repository,
            comment_repository=comment_repository,
            engagement_settings=engagement_settings,
        )
