"""Domain layer DI providers."""

from dishka import Scope, provide

from fritter.config import AuthSettings, ControversySettings
from fritter.domain.repository import (
    EngagementRepository,
    FreetRepository,
    ProfileRepository,
    ReflectionRepository,
)
from fritter.domain.service import (
    EngagementService,
    FreetService,
    JWTService,
    ProfileService,
    ReflectionService,
)
from fritter.util.di.base import ProviderBase


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
    def get_engagement_service(
        self,
        engagement_repository: EngagementRepository,
        freet_repository: FreetRepository,
        controversy_settings: ControversySettings,
    ) -> EngagementService:
        """Provide engagement domain service."""
        return EngagementService(
            engagement_repository=engagement_repository,
            freet_repository=freet_repository,
            controversy_settings=controversy_settings,
        )

    @provide
    def get_freet_service(
        self,
        freet_repository: FreetRepository,
        engagement_service: EngagementService,
    ) -> FreetService:
        """Provide freet domain service."""
        return FreetService(
            freet_repository=freet_repository,
            engagement_service=engagement_service,
        )

    @provide
    def get_profile_service(
        self, profile_repository: ProfileRepository, freet_service: FreetService
    ) -> ProfileService:
        """Provide profile domain service."""
        return ProfileService(
            profile_repository=profile_repository, freet_service=freet_service
        )

    @provide
    def get_reflection_service(
        self, reflection_repository: ReflectionRepository
    ) -> ReflectionService:
        """Provide reflection domain service."""
        return ReflectionService(reflection_repository=reflection_repository)
