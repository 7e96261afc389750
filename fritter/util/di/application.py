"""Application layer DI providers."""

from dishka import Scope, provide

from fritter.application.usecase.engagement import (
    GetEngagementUseCase,
    ListEngagementsUseCase,
    ToggleVoteUseCase,
)
from fritter.application.usecase.freet import (
    CreateFreetUseCase,
    DeleteFreetUseCase,
    GetFreetUseCase,
    ListFreetsUseCase,
    UpdateFreetUseCase,
)
from fritter.application.usecase.profile import (
    CreateProfileUseCase,
    DeleteProfileUseCase,
    FollowProfileUseCase,
    ListProfilesUseCase,
    UnfollowProfileUseCase,
)
from fritter.application.usecase.reflection import (
    CreateReflectionUseCase,
    DeleteReflectionUseCase,
    ListReflectionsUseCase,
    UpdateReflectionUseCase,
)
from fritter.application.usecase.user import DeleteAccountUseCase
from fritter.domain.service import (
    EngagementService,
    FreetService,
    ProfileService,
    ReflectionService,
)
from fritter.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Engagement use cases
    @provide(scope=Scope.REQUEST)
    def get_toggle_vote_use_case(
        self, engagement_service: EngagementService
    ) -> ToggleVoteUseCase:
        """Provide toggle vote use case."""
        return ToggleVoteUseCase(engagement_service=engagement_service)

    @provide(scope=Scope.REQUEST)
    def get_engagement_use_case(
        self, engagement_service: EngagementService
    ) -> GetEngagementUseCase:
        """Provide get engagement use case."""
        return GetEngagementUseCase(engagement_service=engagement_service)

    @provide(scope=Scope.REQUEST)
    def get_list_engagements_use_case(
        self, engagement_service: EngagementService
    ) -> ListEngagementsUseCase:
        """Provide list engagements use case."""
        return ListEngagementsUseCase(engagement_service=engagement_service)

    # Freet use cases
    @provide(scope=Scope.REQUEST)
    def get_create_freet_use_case(
        self, freet_service: FreetService, profile_service: ProfileService
    ) -> CreateFreetUseCase:
        """Provide create freet use case."""
        return CreateFreetUseCase(
            freet_service=freet_service, profile_service=profile_service
        )

    @provide(scope=Scope.REQUEST)
    def get_freet_use_case(self, freet_service: FreetService) -> GetFreetUseCase:
        """Provide get freet use case."""
        return GetFreetUseCase(freet_service=freet_service)

    @provide(scope=Scope.REQUEST)
    def get_list_freets_use_case(
        self, freet_service: FreetService
    ) -> ListFreetsUseCase:
        """Provide list freets use case."""
        return ListFreetsUseCase(freet_service=freet_service)

    @provide(scope=Scope.REQUEST)
    def get_update_freet_use_case(
        self, freet_service: FreetService
    ) -> UpdateFreetUseCase:
        """Provide update freet use case."""
        return UpdateFreetUseCase(freet_service=freet_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_freet_use_case(
        self, freet_service: FreetService
    ) -> DeleteFreetUseCase:
        """Provide delete freet use case."""
        return DeleteFreetUseCase(freet_service=freet_service)

    # Profile use cases
    @provide(scope=Scope.REQUEST)
    def get_create_profile_use_case(
        self, profile_service: ProfileService
    ) -> CreateProfileUseCase:
        """Provide create profile use case."""
        return CreateProfileUseCase(profile_service=profile_service)

    @provide(scope=Scope.REQUEST)
    def get_list_profiles_use_case(
        self, profile_service: ProfileService
    ) -> ListProfilesUseCase:
        """Provide list profiles use case."""
        return ListProfilesUseCase(profile_service=profile_service)

    @provide(scope=Scope.REQUEST)
    def get_follow_profile_use_case(
        self, profile_service: ProfileService
    ) -> FollowProfileUseCase:
        """Provide follow profile use case."""
        return FollowProfileUseCase(profile_service=profile_service)

    @provide(scope=Scope.REQUEST)
    def get_unfollow_profile_use_case(
        self, profile_service: ProfileService
    ) -> UnfollowProfileUseCase:
        """Provide unfollow profile use case."""
        return UnfollowProfileUseCase(profile_service=profile_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_profile_use_case(
        self, profile_service: ProfileService, reflection_service: ReflectionService
    ) -> DeleteProfileUseCase:
        """Provide delete profile use case."""
        return DeleteProfileUseCase(
            profile_service=profile_service, reflection_service=reflection_service
        )

    # Reflection use cases
    @provide(scope=Scope.REQUEST)
    def get_create_reflection_use_case(
        self, reflection_service: ReflectionService, profile_service: ProfileService
    ) -> CreateReflectionUseCase:
        """Provide create reflection use case."""
        return CreateReflectionUseCase(
            reflection_service=reflection_service, profile_service=profile_service
        )

    @provide(scope=Scope.REQUEST)
    def get_list_reflections_use_case(
        self, reflection_service: ReflectionService
    ) -> ListReflectionsUseCase:
        """Provide list reflections use case."""
        return ListReflectionsUseCase(reflection_service=reflection_service)

    @provide(scope=Scope.REQUEST)
    def get_update_reflection_use_case(
        self, reflection_service: ReflectionService
    ) -> UpdateReflectionUseCase:
        """Provide update reflection use case."""
        return UpdateReflectionUseCase(reflection_service=reflection_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_reflection_use_case(
        self, reflection_service: ReflectionService
    ) -> DeleteReflectionUseCase:
        """Provide delete reflection use case."""
        return DeleteReflectionUseCase(reflection_service=reflection_service)

    # User use cases
    @provide(scope=Scope.REQUEST)
    def get_delete_account_use_case(
        self,
        freet_service: FreetService,
        reflection_service: ReflectionService,
        profile_service: ProfileService,
    ) -> DeleteAccountUseCase:
        """Provide delete account use case."""
        return DeleteAccountUseCase(
            freet_service=freet_service,
            reflection_service=reflection_service,
            profile_service=profile_service,
        )
