"""Profile use cases."""

from .create_profile import (
    CreateProfileRequest,
    CreateProfileResponse,
    CreateProfileUseCase,
)
from .delete_profile import (
    DeleteProfileRequest,
    DeleteProfileResponse,
    DeleteProfileUseCase,
)
from .follow_profile import (
    FollowProfileUseCase,
    FollowRequest,
    FollowResponse,
    UnfollowProfileUseCase,
)
from .list_profiles import (
    ListProfilesRequest,
    ListProfilesResponse,
    ListProfilesUseCase,
    ProfileItem,
)

__all__ = [
    "CreateProfileRequest",
    "CreateProfileResponse",
    "CreateProfileUseCase",
    "DeleteProfileRequest",
    "DeleteProfileResponse",
    "DeleteProfileUseCase",
    "FollowProfileUseCase",
    "FollowRequest",
    "FollowResponse",
    "ListProfilesRequest",
    "ListProfilesResponse",
    "ListProfilesUseCase",
    "ProfileItem",
    "UnfollowProfileUseCase",
]
