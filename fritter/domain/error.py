"""Domain layer errors."""

from collections.abc import Iterable
from uuid import UUID


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class BusinessRuleViolationError(DomainError):
    """Business rule violation error."""

    pass


class NotAuthorizedError(DomainError):
    """Raised when a user attempts to modify content they don't own."""

    def __init__(self, resource: str, resource_id: str, user_id: str):
        super().__init__(
            f"User {user_id} is not authorized to modify {resource} {resource_id}"
        )


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class InvalidTransitionError(DomainError):
    """Raised when a voter's prior state on an engagement record is unrecognized.

    The toggle engine is total over Neutral/Liked/Disliked, so this only
    fires for a record that already violates its invariants.
    """

    def __init__(self, freet_id: str, voter_id: str):
        self.freet_id = freet_id
        self.voter_id = voter_id
        super().__init__(
            f"Voter {voter_id} has no valid vote state on freet {freet_id}"
        )


class PersistenceError(DomainError):
    """Raised when the store is unavailable or rejects a write."""

    pass


class ConcurrentUpdateError(PersistenceError):
    """Raised when an engagement write keeps losing to concurrent writers."""

    def __init__(self, freet_id: str, attempts: int):
        self.freet_id = freet_id
        self.attempts = attempts
        super().__init__(
            f"Engagement for freet {freet_id} changed concurrently "
            f"{attempts} times in a row"
        )


class CascadeDeletionError(DomainError):
    """Raised when a cascade deletion left some freets behind.

    Carries the ids of the freets that still exist so the caller can retry.
    """

    def __init__(self, failed_ids: Iterable[UUID]):
        self.failed_ids = list(failed_ids)
        super().__init__(
            "Cascade deletion left freets behind: "
            + ", ".join(str(freet_id) for freet_id in self.failed_ids)
        )
