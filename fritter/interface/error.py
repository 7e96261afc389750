"""Translation of domain errors into HTTP errors."""

import logfire
from fastapi import HTTPException, status

from fritter.domain.error import (
    BusinessRuleViolationError,
    CascadeDeletionError,
    DomainError,
    InvalidTransitionError,
    NotAuthorizedError,
    NotFoundError,
    PersistenceError,
    ValidationError,
)


def http_error_from(error: DomainError) -> HTTPException:
    """Translate a domain error into the HTTP error returned to clients.

    Args:
        error: Domain error raised by a use case

    Returns:
        HTTPException with the matching status code
    """
    if isinstance(error, NotFoundError):
        logfire.warn("Resource not found", error=str(error))
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(error))

    if isinstance(error, NotAuthorizedError):
        logfire.warn("Unauthorized modification attempt", error=str(error))
        return HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(error))

    if isinstance(error, (ValidationError, BusinessRuleViolationError)):
        logfire.warn("Request rejected", error=str(error))
        return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(error))

    if isinstance(error, CascadeDeletionError):
        logfire.error(
            "Cascade deletion incomplete",
            failed=[str(freet_id) for freet_id in error.failed_ids],
        )
        return HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(error)
        )

    if isinstance(error, (InvalidTransitionError, PersistenceError)):
        logfire.error("Engagement update failed", error=str(error))
        return HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(error)
        )

    logfire.error("Unhandled domain error", error=str(error))
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(error)
    )
