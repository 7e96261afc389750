"""User routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Response

from fritter.application.usecase.user import (
    DeleteAccountRequest,
    DeleteAccountResponse,
    DeleteAccountUseCase,
)
from fritter.domain.error import DomainError
from fritter.domain.service import JWTService
from fritter.interface.api.auth import require_user_id
from fritter.interface.error import http_error_from

router = APIRouter(prefix="/users", tags=["users"], route_class=DishkaRoute)


@router.delete("/me", response_model=DeleteAccountResponse)
async def delete_account(
    response: Response,
    delete_account_use_case: FromDishka[DeleteAccountUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> DeleteAccountResponse:
    """Delete every freet, reflection and profile of the caller.

    The session cookie is cleared on success.
    """
    user_id = require_user_id(jwt_service, auth_token, "delete your account")

    try:
        result = await delete_account_use_case.execute(
            DeleteAccountRequest(user_id=user_id)
        )
    except DomainError as e:
        raise http_error_from(e) from e

    response.delete_cookie("auth_token")
    return result
