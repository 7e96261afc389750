"""Test configuration and fixtures."""

import logfire
import pytest

from fritter.config import Settings
from fritter.domain.value import UserId
from fritter.util.jwt import create_token

# Keep telemetry local during tests
logfire.configure(send_to_logfire=False, console=False)


@pytest.fixture
def auth_cookie():
    """Factory for session cookies accepted by the API."""

    def _cookie(user_id: UserId) -> dict[str, str]:
        return {"auth_token": create_token(str(user_id), Settings().auth)}

    return _cookie
