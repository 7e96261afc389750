"""Unit tests for provider selection."""

import pytest

from fritter.util.di import (
    PersistenceProvider,
    ProdConfigProvider,
    ProdPersistenceProvider,
    get_provider,
)
from fritter.util.di.base import ProviderBase
from fritter.util.error import DependencyInjectionError
from tests.di import MockPersistenceProvider


def test_concrete_provider_used_directly():
    """Providers without subclasses are returned as-is."""
    assert get_provider(ProdConfigProvider) is ProdConfigProvider


def test_mockable_provider_selection():
    """Mockable components pick the implementation by mock flag."""
    assert get_provider(PersistenceProvider) is ProdPersistenceProvider
    assert get_provider(PersistenceProvider, use_mock=True) is MockPersistenceProvider


def test_missing_implementation():
    """A component with no matching implementation is an error."""

    class LonelyProvider(ProviderBase):
        __mock_component__ = "lonely"

    class ProdLonelyProvider(LonelyProvider):
        __is_mock__ = False

    with pytest.raises(DependencyInjectionError, match="No mock implementation"):
        get_provider(LonelyProvider, use_mock=True)
