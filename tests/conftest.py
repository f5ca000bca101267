from collections.abc import Callable

import pytest
from pytest_mock import MockerFixture

from srcfix.config.models import FixerSettings
from srcfix.fixer import PathFixer
from srcfix.macos_utils import FORCE_PLATFORM_ENV


@pytest.fixture(autouse=True)
def _clear_platform_override(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the host environment from forcing the platform signal."""
    monkeypatch.delenv(FORCE_PLATFORM_ENV, raising=False)


@pytest.fixture
def mock_resolver(mocker: MockerFixture):
    """Resolver double that records calls and returns a sentinel by default."""
    resolver = mocker.Mock()
    resolver.resolve.return_value = mocker.sentinel.resolved
    return resolver


@pytest.fixture
def make_fixer(mock_resolver) -> Callable[..., PathFixer]:
    """Fixture that builds fixers with a fixed platform signal and the mock resolver."""

    def _make(*, affected: bool, settings: FixerSettings | None = None) -> PathFixer:
        return PathFixer(
            is_affected_platform=lambda: affected,
            resolver=mock_resolver,
            settings=settings,
        )

    return _make
