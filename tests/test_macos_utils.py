import pytest
from pytest_mock import MockerFixture

from srcfix.macos_utils import (
    FORCE_PLATFORM_ENV,
    detect_affected_platform,
    is_macos_catalina,
    platform_override,
)


def mock_mac(mocker: MockerFixture, release: str) -> None:
    """Pretend to run on macOS with the given release."""
    mocker.patch('srcfix.macos_utils.sys.platform', 'darwin')
    mocker.patch(
        'srcfix.macos_utils.platform.mac_ver',
        return_value=(release, ('', '', ''), 'x86_64'),
    )


@pytest.mark.parametrize(
    ('release', 'expected'),
    [
        ('10.15', True),
        ('10.15.7', True),
        ('10.16', True),
        ('11.2.3', True),
        ('14.0', True),
        ('10.14.6', False),
        ('10.1', False),
        ('', False),
    ],
)
def test_is_macos_catalina_by_release(mocker: MockerFixture, release: str, expected: bool):
    """Test Catalina and every later release count, earlier ones do not."""
    mock_mac(mocker, release)
    assert is_macos_catalina() is expected


def test_is_macos_catalina_false_off_darwin(mocker: MockerFixture):
    """Test non-macOS hosts never report Catalina."""
    mocker.patch('srcfix.macos_utils.sys.platform', 'linux')
    mac_ver = mocker.patch('srcfix.macos_utils.platform.mac_ver')

    assert is_macos_catalina() is False
    mac_ver.assert_not_called()


@pytest.mark.parametrize(
    ('raw', 'expected'),
    [
        ('1', True),
        ('TRUE', True),
        (' yes ', True),
        ('0', False),
        ('false', False),
        ('off', False),
        ('maybe', None),
    ],
)
def test_platform_override_values(monkeypatch: pytest.MonkeyPatch, raw: str, expected: bool | None):
    """Test recognised override values and the fallback for anything else."""
    monkeypatch.setenv(FORCE_PLATFORM_ENV, raw)
    assert platform_override() is expected


def test_platform_override_unset():
    """Test no override when the variable is absent."""
    assert platform_override() is None


def test_detect_affected_platform_prefers_override(monkeypatch: pytest.MonkeyPatch, mocker: MockerFixture):
    """Test the environment override wins over host detection."""
    mock_mac(mocker, '10.15.7')
    monkeypatch.setenv(FORCE_PLATFORM_ENV, 'no')

    assert detect_affected_platform() is False


def test_detect_affected_platform_falls_back_to_host(mocker: MockerFixture):
    """Test host detection is used without an override."""
    mock_mac(mocker, '10.15.7')
    assert detect_affected_platform() is True
