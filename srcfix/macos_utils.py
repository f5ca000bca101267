import os
import platform
import sys

from hotlog import get_logger

logger = get_logger(__name__)

CATALINA_RELEASE = (10, 15)
FORCE_PLATFORM_ENV = 'SRCFIX_FORCE_PLATFORM'

_TRUTHY = {'1', 'true', 'yes', 'on'}
_FALSY = {'0', 'false', 'no', 'off'}


def _parse_release(release: str) -> tuple[int, ...]:
    """Parse a dotted macOS release string such as '10.15.7' into integers."""
    parts: list[int] = []
    for part in release.split('.'):
        if not part.isdigit():
            break
        parts.append(int(part))
    return tuple(parts)


def is_macos_catalina() -> bool:
    """Check if the running host is macOS Catalina (10.15) or a later release."""
    if sys.platform != 'darwin':
        return False
    release = platform.mac_ver()[0]
    return _parse_release(release)[:2] >= CATALINA_RELEASE


def platform_override() -> bool | None:
    """Read the forced platform signal from the environment.

    Returns:
        True or False when SRCFIX_FORCE_PLATFORM holds a recognised value,
        None when it is unset or unrecognised.
    """
    raw = os.environ.get(FORCE_PLATFORM_ENV)
    if raw is None:
        return None
    value = raw.strip().lower()
    if value in _TRUTHY:
        return True
    if value in _FALSY:
        return False
    logger.warning('unrecognised_platform_override', env=FORCE_PLATFORM_ENV, value=raw)
    return None


def detect_affected_platform() -> bool:
    """Return whether source paths on this host need the /Volumes rewrite."""
    override = platform_override()
    if override is not None:
        return override
    return is_macos_catalina()
