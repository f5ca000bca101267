from .loader import load_settings
from .models import (
    CANONICAL_PREFIX,
    LEGACY_PREFIX,
    MOUNT_MARKER,
    FixerSettings,
)

__all__ = [
    'CANONICAL_PREFIX',
    'LEGACY_PREFIX',
    'MOUNT_MARKER',
    'FixerSettings',
    # Loader
    'load_settings',
]
