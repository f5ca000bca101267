"""Rewrite paths reported under the macOS Catalina /Volumes mount.

On Catalina `/google/src` is a symlink to `/Volumes/google/src`, so canonical
paths come back with the `/Volumes` prefix and no longer pass prefix checks
against `/google/src`. PathFixer strips that prefix for plain strings, virtual
file handles and native `Path` objects, and is a no-op on every other platform.
"""

from collections.abc import Callable
from pathlib import Path

from hotlog import get_logger

from srcfix.config.models import FixerSettings
from srcfix.macos_utils import detect_affected_platform
from srcfix.vfs import LocalFileSystemResolver, VirtualFile, VirtualFileResolver

logger = get_logger(__name__)


class PathFixer:
    """Apply the /Volumes prefix rewrite to the three path representations.

    Args:
        is_affected_platform: Called once per operation; the rewrite only happens
            when it returns True
        resolver: Turns rewritten path strings back into virtual file handles
        settings: Prefixes to match and substitute
    """

    def __init__(
        self,
        is_affected_platform: Callable[[], bool] = detect_affected_platform,
        resolver: VirtualFileResolver | None = None,
        settings: FixerSettings | None = None,
    ) -> None:
        self.is_affected_platform = is_affected_platform
        self.resolver = resolver if resolver is not None else LocalFileSystemResolver()
        self.settings = settings if settings is not None else FixerSettings()

    def strip_mount_marker(self, path: str) -> str | None:
        """Drop the mount marker from the front of `path`.

        Returns:
            The remainder of the path, or None if it does not start with the marker
        """
        marker = self.settings.mount_marker
        if not path.startswith(marker):
            return None
        return path[len(marker) :]

    def fix_text(self, path: str) -> str:
        """Replace every occurrence of the legacy prefix in `path`.

        The match is not anchored: an embedded legacy prefix is rewritten too.
        """
        if not self.is_affected_platform():
            return path
        fixed = path.replace(self.settings.legacy_prefix, self.settings.canonical_prefix)
        if fixed != path:
            logger.debug('text_path_fixed', original=path, fixed=fixed)
        return fixed

    def fix_virtual_file(self, virtual_file: VirtualFile) -> VirtualFile | None:
        """Re-resolve `virtual_file` without the mount marker.

        Returns:
            The original handle if no rewrite applies, otherwise whatever the
            resolver yields for the rewritten path, None included
        """
        if not self.is_affected_platform():
            return virtual_file
        stripped = self.strip_mount_marker(virtual_file.path)
        if stripped is None:
            return virtual_file

        resolved = self.resolver.resolve(stripped, tolerate_missing_parents=True)
        logger.debug(
            'virtual_file_fixed',
            original=virtual_file.path,
            fixed=stripped,
            resolved=resolved is not None,
        )
        return resolved

    def fix_file(self, file: Path) -> Path:
        """Build a new Path without the mount marker; nothing is checked on disk."""
        if not self.is_affected_platform():
            return file
        stripped = self.strip_mount_marker(str(file))
        if stripped is None:
            return file
        logger.debug('file_path_fixed', original=str(file), fixed=stripped)
        return Path(stripped)


_default_fixer = PathFixer()


def fix_text(path: str) -> str:
    """Rewrite `path` with the default fixer."""
    return _default_fixer.fix_text(path)


def fix_virtual_file(virtual_file: VirtualFile) -> VirtualFile | None:
    """Re-resolve `virtual_file` with the default fixer."""
    return _default_fixer.fix_virtual_file(virtual_file)


def fix_file(file: Path) -> Path:
    """Rewrite `file` with the default fixer."""
    return _default_fixer.fix_file(file)
