from dataclasses import dataclass
from pathlib import Path
from typing import Protocol, runtime_checkable

from hotlog import get_logger

logger = get_logger(__name__)


@runtime_checkable
class VirtualFile(Protocol):
    """A handle into a virtual file system that knows its own path."""

    @property
    def path(self) -> str:
        """Absolute path of the file as a string."""
        ...


class VirtualFileResolver(Protocol):
    """Turns a native path string back into a virtual file handle."""

    def resolve(
        self,
        path: str,
        *,
        tolerate_missing_parents: bool,
    ) -> VirtualFile | None:
        """Resolve `path`, returning None when it cannot be resolved."""
        ...


@dataclass(frozen=True)
class LocalVirtualFile:
    """Virtual file handle backed by the local filesystem.

    Attributes:
        path: Absolute path of the file
        exists: Whether the path existed when the handle was resolved
        is_directory: Whether the path was a directory when resolved
    """

    path: str
    exists: bool = True
    is_directory: bool = False

    @classmethod
    def from_path(cls, path: Path) -> 'LocalVirtualFile':
        """Build a handle describing the current state of `path`."""
        return cls(
            path=str(path),
            exists=path.exists(),
            is_directory=path.is_dir(),
        )


def _blocked_by_file(path: Path) -> bool:
    """Check whether the nearest existing ancestor of `path` is not a directory."""
    for ancestor in path.parents:
        if ancestor.exists():
            return not ancestor.is_dir()
    return False


class LocalFileSystemResolver:
    """Resolve absolute paths on the local filesystem into LocalVirtualFile handles."""

    def resolve(
        self,
        path: str,
        *,
        tolerate_missing_parents: bool,
    ) -> LocalVirtualFile | None:
        """Resolve `path` into a handle.

        Args:
            path: Absolute native path
            tolerate_missing_parents: If True, a path that does not exist yet still
                resolves as long as nothing on disk prevents it from being created

        Returns:
            A LocalVirtualFile, or None if the path cannot be resolved
        """
        if not path or not Path(path).is_absolute():
            logger.debug('unresolvable_relative_path', path=path)
            return None

        target = Path(path)
        if target.exists():
            return LocalVirtualFile.from_path(target)

        if not tolerate_missing_parents:
            logger.debug('path_does_not_exist', path=path)
            return None

        if _blocked_by_file(target):
            logger.debug('path_blocked_by_file', path=path)
            return None

        return LocalVirtualFile(path=path, exists=False)
