from collections.abc import Callable
from pathlib import Path

from hotlog import get_logger
from rich.console import Console

from srcfix.config import load_settings
from srcfix.fixer import PathFixer
from srcfix.macos_utils import detect_affected_platform
from srcfix.vfs import LocalVirtualFile

logger = get_logger(__name__)


def _platform_signal(force: bool | None) -> Callable[[], bool]:
    """Pick the platform signal: a fixed answer when forced, host detection otherwise."""
    if force is None:
        return detect_affected_platform
    return lambda: force


def build_fixer(settings_file: Path | None, *, force: bool | None) -> PathFixer:
    """Create a PathFixer from an optional settings file and platform override."""
    settings = load_settings(settings_file)
    fixer = PathFixer(is_affected_platform=_platform_signal(force), settings=settings)
    logger.debug(
        'fixer_ready',
        legacy_prefix=settings.legacy_prefix,
        canonical_prefix=settings.canonical_prefix,
        mount_marker=settings.mount_marker,
        force=force,
    )
    return fixer


def _echo(console: Console, value: str) -> None:
    console.print(value, markup=False, highlight=False, soft_wrap=True)


def text_command(paths: list[str], settings_file: Path | None, *, force: bool | None) -> int:
    """Print each path with the legacy prefix replaced."""
    console = Console()
    fixer = build_fixer(settings_file, force=force)
    for path in paths:
        _echo(console, fixer.fix_text(path))
    return 0


def file_command(paths: list[str], settings_file: Path | None, *, force: bool | None) -> int:
    """Print each path as a native file path with the mount marker stripped."""
    console = Console()
    fixer = build_fixer(settings_file, force=force)
    for path in paths:
        _echo(console, str(fixer.fix_file(Path(path))))
    return 0


def resolve_command(paths: list[str], settings_file: Path | None, *, force: bool | None) -> int:
    """Re-resolve each path on the local filesystem and print the result.

    Returns:
        0 if every path resolved, 1 if any of them did not
    """
    console = Console()
    fixer = build_fixer(settings_file, force=force)
    exit_code = 0
    for path in paths:
        resolved = fixer.fix_virtual_file(LocalVirtualFile.from_path(Path(path)))
        if resolved is None:
            logger.error('unresolved_path', path=path)
            exit_code = 1
            continue
        _echo(console, resolved.path)
    return exit_code
