from pathlib import Path

from srcfix.cli.options import CONFIG_OPTION, FORCE_OPTION, PATHS_ARG
from srcfix.cli.utils import run_cli_command
from srcfix.commands.fix import resolve_command


def resolve(
    paths: list[str] = PATHS_ARG,
    config: Path | None = CONFIG_OPTION,
    *,
    force: bool | None = FORCE_OPTION,
) -> None:
    """Strip the /Volumes mount marker and re-resolve each path on disk."""
    run_cli_command(lambda: resolve_command(paths, config, force=force))
