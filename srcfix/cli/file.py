from pathlib import Path

from srcfix.cli.options import CONFIG_OPTION, FORCE_OPTION, PATHS_ARG
from srcfix.cli.utils import run_cli_command
from srcfix.commands.fix import file_command


def file(
    paths: list[str] = PATHS_ARG,
    config: Path | None = CONFIG_OPTION,
    *,
    force: bool | None = FORCE_OPTION,
) -> None:
    """Strip the /Volumes mount marker from each path without touching the disk."""
    run_cli_command(lambda: file_command(paths, config, force=force))
