from pathlib import Path

from srcfix.cli.options import CONFIG_OPTION, FORCE_OPTION, PATHS_ARG
from srcfix.cli.utils import run_cli_command
from srcfix.commands.fix import text_command


def text(
    paths: list[str] = PATHS_ARG,
    config: Path | None = CONFIG_OPTION,
    *,
    force: bool | None = FORCE_OPTION,
) -> None:
    """Replace the legacy source prefix anywhere in each path."""
    run_cli_command(lambda: text_command(paths, config, force=force))
