import typer

# Module-level constants for Typer options to avoid B008
PATHS_ARG = typer.Argument(
    ...,
    help='Paths to rewrite',
)
CONFIG_OPTION = typer.Option(
    None,
    '--config',
    help='Path to a YAML file overriding the rewrite prefixes',
)
FORCE_OPTION = typer.Option(
    None,
    '--force/--no-force',
    help='Force the rewrite on or off instead of detecting macOS Catalina or later',
)
