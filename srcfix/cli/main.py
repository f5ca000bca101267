import typer
from hotlog import verbosity_option

from srcfix.cli.file import file
from srcfix.cli.resolve import resolve
from srcfix.cli.text import text
from srcfix.cli.utils import setup_logging
from srcfix.version import __version__

app = typer.Typer()

VERSION_OPTION = typer.Option(
    default=False,
    help='Show version and exit',
)


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    *,
    verbose: int = verbosity_option,
    version: bool = VERSION_OPTION,
) -> None:
    """srcfix - Rewrite /Volumes/google/src paths reported on macOS Catalina."""
    if version:
        typer.echo(__version__)
        raise typer.Exit(0)

    setup_logging(verbose)

    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit(0)


app.command()(text)
app.command()(file)
app.command()(resolve)
