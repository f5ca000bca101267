"""CLI module for srcfix.

- `main.py`: The Typer app. Handles global options (version, verbosity) and registers
  the subcommands.
- `text.py`, `file.py`, `resolve.py`: One Typer command each, calling the matching
  function in `srcfix.commands` through `run_cli_command` for consistent error handling.
"""
