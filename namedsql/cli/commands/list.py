"""
List command implementation.
"""

import typer

from namedsql.cli.context import CommandContext


def cmd_list(
    path: str,
    verbose: bool = False,
    config_file: str | None = None,
):
    """Execute the list command."""
    ctx = CommandContext(path, verbose=verbose, config_file=config_file)

    try:
        ctx.load_config()
        queries = ctx.load_queries()

        for name, sql in queries.items():
            if ctx.verbose:
                typer.echo(f"{name}: {sql}")
            else:
                typer.echo(name)

    except Exception as e:
        ctx.handle_error(e)
