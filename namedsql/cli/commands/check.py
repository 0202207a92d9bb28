"""
Check command implementation.
"""

import typer

from namedsql.analysis import SQLChecker
from namedsql.cli.context import CommandContext


def cmd_check(
    path: str,
    dialect: str | None = None,
    verbose: bool = False,
    config_file: str | None = None,
):
    """Execute the check command."""
    ctx = CommandContext(path, verbose=verbose, config_file=config_file)

    try:
        config = ctx.load_config(dialect=dialect)
        queries = ctx.load_queries()
        results = SQLChecker(dialect=config.dialect).check(queries)
    except Exception as e:
        ctx.handle_error(e)

    failed = [r for r in results if not r.ok]
    for result in results:
        if result.ok:
            typer.echo(f"{typer.style('OK', fg=typer.colors.GREEN)}    {result.name}")
        else:
            typer.echo(
                f"{typer.style('FAIL', fg=typer.colors.RED, bold=True)}  {result.name}: {result.error}"
            )

    typer.echo(f"\nChecked {len(results)} queries, {len(failed)} failed")
    if failed:
        raise typer.Exit(1)
