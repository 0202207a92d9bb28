"""
Parse command implementation.
"""

import typer

from namedsql.cli.context import CommandContext
from namedsql.output import QueryExporter


def cmd_parse(
    path: str,
    format: str | None = None,
    output: str | None = None,
    verbose: bool = False,
    config_file: str | None = None,
):
    """Execute the parse command."""
    ctx = CommandContext(path, verbose=verbose, config_file=config_file)

    try:
        config = ctx.load_config(format=format)
        queries = ctx.load_queries()
        exporter = QueryExporter()

        if output:
            output_file = exporter.export(queries, output, config.format)
            typer.echo(f"Wrote {len(queries)} queries to {output_file}", err=True)
        else:
            typer.echo(exporter.render(queries, config.format), nl=False)

    except Exception as e:
        ctx.handle_error(e)
