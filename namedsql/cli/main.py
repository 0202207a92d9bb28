"""
namedsql CLI Main Module

Command-line interface for loading and inspecting named SQL query files.
"""

from typing import Any, Literal

import typer

from namedsql.cli.commands import cmd_check, cmd_list, cmd_parse

# Type aliases for better type safety and IDE support
OutputFormat = Literal["json", "yaml"]


class AlphabeticalOrderGroup(typer.core.TyperGroup):
    """Custom Typer Group that lists commands in alphabetical order."""

    def list_commands(self, ctx: typer.Context) -> list[str]:
        return sorted(self.commands.keys())


def validate_format(value: str | None) -> OutputFormat | None:
    """Validate format option (json or yaml)."""
    if value is not None and value not in ["json", "yaml"]:
        raise typer.BadParameter(
            typer.style("Error: ", fg=typer.colors.RED, bold=True)
            + f"Invalid format '{value}'. Must be 'json' or 'yaml'."
        )
    return value  # type: ignore[return-value]


# Create Typer app with alphabetical command ordering
app = typer.Typer(
    name="namedsql",
    help="namedsql - load named SQL queries from '-- name: <tag>' files",
    add_completion=False,
    rich_markup_mode="rich",
    cls=AlphabeticalOrderGroup,
    invoke_without_command=True,
)


@app.callback()
def main_callback(ctx: typer.Context) -> None:
    """Main CLI callback - shows help when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


# Common option definitions to reduce duplication
PATH_ARG = typer.Argument(None, help="Query file or folder of query files")
VERBOSE_OPTION = typer.Option(False, "-v", "--verbose", help="Enable verbose output")
CONFIG_OPTION = typer.Option(
    None, "-c", "--config", help="Path to namedsql.toml (default: next to the queries)"
)


def _check_required_argument(ctx: typer.Context, arg_name: str, arg_value: Any) -> None:
    """Check if a required argument is provided, show help if not."""
    if arg_value is None:
        typer.echo(ctx.get_help())
        raise typer.Exit(0)


@app.command()
def parse(
    ctx: typer.Context,
    path: str | None = PATH_ARG,
    format: str | None = typer.Option(
        None, "-f", "--format", help="Output format: json or yaml", callback=validate_format
    ),
    output: str | None = typer.Option(
        None, "-o", "--output", help="Write to this file instead of stdout"
    ),
    verbose: bool = VERBOSE_OPTION,
    config: str | None = CONFIG_OPTION,
) -> None:
    """Parse named queries and print them as JSON or YAML."""
    _check_required_argument(ctx, "path", path)
    cmd_parse(
        path=path,
        format=format,
        output=output,
        verbose=verbose,
        config_file=config,
    )


@app.command(name="list")
def list_cmd(
    ctx: typer.Context,
    path: str | None = PATH_ARG,
    verbose: bool = VERBOSE_OPTION,
    config: str | None = CONFIG_OPTION,
) -> None:
    """List query names in declaration order."""
    _check_required_argument(ctx, "path", path)
    cmd_list(
        path=path,
        verbose=verbose,
        config_file=config,
    )


@app.command()
def check(
    ctx: typer.Context,
    path: str | None = PATH_ARG,
    dialect: str | None = typer.Option(
        None, "-d", "--dialect", help="SQL dialect to check against (e.g. postgres, duckdb)"
    ),
    verbose: bool = VERBOSE_OPTION,
    config: str | None = CONFIG_OPTION,
) -> None:
    """Check that every query is valid SQL."""
    _check_required_argument(ctx, "path", path)
    cmd_check(
        path=path,
        dialect=dialect,
        verbose=verbose,
        config_file=config,
    )


def main() -> None:
    """Main CLI entry point."""
    app()


if __name__ == "__main__":
    main()
