"""
Command context for shared setup across CLI commands.
"""

import traceback
from pathlib import Path

import typer

from namedsql.config import NamedSQLConfig, load_config
from namedsql.loader import load_queries
from namedsql.parser.shared.types import QueryMap

from .utils import setup_logging


class CommandContext:
    """
    Shared context for CLI commands.

    Handles common setup: setting up logging, loading the configuration and
    loading the queries of the target path.
    """

    def __init__(self, path: str, verbose: bool = False, config_file: str | None = None):
        """
        Initialize command context from parameters.

        Args:
            path: Query file or folder
            verbose: Enable verbose output
            config_file: Optional explicit namedsql.toml
        """
        self.verbose = verbose
        setup_logging(self.verbose)

        self.path = Path(path).resolve()
        self.config_file = config_file
        self.config = NamedSQLConfig()

    def load_config(self, **overrides) -> NamedSQLConfig:
        """
        Load namedsql.toml for the target path and apply command line overrides.

        Args:
            **overrides: Option values; None means "not given"
        """
        self.config = load_config(self.path, self.config_file).merge(**overrides)
        return self.config

    def load_queries(self) -> QueryMap:
        """Load the queries of the target path according to the configuration."""
        return load_queries(
            self.path,
            extensions=self.config.extensions,
            recursive=self.config.recursive,
        )

    def handle_error(self, error: Exception, show_traceback: bool | None = None) -> None:
        """
        Handle errors consistently across commands.

        Args:
            error: The exception that occurred
            show_traceback: Whether to show traceback (defaults to verbose mode)
        """
        if show_traceback is None:
            show_traceback = self.verbose

        error_prefix = typer.style("Error: ", fg=typer.colors.RED, bold=True)
        typer.echo(f"{error_prefix}{error}", err=True)
        if show_traceback:
            traceback.print_exc()
        raise typer.Exit(1)
