"""
SQL syntax checking of parsed queries using sqlglot.

The parser itself never looks inside query text; this is an opt-in check
for callers who want to catch typos before running anything.
"""

import logging
from dataclasses import dataclass

import sqlglot
from sqlglot.dialects.dialect import Dialect
from sqlglot.errors import ParseError as SQLGlotParseError
from sqlglot.errors import TokenError

from namedsql.parser.shared.exceptions import ConfigError, SQLCheckError
from namedsql.parser.shared.types import QueryMap

# Configure logging
logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SQLCheckResult:
    """Outcome of checking one named query."""

    name: str
    ok: bool
    error: str | None = None


class SQLChecker:
    """Checks that every query parses in a given SQL dialect."""

    def __init__(self, dialect: str | None = None):
        """
        Initialize the checker.

        Args:
            dialect: sqlglot dialect name, e.g. "postgres" or "duckdb".
                None uses sqlglot's generic dialect.

        Raises:
            ConfigError: If sqlglot does not know the dialect
        """
        if dialect is not None:
            try:
                Dialect.get_or_raise(dialect)
            except ValueError as e:
                raise ConfigError(f"Unknown SQL dialect '{dialect}': {e}") from e
        self.dialect = dialect

    def check_query(self, name: str, sql: str) -> SQLCheckResult:
        """Check a single query, which may hold several statements."""
        try:
            statements = [s for s in sqlglot.parse(sql, read=self.dialect) if s is not None]
        except (SQLGlotParseError, TokenError) as e:
            logger.debug(f"Query '{name}' failed to parse: {e}")
            return SQLCheckResult(name=name, ok=False, error=str(e))

        if not statements:
            return SQLCheckResult(name=name, ok=False, error="No SQL statement found")
        return SQLCheckResult(name=name, ok=True)

    def check(self, queries: QueryMap) -> list[SQLCheckResult]:
        """
        Check every query.

        Args:
            queries: Mapping of tag name to query text

        Returns:
            One result per query, in declaration order
        """
        results = [self.check_query(name, sql) for name, sql in queries.items()]
        failed = sum(1 for r in results if not r.ok)
        logger.info(f"Checked {len(results)} queries, {failed} failed")
        return results

    def check_or_raise(self, queries: QueryMap) -> None:
        """
        Check every query and raise if any fails.

        Raises:
            SQLCheckError: Listing the names of failing queries
        """
        failures = [r for r in self.check(queries) if not r.ok]
        if failures:
            details = "; ".join(f"{r.name}: {r.error}" for r in failures)
            raise SQLCheckError(f"{len(failures)} queries failed SQL check: {details}")
