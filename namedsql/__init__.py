"""
namedsql

Loads SQL files made of "-- name: <tag>" sections into an ordered mapping
of tag to query text.
"""

from .analysis import SQLChecker, SQLCheckResult
from .config import NamedSQLConfig, load_config
from .loader import QueryFile, load_queries, load_query_file, load_query_folder
from .output import QueryExporter
from .parser import (
    ConfigError,
    LineType,
    NamedQueryParser,
    OutputGenerationError,
    ParseError,
    ParserError,
    QueryFileError,
    QueryWithoutTagError,
    SQLCheckError,
    TagOverwrittenError,
    parse,
    parse_line,
    remove_multi_line_comments,
)

__all__ = [
    "parse",
    "parse_line",
    "remove_multi_line_comments",
    "LineType",
    "NamedQueryParser",
    "QueryFile",
    "load_queries",
    "load_query_file",
    "load_query_folder",
    "QueryExporter",
    "SQLChecker",
    "SQLCheckResult",
    "NamedSQLConfig",
    "load_config",
    "ParserError",
    "ParseError",
    "TagOverwrittenError",
    "QueryWithoutTagError",
    "QueryFileError",
    "OutputGenerationError",
    "SQLCheckError",
    "ConfigError",
]
