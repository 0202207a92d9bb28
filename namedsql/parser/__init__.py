"""
Parser Module

Comment normalization, line classification and named query assembly.
"""

from .comments import remove_multi_line_comments
from .line_parser import LineType, parse_line
from .query_parser import NamedQueryParser, parse
from .shared import (
    ConfigError,
    OutputGenerationError,
    ParseError,
    ParserError,
    QueryFileError,
    QueryWithoutTagError,
    SQLCheckError,
    TagOverwrittenError,
)

__all__ = [
    "parse",
    "parse_line",
    "remove_multi_line_comments",
    "LineType",
    "NamedQueryParser",
    "ParserError",
    "ParseError",
    "TagOverwrittenError",
    "QueryWithoutTagError",
    "QueryFileError",
    "OutputGenerationError",
    "SQLCheckError",
    "ConfigError",
]
