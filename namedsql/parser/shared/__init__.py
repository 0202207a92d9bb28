"""
Shared utilities and common types for the parser module.
"""

from .types import *
from .exceptions import *
from .constants import *

__all__ = [
    # Types
    "QueryMap",
    "TagName",
    "FilePath",
    # Exceptions
    "ParserError",
    "ParseError",
    "TagOverwrittenError",
    "QueryWithoutTagError",
    "QueryFileError",
    "OutputGenerationError",
    "SQLCheckError",
    "ConfigError",
    # Constants
    "WHITESPACE",
    "TAG_PATTERN",
    "BLOCK_COMMENT_PATTERN",
    "LINE_COMMENT_MARKER",
    "SUPPORTED_SQL_EXTENSIONS",
    "CONFIG_FILE_NAME",
    "OUTPUT_FORMATS",
    "DEFAULT_OUTPUT_FORMAT",
]
