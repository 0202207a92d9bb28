"""
Constants for the parser module.
"""

import re

# Unicode White_Space characters. Narrower than str.strip() and re's \s,
# which also treat the separators U+001C-U+001F as whitespace.
WHITESPACE = (
    "\t\n\x0b\x0c\r \x85\xa0\u1680"
    + "".join(chr(c) for c in range(0x2000, 0x200B))
    + "\u2028\u2029\u202f\u205f\u3000"
)

_WS = "[" + re.escape(WHITESPACE) + "]*"

# Tag declaration: "-- name: <tag>", anchored at the start of the line
TAG_PATTERN = re.compile(rf"^{_WS}--{_WS}name{_WS}:{_WS}(.*?){_WS}$")

# Block comment, non-greedy and spanning lines; nesting is not supported
BLOCK_COMMENT_PATTERN = re.compile(r"/\*.*?\*/", re.DOTALL)

LINE_COMMENT_MARKER = "--"

# Supported file extensions
SUPPORTED_SQL_EXTENSIONS = [".sql"]

# Configuration file looked up next to the queries
CONFIG_FILE_NAME = "namedsql.toml"

# Export formats
OUTPUT_FORMATS = ("json", "yaml")
DEFAULT_OUTPUT_FORMAT = "json"
