"""
Classification of single lines of a query file.
"""

from enum import Enum

from .shared.constants import LINE_COMMENT_MARKER, TAG_PATTERN, WHITESPACE


class LineType(Enum):
    """Kind of a physical line after comment removal."""

    EMPTY = "empty"
    TAG = "tag"
    QUERY = "query"


def parse_line(line: str) -> tuple[LineType, str]:
    """
    Classify a line and extract its value.

    A ``-- name: <tag>`` declaration is recognised only when it starts the
    line (after optional whitespace). Anything else has its ``--`` comment
    cut off and is trimmed; what remains is a query fragment, or nothing.

    Args:
        line: One line of comment-normalized text, without its line break

    Returns:
        Tuple of the line type and the tag name, the query fragment, or ""
    """
    match = TAG_PATTERN.match(line)
    if match:
        return LineType.TAG, match.group(1)

    # No escaping: a "--" inside a string literal also ends the fragment
    comment_start = line.find(LINE_COMMENT_MARKER)
    if comment_start != -1:
        line = line[:comment_start]

    line = line.strip(WHITESPACE)
    if not line:
        return LineType.EMPTY, line
    return LineType.QUERY, line
