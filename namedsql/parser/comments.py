"""
Block comment removal.

``/* ... */`` spans are blanked out rather than deleted so that line and
column positions of the remaining text match the original source.
"""

import re

from .shared.constants import BLOCK_COMMENT_PATTERN

# Line breaks survive inside a blanked comment
_KEPT_CHARACTERS = {"\r", "\n"}


def _blank_out(match: re.Match) -> str:
    return "".join(c if c in _KEPT_CHARACTERS else " " for c in match.group(0))


def remove_multi_line_comments(text: str) -> str:
    """
    Replace every ``/* ... */`` span with whitespace of the same shape.

    Carriage returns and newlines inside a comment are kept, every other
    character becomes a single space. Nested comments are not supported: the
    first ``*/`` closes the span. An unterminated ``/*`` is left as is.

    Args:
        text: Raw query file content

    Returns:
        Text of the same length and line structure with comments blanked
    """
    if "/*" not in text:
        return text
    return BLOCK_COMMENT_PATTERN.sub(_blank_out, text)
