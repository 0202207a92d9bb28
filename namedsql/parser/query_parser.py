"""
Named query parsing.

Turns a document of ``-- name: <tag>`` sections into an ordered mapping of
tag to query text.
"""

import logging
from collections.abc import Iterator

from .comments import remove_multi_line_comments
from .line_parser import LineType, parse_line
from .shared.exceptions import ParseError, QueryWithoutTagError, TagOverwrittenError
from .shared.types import FilePath, QueryMap

# Configure logging
logger = logging.getLogger(__name__)


def _iter_lines(text: str) -> Iterator[tuple[int, str]]:
    """Yield 1-indexed lines split on "\\n", dropping a trailing "\\r"."""
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    for number, line in enumerate(lines, start=1):
        if line.endswith("\r"):
            line = line[:-1]
        yield number, line


def parse(text: str) -> QueryMap:
    """
    Parse a named query document.

    Block comments are blanked first, then every line is classified. Query
    fragments are attributed to the most recently declared tag and joined
    with a single space. Blank and comment-only lines are skipped entirely,
    so they never separate two tag declarations.

    Args:
        text: Full content of a query document

    Returns:
        Mapping of tag name to query text, in order of first declaration

    Raises:
        TagOverwrittenError: If a tag declaration directly follows another one
        QueryWithoutTagError: If a query fragment precedes every tag
    """
    queries: QueryMap = {}

    last_type: LineType | None = None
    last_tag: str | None = None

    for number, line in _iter_lines(remove_multi_line_comments(text)):
        if not line:
            continue

        line_type, value = parse_line(line)
        if line_type is LineType.EMPTY:
            continue

        if line_type is LineType.TAG:
            if last_type is LineType.TAG:
                raise TagOverwrittenError(number, value)
            last_tag = value
        else:
            if last_tag is None:
                raise QueryWithoutTagError(number, value)
            if last_tag in queries:
                queries[last_tag] = f"{queries[last_tag]} {value}"
            else:
                queries[last_tag] = value

        last_type = line_type

    logger.debug(f"Parsed {len(queries)} named queries")
    return queries


class NamedQueryParser:
    """
    Parses named query documents, caching results per content and path.

    Instances are not thread-safe; use one per thread or per load.
    """

    def __init__(self):
        self._cache: dict[str, QueryMap] = {}

    def clear_cache(self) -> None:
        """Clear the parser cache."""
        self._cache.clear()

    def parse(self, content: str, file_path: FilePath = None) -> QueryMap:
        """
        Parse a named query document.

        Args:
            content: The document to parse
            file_path: Optional file path, used for caching and error messages

        Returns:
            Mapping of tag name to query text in declaration order

        Raises:
            ParseError: If the document is structurally invalid
        """
        cache_key = f"{file_path or ''}:{hash(content)}"
        cached_result = self._cache.get(cache_key)
        if cached_result is not None:
            return dict(cached_result)

        try:
            queries = parse(content)
        except ParseError as e:
            if file_path:
                e.with_file_path(str(file_path))
            raise

        if file_path:
            logger.debug(f"Found {len(queries)} queries in {file_path}")

        self._cache[cache_key] = queries
        return dict(queries)
