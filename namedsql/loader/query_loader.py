"""
Loading named queries from files and folders.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

from namedsql.parser.query_parser import NamedQueryParser
from namedsql.parser.shared.constants import SUPPORTED_SQL_EXTENSIONS
from namedsql.parser.shared.exceptions import QueryFileError
from namedsql.parser.shared.types import FilePath, QueryMap

from .file_discovery import FileDiscovery

# Configure logging
logger = logging.getLogger(__name__)


@dataclass
class QueryFile:
    """Named queries loaded from a single file."""

    path: Path
    queries: QueryMap = field(default_factory=dict)

    @property
    def names(self) -> list[str]:
        """Tag names in declaration order."""
        return list(self.queries)


def read_query_file(path: FilePath) -> str:
    """
    Read a query file as UTF-8 text.

    Raises:
        QueryFileError: If the file is missing, unreadable or not valid UTF-8
    """
    path = Path(path)
    if not path.is_file():
        raise QueryFileError(f"Query file not found: {path}")
    try:
        with open(path, encoding="utf-8") as f:
            return f.read()
    except UnicodeDecodeError as e:
        raise QueryFileError(f"Query file is not valid UTF-8: {path}: {e}") from e
    except OSError as e:
        raise QueryFileError(f"Failed to read query file {path}: {e}") from e


def load_query_file(path: FilePath, parser: NamedQueryParser | None = None) -> QueryFile:
    """
    Load and parse a single query file.

    Args:
        path: Path to the query file
        parser: Parser to reuse; a new one is created when omitted

    Returns:
        QueryFile holding the parsed queries

    Raises:
        QueryFileError: If the file cannot be read
        ParseError: If the file is structurally invalid
    """
    path = Path(path)
    content = read_query_file(path)
    if parser is None:
        parser = NamedQueryParser()
    queries = parser.parse(content, path)
    logger.info(f"Loaded {len(queries)} queries from {path}")
    return QueryFile(path=path, queries=queries)


def load_query_folder(
    folder: FilePath,
    extensions: Iterable[str] = SUPPORTED_SQL_EXTENSIONS,
    recursive: bool = True,
) -> list[QueryFile]:
    """
    Load every query file found in a folder.

    Args:
        folder: Folder to search
        extensions: File suffixes to pick up
        recursive: Whether to descend into subfolders

    Returns:
        Loaded files, sorted by path

    Raises:
        QueryFileError: If the folder does not exist or a file cannot be read
        ParseError: If a file is structurally invalid
    """
    discovery = FileDiscovery(Path(folder), extensions=extensions, recursive=recursive)
    query_files = discovery.discover_query_files()
    if not query_files:
        logger.warning(f"No query files found in {folder}")
    parser = NamedQueryParser()
    return [load_query_file(path, parser) for path in query_files]


def merge_query_files(query_files: Iterable[QueryFile]) -> QueryMap:
    """
    Merge the queries of several files into one mapping.

    Raises:
        QueryFileError: If the same tag is defined in two files
    """
    merged: QueryMap = {}
    origins: dict[str, Path] = {}
    for query_file in query_files:
        for name, sql in query_file.queries.items():
            if name in merged:
                raise QueryFileError(
                    f'Tag "{name}" is defined in both {origins[name]} and {query_file.path}'
                )
            merged[name] = sql
            origins[name] = query_file.path
    return merged


def load_queries(
    path: FilePath,
    extensions: Iterable[str] = SUPPORTED_SQL_EXTENSIONS,
    recursive: bool = True,
) -> QueryMap:
    """
    Load named queries from a file or a folder of files.

    Args:
        path: A query file or a folder
        extensions: File suffixes to pick up when path is a folder
        recursive: Whether to descend into subfolders

    Returns:
        Mapping of tag name to query text in declaration order
    """
    path = Path(path)
    if path.is_dir():
        return merge_query_files(load_query_folder(path, extensions=extensions, recursive=recursive))
    return load_query_file(path).queries
