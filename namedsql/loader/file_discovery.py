"""
File discovery functionality for finding query files.
"""

import logging
from collections.abc import Iterable
from pathlib import Path

from namedsql.parser.shared.constants import SUPPORTED_SQL_EXTENSIONS
from namedsql.parser.shared.exceptions import QueryFileError

# Configure logging
logger = logging.getLogger(__name__)


class FileDiscovery:
    """Handles discovery of query files in a folder."""

    def __init__(
        self,
        queries_folder: Path,
        extensions: Iterable[str] = SUPPORTED_SQL_EXTENSIONS,
        recursive: bool = True,
    ):
        """
        Initialize the file discovery.

        Args:
            queries_folder: Path to the folder holding query files
            extensions: File suffixes to pick up
            recursive: Whether to descend into subfolders
        """
        self.queries_folder = Path(queries_folder)
        self.extensions = tuple(extensions)
        self.recursive = recursive
        self._file_cache: list[Path] | None = None

    def discover_query_files(self) -> list[Path]:
        """
        Discover all query files in the folder.

        Returns:
            Sorted list of query file paths

        Raises:
            QueryFileError: If the folder does not exist
        """
        if self._file_cache is not None:
            return self._file_cache

        if not self.queries_folder.is_dir():
            raise QueryFileError(f"Queries folder not found: {self.queries_folder}")

        glob = self.queries_folder.rglob if self.recursive else self.queries_folder.glob
        query_files = []
        for ext in self.extensions:
            query_files.extend(p for p in glob(f"*{ext}") if p.is_file())

        # Sort for consistent ordering
        query_files = sorted(set(query_files))

        logger.debug(f"Discovered {len(query_files)} query files in {self.queries_folder}")
        self._file_cache = query_files
        return query_files

    def clear_cache(self) -> None:
        """Clear the discovery cache."""
        self._file_cache = None
