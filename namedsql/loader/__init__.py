"""
Loader Module

Reads query files from disk and runs them through the parser.
"""

from .file_discovery import FileDiscovery
from .query_loader import (
    QueryFile,
    load_queries,
    load_query_file,
    load_query_folder,
    merge_query_files,
    read_query_file,
)

__all__ = [
    "FileDiscovery",
    "QueryFile",
    "load_queries",
    "load_query_file",
    "load_query_folder",
    "merge_query_files",
    "read_query_file",
]
