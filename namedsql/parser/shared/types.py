"""
Common type definitions for the parser module.
"""

from pathlib import Path

# Ordered mapping of tag name to assembled query text
QueryMap = dict[str, str]
TagName = str

# File paths
FilePath = str | Path
