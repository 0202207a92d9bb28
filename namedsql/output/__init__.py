"""
Output Module

Export of parsed queries.
"""

from .exporter import QueryExporter

__all__ = ["QueryExporter"]
