"""
CLI Module

Command-line interface for namedsql.
"""

from .main import app, main

__all__ = ["app", "main"]
