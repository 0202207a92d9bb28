"""
Analysis Module

Optional checks on parsed queries.
"""

from .sql_checker import SQLChecker, SQLCheckResult

__all__ = ["SQLChecker", "SQLCheckResult"]
