"""
CLI command implementations.
"""

from namedsql.cli.commands.check import cmd_check
from namedsql.cli.commands.list import cmd_list
from namedsql.cli.commands.parse import cmd_parse

__all__ = ["cmd_parse", "cmd_list", "cmd_check"]
