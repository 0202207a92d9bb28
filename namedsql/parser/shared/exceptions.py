"""
Custom exceptions for the parser module.
"""


class ParserError(Exception):
    """Base exception for all namedsql errors."""

    pass


class ParseError(ParserError):
    """
    Base class for structural errors found while scanning a query file.

    Attributes:
        line: 1-indexed line number of the offending line
        file_path: Optional path of the file being parsed, set by loaders
    """

    def __init__(self, line: int, file_path: str | None = None):
        self.line = line
        self.file_path = file_path
        super().__init__(self._render())

    def _describe(self) -> str:
        return f"Invalid query document at line: {self.line}"

    def _render(self) -> str:
        message = self._describe()
        if self.file_path:
            return f"{self.file_path}: {message}"
        return message

    def _fields(self) -> tuple:
        return (self.line,)

    def with_file_path(self, file_path: str) -> "ParseError":
        """Attach a file path to the error and refresh its message."""
        self.file_path = str(file_path)
        self.args = (self._render(),)
        return self

    def __str__(self) -> str:
        return self._render()

    def __eq__(self, other: object) -> bool:
        if type(self) is not type(other):
            return NotImplemented
        return self._fields() == other._fields()

    def __hash__(self) -> int:
        return hash((type(self), self._fields()))

    def __repr__(self) -> str:
        fields = ", ".join(repr(f) for f in self._fields())
        return f"{self.__class__.__name__}({fields})"


class TagOverwrittenError(ParseError):
    """Raised when a tag declaration directly follows another tag declaration."""

    def __init__(self, line: int, tag: str, file_path: str | None = None):
        self.tag = tag
        super().__init__(line, file_path)

    def _describe(self) -> str:
        return f'Tag "{self.tag}" overwritten at line: {self.line}'

    def _fields(self) -> tuple:
        return (self.line, self.tag)


class QueryWithoutTagError(ParseError):
    """Raised when a query fragment appears before any tag declaration."""

    def __init__(self, line: int, query: str, file_path: str | None = None):
        self.query = query
        super().__init__(line, file_path)

    def _describe(self) -> str:
        return f'Query without tag (line: {self.line}): "{self.query}"'

    def _fields(self) -> tuple:
        return (self.line, self.query)


class QueryFileError(ParserError):
    """Raised when a query file or folder cannot be found or read."""

    pass


class OutputGenerationError(ParserError):
    """Raised when output generation fails."""

    pass


class SQLCheckError(ParserError):
    """Raised when one or more queries fail the SQL syntax check."""

    pass


class ConfigError(ParserError):
    """Raised when namedsql.toml contains invalid settings."""

    pass
