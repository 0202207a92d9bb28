"""
JSON and YAML export of parsed queries.
"""

import json
import logging
from pathlib import Path

import yaml

from namedsql.parser.shared.constants import DEFAULT_OUTPUT_FORMAT, OUTPUT_FORMATS
from namedsql.parser.shared.exceptions import OutputGenerationError
from namedsql.parser.shared.types import FilePath, QueryMap

# Configure logging
logger = logging.getLogger(__name__)


class QueryExporter:
    """Renders query mappings as JSON or YAML, keeping declaration order."""

    def render(self, queries: QueryMap, fmt: str = DEFAULT_OUTPUT_FORMAT) -> str:
        """
        Render queries as text.

        Args:
            queries: Mapping of tag name to query text
            fmt: "json" or "yaml"

        Returns:
            The rendered document

        Raises:
            OutputGenerationError: If the format is unknown
        """
        if fmt == "json":
            return json.dumps(queries, indent=2, ensure_ascii=False) + "\n"
        if fmt == "yaml":
            return yaml.dump(
                queries, default_flow_style=False, sort_keys=False, allow_unicode=True
            )
        raise OutputGenerationError(
            f"Unsupported output format '{fmt}'. Must be one of: {', '.join(OUTPUT_FORMATS)}"
        )

    def export(
        self, queries: QueryMap, output_file: FilePath, fmt: str = DEFAULT_OUTPUT_FORMAT
    ) -> Path:
        """
        Write queries to a file.

        Args:
            queries: Mapping of tag name to query text
            output_file: Destination path
            fmt: "json" or "yaml"

        Returns:
            Path to the exported file

        Raises:
            OutputGenerationError: If rendering or writing fails
        """
        content = self.render(queries, fmt)
        output_file = Path(output_file)
        try:
            output_file.parent.mkdir(parents=True, exist_ok=True)
            with open(output_file, "w", encoding="utf-8") as f:
                f.write(content)
        except OSError as e:
            raise OutputGenerationError(f"Failed to export queries to {output_file}: {e}") from e

        logger.info(f"Exported {len(queries)} queries to {output_file}")
        return output_file
