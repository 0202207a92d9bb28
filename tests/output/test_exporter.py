"""
Unit tests for query export.
"""

import json

import pytest
import yaml

from namedsql.output import QueryExporter
from namedsql.parser.shared.exceptions import OutputGenerationError

QUERIES = {"zeta": "SELECT 1;", "alpha": "SELECT 'é';"}


class TestQueryExporter:
    """Test JSON and YAML rendering."""

    def test_render_json(self):
        """Test that JSON keeps order and non-ASCII text."""
        content = QueryExporter().render(QUERIES, "json")
        assert list(json.loads(content)) == ["zeta", "alpha"]
        assert "é" in content

    def test_render_yaml(self):
        """Test that YAML keeps order and round-trips."""
        content = QueryExporter().render(QUERIES, "yaml")
        assert content.index("zeta") < content.index("alpha")
        assert yaml.safe_load(content) == QUERIES

    def test_render_unknown_format(self):
        """Test that unknown formats are rejected."""
        with pytest.raises(OutputGenerationError, match="Unsupported output format 'xml'"):
            QueryExporter().render(QUERIES, "xml")

    def test_export_writes_file(self, tmp_path):
        """Test that export creates parent folders and writes the file."""
        output_file = tmp_path / "out" / "queries.json"
        result = QueryExporter().export(QUERIES, output_file, "json")

        assert result == output_file
        assert json.loads(output_file.read_text(encoding="utf-8")) == QUERIES
