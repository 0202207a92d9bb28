"""
Tests for the namedsql command line interface.
"""

import json
import subprocess
import sys
from pathlib import Path

import yaml


class TestCLI:
    """Run the CLI as a subprocess and check its output."""

    def _run_command(self, command: list) -> tuple[int, str, str]:
        """Run a CLI command and return exit code, stdout, stderr."""
        result = subprocess.run(
            [sys.executable, "-m", "namedsql.cli.main"] + [str(c) for c in command],
            capture_output=True,
            text=True,
            cwd=Path(__file__).parent.parent.parent,
        )
        return result.returncode, result.stdout, result.stderr

    def test_without_command_shows_help(self):
        """Test that 'namedsql' without any command shows help."""
        exit_code, stdout, stderr = self._run_command([])

        assert exit_code == 0
        output = stdout + stderr
        assert "parse" in output
        assert "list" in output
        assert "check" in output

    def test_parse_without_argument_shows_help(self):
        """Test that 'namedsql parse' without a path shows help."""
        exit_code, stdout, stderr = self._run_command(["parse"])

        assert exit_code == 0
        output = stdout + stderr
        assert "PATH" in output or "path" in output

    def test_parse_json(self, queries_dir):
        """Test that parse prints the mapping as JSON."""
        exit_code, stdout, stderr = self._run_command(["parse", queries_dir / "orders.sql"])

        assert exit_code == 0, stderr
        assert json.loads(stdout) == {
            "create_orders": "CREATE TABLE orders (id INTEGER, user_id INTEGER);",
            "count_orders": "SELECT count(*) FROM orders;",
        }

    def test_parse_yaml_from_config(self, queries_dir):
        """Test that namedsql.toml selects the output format."""
        (queries_dir / "namedsql.toml").write_text('format = "yaml"\n', encoding="utf-8")
        exit_code, stdout, stderr = self._run_command(["parse", queries_dir])

        assert exit_code == 0, stderr
        assert list(yaml.safe_load(stdout))[0] == "create_orders"

    def test_parse_to_output_file(self, queries_dir, tmp_path):
        """Test that --output writes a file."""
        output_file = tmp_path / "out.yaml"
        exit_code, stdout, stderr = self._run_command(
            ["parse", queries_dir / "users.sql", "-f", "yaml", "-o", output_file]
        )

        assert exit_code == 0, stderr
        assert list(yaml.safe_load(output_file.read_text(encoding="utf-8"))) == [
            "create_users",
            "insert_user",
        ]

    def test_parse_invalid_format(self, queries_dir):
        """Test that an unknown --format is rejected."""
        exit_code, stdout, stderr = self._run_command(["parse", queries_dir, "-f", "xml"])
        assert exit_code != 0

    def test_parse_error_exit_code(self, tmp_path):
        """Test that structural errors are reported with exit code 1."""
        path = tmp_path / "broken.sql"
        path.write_text("SELECT 1;\n", encoding="utf-8")

        exit_code, stdout, stderr = self._run_command(["parse", path])

        assert exit_code == 1
        assert "Error:" in stderr
        assert 'Query without tag (line: 1): "SELECT 1;"' in stderr

    def test_list(self, queries_dir):
        """Test that list prints names in order."""
        exit_code, stdout, stderr = self._run_command(["list", queries_dir, "--config", queries_dir / "missing.toml"])
        assert exit_code == 1
        assert "Configuration file not found" in stderr

        exit_code, stdout, stderr = self._run_command(["list", queries_dir])
        assert exit_code == 0, stderr
        assert stdout.splitlines() == [
            "create_orders",
            "count_orders",
            "daily_report",
            "create_users",
            "insert_user",
        ]

    def test_check_passes(self, queries_dir):
        """Test that check succeeds on valid SQL."""
        exit_code, stdout, stderr = self._run_command(["check", queries_dir, "-d", "duckdb"])

        assert exit_code == 0, stderr
        assert "Checked 5 queries, 0 failed" in stdout

    def test_check_fails(self, tmp_path):
        """Test that check exits with 1 when a query is invalid."""
        path = tmp_path / "bad.sql"
        path.write_text(
            "-- name: good\nSELECT 1;\n-- name: bad\nSELECT * FROM users WHERE (id = 1\n",
            encoding="utf-8",
        )

        exit_code, stdout, stderr = self._run_command(["check", path])

        assert exit_code == 1
        assert "bad" in stdout
        assert "Checked 2 queries, 1 failed" in stdout

    def test_check_unknown_dialect(self, queries_dir):
        """Test that check reports an unknown dialect with exit code 1."""
        exit_code, stdout, stderr = self._run_command(["check", queries_dir, "-d", "nosuchdialect"])

        assert exit_code == 1
        assert "Error:" in stderr
        assert "Unknown SQL dialect 'nosuchdialect'" in stderr
