"""
Unit tests for the CLI.
"""

import json
import textwrap
from pathlib import Path

import pytest
from typer.testing import CliRunner

from schemasmith import __version__
from schemasmith.cli import app
from schemasmith.cli.commands import load_builder


runner = CliRunner()

BUILDER_MODULE = """
from schemasmith import schema

user = schema.object({
    "name": schema.STRING,
    "age": schema.integer().min(0),
})


def build_broken():
    return schema.string().min(-1)


not_a_schema = 42
"""


@pytest.fixture
def app_dir(tmp_path):
    """Directory holding an importable module of builders."""
    (tmp_path / "cli_sample_schemas.py").write_text(textwrap.dedent(BUILDER_MODULE))
    return tmp_path


class TestLoadBuilder:
    """Test builder loading."""

    def test_load_attribute(self, app_dir):
        """Test loading a builder attribute."""
        node = load_builder("cli_sample_schemas:user", app_dir=app_dir)

        assert node.materialize()["required"] == ["name"]

    def test_load_callable(self, app_dir):
        """Test a zero-argument callable is called."""
        node = load_builder("cli_sample_schemas:build_broken", app_dir=app_dir)

        assert node.materialize() == {"type": "string", "minLength": -1}

    @pytest.mark.parametrize("target,message", [
        ("cli_sample_schemas", "package.module:attribute"),
        ("cli_sample_schemas:missing", "has no attribute"),
        ("cli_sample_schemas:not_a_schema", "expected a SchemaNode or SchemaJoin"),
        ("no_such_module_here:user", "Could not import module"),
    ])
    def test_bad_targets(self, app_dir, target, message):
        """Test bad targets raise ValueError."""
        with pytest.raises(ValueError, match=message):
            load_builder(target, app_dir=app_dir)


class TestRenderCommand:
    """Test the render command."""

    def test_render_prints_document(self, app_dir):
        """Test rendering prints the JSON document."""
        result = runner.invoke(app, ["render", "cli_sample_schemas:user", "--app-dir", str(app_dir)])

        assert result.exit_code == 0
        assert '"type": "object"' in result.output
        assert '"title": "name"' in result.output

    def test_render_to_file(self, app_dir, tmp_path):
        """Test rendering to an output file."""
        output = tmp_path / "user.schema.json"

        result = runner.invoke(app, [
            "render", "cli_sample_schemas:user",
            "--app-dir", str(app_dir),
            "--output", str(output),
            "--indent", "4",
            "--check",
        ])

        assert result.exit_code == 0
        assert json.loads(output.read_text()) == {
            "type": "object",
            "properties": {
                "name": {"type": "string", "title": "name"},
                "age": {"type": "integer", "minimum": 0},
            },
            "additionalProperties": False,
            "required": ["name"],
        }
        assert '    "type": "object"' in output.read_text()

    def test_render_check_failure(self, app_dir):
        """Test --check exits with code 1 on meta-schema errors."""
        result = runner.invoke(app, [
            "render", "cli_sample_schemas:build_broken", "--app-dir", str(app_dir), "--check",
        ])

        assert result.exit_code == 1
        assert "Schema Errors" in result.output

    def test_render_bad_target(self, app_dir):
        """Test a bad target exits with code 1."""
        result = runner.invoke(app, ["render", "cli_sample_schemas:nope", "--app-dir", str(app_dir)])

        assert result.exit_code == 1
        assert "Command failed" in result.output

    def test_render_show_properties(self, app_dir):
        """Test the properties table lists top-level properties."""
        result = runner.invoke(app, [
            "render", "cli_sample_schemas:user", "--app-dir", str(app_dir), "--show-properties",
        ])

        assert result.exit_code == 0
        assert "Properties" in result.output
        assert "age" in result.output


class TestCheckCommand:
    """Test the check command."""

    def test_check_valid_file(self, tmp_path):
        """Test a valid schema file passes."""
        path = tmp_path / "ok.json"
        path.write_text(json.dumps({"type": "string", "maxLength": 3}))

        result = runner.invoke(app, ["check", "--schema", str(path), "--show-schema"])

        assert result.exit_code == 0
        assert "valid Draft 7 document" in result.output

    def test_check_invalid_file(self, tmp_path):
        """Test an invalid schema file fails."""
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"type": "string", "maxLength": -3}))

        result = runner.invoke(app, ["check", "--schema", str(path)])

        assert result.exit_code == 1
        assert "maxLength" in result.output

    def test_check_malformed_json(self, tmp_path):
        """Test malformed JSON fails."""
        path = tmp_path / "broken.json"
        path.write_text("{not json")

        result = runner.invoke(app, ["check", "--schema", str(path)])

        assert result.exit_code == 1
        assert "Invalid JSON" in result.output


class TestAppCallback:
    """Test global options."""

    def test_version(self):
        """Test --version prints the package version."""
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.output

    def test_no_command_prints_help(self):
        """Test running without a command shows help."""
        result = runner.invoke(app, [])

        assert result.exit_code == 0
        assert "render" in result.output
        assert "check" in result.output

    def test_verbose_render(self, app_dir):
        """Test --verbose still renders."""
        result = runner.invoke(app, ["--verbose", "render", "cli_sample_schemas:user", "--app-dir", str(app_dir)])

        assert result.exit_code == 0


def test_pyproject_has_cli_script():
    """Test that pyproject.toml has the CLI script entry point."""
    pyproject_file = Path(__file__).parent.parent.parent / "pyproject.toml"
    content = pyproject_file.read_text()

    assert "[project.scripts]" in content
    assert "schemasmith.cli.main:cli" in content
