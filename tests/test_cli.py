"""Tests for the command line interface."""
import json

import pytest
from typer.testing import CliRunner

from genui.cli.app import app, build_tree
from genui.cli.providers import get_connection_settings
from genui.components import build_greeting

runner = CliRunner()


@pytest.fixture
def tree_file(tmp_path, order_form):
    path = tmp_path / "tree.json"
    path.write_text(json.dumps(order_form.model_dump(exclude_none=True)))
    return path


class TestInspectCommand:
    """Tests for `genui inspect`."""

    def test_valid_tree(self, tree_file):
        """Test that a valid tree shows its fields and canonical JSON."""
        result = runner.invoke(app, ["inspect", str(tree_file)])

        assert result.exit_code == 0
        assert "Fields: qty, size, gift" in result.output
        assert "Canonical JSON" in result.output

    def test_invalid_tree(self, tmp_path):
        """Test that an invalid tree exits with an error."""
        path = tmp_path / "bad.json"
        path.write_text('{"props": {"content": 1}}')

        result = runner.invoke(app, ["inspect", str(path)])

        assert result.exit_code == 1
        assert "not a valid UI tree" in result.output

    def test_non_utf8_file(self, tmp_path):
        """Test that undecodable bytes exit with an error, not a traceback."""
        path = tmp_path / "latin1.json"
        path.write_bytes(b'{"type": "text", "props": {"content": "caf\xe9"}}')

        result = runner.invoke(app, ["inspect", str(path)])

        assert result.exit_code == 1
        assert "not UTF-8" in result.output
        assert not isinstance(result.exception, UnicodeDecodeError)

    def test_missing_file(self, tmp_path):
        """Test that a missing file is rejected by argument validation."""
        result = runner.invoke(app, ["inspect", str(tmp_path / "nope.json")])

        assert result.exit_code != 0


class TestComposeCommand:
    """Tests for `genui compose`."""

    def test_plain_action(self):
        """Test composing an action without form data."""
        result = runner.invoke(app, ["compose", "refresh"])

        assert result.exit_code == 0
        assert "Triggered Action: refresh" in result.output

    def test_form_data_with_invalid_field(self):
        """Test composing an action with an invalid field."""
        result = runner.invoke(
            app,
            ["compose", "register", "--field", "email=nope", "-f", "name=Ada", "--invalid", "email"],
        )

        assert result.exit_code == 0
        assert "Invalid Fields" in result.output
        assert "validation errors: email" in result.output

    def test_malformed_field(self):
        """Test that a field without '=' is rejected."""
        result = runner.invoke(app, ["compose", "register", "--field", "email"])

        assert result.exit_code == 1
        assert "expected id=value" in result.output


def test_build_tree_labels_nodes():
    """Test that the tree view has one branch per child."""
    tree = build_tree(build_greeting())

    assert len(tree.children) == 1
    assert "container" in tree.children[0].label


def test_connection_settings_from_env(monkeypatch):
    """Test reading connection settings with defaults."""
    monkeypatch.setenv("AZURE_OPENAI_ENDPOINT", "https://example.openai.azure.com/")
    monkeypatch.delenv("AZURE_OPENAI_API_KEY", raising=False)
    monkeypatch.delenv("AZURE_OPENAI_DEPLOYMENT", raising=False)

    settings = get_connection_settings()

    assert settings["endpoint"] == "https://example.openai.azure.com/"
    assert settings["api_key"] == ""
    assert settings["deployment_name"] == "gpt-4o"
