"""Integration tests for the raml2html CLI.

These tests exercise the full CLI workflow against the sample RAML files.
"""

from pathlib import Path

import pytest
from typer.testing import CliRunner

from raml2html import __version__
from raml2html.cli import app
from tests.fixtures import BROKEN_RAML_PATH, EXAMPLE_RAML_PATH

runner = CliRunner()


class TestRenderCommand:
    """Integration tests for `raml2html render`."""

    @pytest.fixture
    def output_path(self, tmp_path: Path) -> Path:
        """Create temporary output path."""
        return tmp_path / "docs" / "api.html"

    def test_render_to_file(self, output_path: Path) -> None:
        """Test writing the rendered page to --output."""
        result = runner.invoke(
            app,
            ["render", str(EXAMPLE_RAML_PATH), "--output", str(output_path)],
        )

        assert result.exit_code == 0, f"Command failed: {result.output}"
        assert output_path.exists(), "HTML file was not created"
        assert "World Music API" in output_path.read_text()

    def test_render_to_stdout(self) -> None:
        """Test printing the page when no output is given."""
        result = runner.invoke(app, ["--quiet", "render", str(EXAMPLE_RAML_PATH)])

        assert result.exit_code == 0, f"Command failed: {result.output}"
        assert "<!DOCTYPE HTML>" in result.stdout
        assert "World Music API" in result.stdout

    def test_input_option(self, output_path: Path) -> None:
        """Test the --input flag."""
        result = runner.invoke(
            app,
            ["render", "--input", str(EXAMPLE_RAML_PATH), "-o", str(output_path)],
        )

        assert result.exit_code == 0, f"Command failed: {result.output}"
        assert output_path.exists()

    def test_https_flag(self, output_path: Path) -> None:
        """Test the --https flag."""
        result = runner.invoke(
            app,
            ["render", str(EXAMPLE_RAML_PATH), "--https", "-o", str(output_path)],
        )

        assert result.exit_code == 0
        assert "https://netdna.bootstrapcdn.com" in output_path.read_text()

    def test_minify_flag(self, tmp_path: Path) -> None:
        """Test that --minify produces smaller output."""
        plain = tmp_path / "plain.html"
        small = tmp_path / "small.html"

        runner.invoke(app, ["render", str(EXAMPLE_RAML_PATH), "-o", str(plain)])
        result = runner.invoke(
            app, ["render", str(EXAMPLE_RAML_PATH), "--minify", "-o", str(small)]
        )

        assert result.exit_code == 0
        assert len(small.read_text()) < len(plain.read_text())

    def test_custom_templates(self, tmp_path: Path, output_path: Path) -> None:
        """Test --template, --resource and --item overrides."""
        main = tmp_path / "main.j2"
        main.write_text(
            "{{ title }}:{% for resource in resources %}{% include 'resource' %}{% endfor %}"
        )
        resource = tmp_path / "resource.j2"
        resource.write_text("{% for method in resource.methods %}[{{ method.method }}]{% endfor %}")
        item = tmp_path / "item.j2"
        item.write_text("")

        result = runner.invoke(
            app,
            [
                "render", str(EXAMPLE_RAML_PATH),
                "-t", str(main),
                "-r", str(resource),
                "-m", str(item),
                "-o", str(output_path),
            ],
        )

        assert result.exit_code == 0, f"Command failed: {result.output}"
        assert output_path.read_text() == "World Music API:[get][post][delete]"

    def test_missing_input(self) -> None:
        """Test that a missing input file argument fails."""
        result = runner.invoke(app, ["render"])

        assert result.exit_code == 1
        assert "You need to specify the RAML input file" in result.output

    def test_parse_error(self, output_path: Path) -> None:
        """Test that invalid RAML exits non-zero without output."""
        result = runner.invoke(
            app, ["render", str(BROKEN_RAML_PATH), "-o", str(output_path)]
        )

        assert result.exit_code == 1
        assert "Error parsing" in result.output
        assert not output_path.exists()

    def test_unwritable_output(self, tmp_path: Path) -> None:
        """Test that an output path under a regular file exits non-zero."""
        blocker = tmp_path / "f"
        blocker.write_text("")

        result = runner.invoke(
            app,
            ["render", str(EXAMPLE_RAML_PATH), "-o", str(blocker / "out.html")],
        )

        assert result.exit_code == 1
        assert "Error writing" in result.output
        assert blocker.read_text() == ""

    def test_missing_template_override(self, tmp_path: Path) -> None:
        """Test that a bad --template path exits non-zero."""
        result = runner.invoke(
            app,
            ["render", str(EXAMPLE_RAML_PATH), "-t", str(tmp_path / "nope.j2")],
        )

        assert result.exit_code == 1
        assert "Template not found" in result.output

    def test_settings_file(self, tmp_path: Path) -> None:
        """Test --config supplying https and output path."""
        output_path = tmp_path / "from-settings.html"
        settings = tmp_path / "raml2html.yaml"
        settings.write_text(
            f"output:\n  path: {output_path}\nrender:\n  https: true\n"
        )

        result = runner.invoke(
            app, ["--config", str(settings), "render", str(EXAMPLE_RAML_PATH)]
        )

        assert result.exit_code == 0, f"Command failed: {result.output}"
        assert "https://netdna.bootstrapcdn.com" in output_path.read_text()


class TestGlobalOptions:
    """Tests for global CLI options."""

    def test_version(self) -> None:
        """Test --version."""
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert f"raml2html {__version__}" in result.output


class TestValidateCommand:
    """Integration tests for `raml2html validate`."""

    def test_valid_template(self, tmp_path: Path) -> None:
        """Test a syntactically valid template."""
        template = tmp_path / "ok.j2"
        template.write_text("{% for r in resources %}{{ md(r.description) }}{% endfor %}")

        result = runner.invoke(app, ["validate", str(template)])

        assert result.exit_code == 0
        assert "Template is valid" in result.output

    def test_invalid_template(self, tmp_path: Path) -> None:
        """Test a template with a syntax error."""
        template = tmp_path / "bad.j2"
        template.write_text("{% for r in resources %}")

        result = runner.invoke(app, ["validate", str(template)])

        assert result.exit_code == 1
        assert "Template syntax error" in result.output
