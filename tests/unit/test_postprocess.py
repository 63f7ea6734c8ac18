"""Unit tests for output post-processing."""

from raml2html.renderers.postprocess import minify, unescape_and_minify, unescape_quotes


class TestUnescapeQuotes:
    """Tests for unescape_quotes."""

    def test_replaces_quot_entities(self) -> None:
        """Test &quot; replacement."""
        assert unescape_quotes("say &quot;hi&quot;") == 'say "hi"'

    def test_leaves_other_entities(self) -> None:
        """Test that other entities are untouched."""
        assert unescape_quotes("&lt;&amp;&gt;") == "&lt;&amp;&gt;"


class TestMinify:
    """Tests for minify."""

    def test_collapses_whitespace(self) -> None:
        """Test that the output is smaller and keeps content."""
        html = "<html>\n  <body>\n    <p>  Hello   world  </p>\n  </body>\n</html>\n"

        result = minify(html)

        assert len(result) < len(html)
        assert "Hello" in result
        assert "world" in result

    def test_unescape_and_minify(self) -> None:
        """Test the default post-processing step."""
        html = "<div>\n  <pre>&quot;quoted&quot;</pre>\n</div>\n"

        result = unescape_and_minify(html)

        assert "&quot;" not in result
        assert "quoted" in result
