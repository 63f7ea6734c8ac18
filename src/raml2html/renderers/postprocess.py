"""Output post-processing.

The default post-processor restores double quotes that the template engine
escaped as "&quot;" and then minifies the page with minify-html. It is only
run when a caller opts in, because minification rewrites the markup.
"""

import logging

import minify_html

logger = logging.getLogger(__name__)


def unescape_quotes(html: str) -> str:
    """Replace &quot; entities with literal double quotes."""
    return html.replace("&quot;", '"')


def minify(html: str) -> str:
    """Minify an HTML document.

    Args:
        html: Complete HTML page

    Returns:
        Minified markup

    Raises:
        ValueError: If the minifier rejects the markup
    """
    try:
        result = minify_html.minify(html, minify_css=True, minify_js=False)
    except Exception as e:
        raise ValueError(f"Minification failed: {e}") from e

    logger.debug("Minified output from %d to %d characters", len(html), len(result))
    return result


def unescape_and_minify(html: str) -> str:
    """Default post-processing step: quote unescaping followed by minification."""
    return minify(unescape_quotes(html))
