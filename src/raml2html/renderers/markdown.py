"""Markdown to HTML conversion.

Uses mistune with the table plugin. Tables are rendered with the Bootstrap
"table" class; every other construct uses mistune's default HTML output.
Raw HTML in descriptions is passed through unescaped.
"""

import mistune

TABLE_CLASS = "table"


class TableClassRenderer(mistune.HTMLRenderer):
    """HTML renderer that tags every table with a CSS class."""

    def table(self, text: str) -> str:
        return f'<table class="{TABLE_CLASS}">\n{text}</table>\n'


_markdown = mistune.create_markdown(
    renderer=TableClassRenderer(escape=False),
    plugins=["table"],
)


def to_html(text: str) -> str:
    """Convert markdown text to an HTML fragment.

    Args:
        text: Markdown source

    Returns:
        HTML string (empty for empty input)
    """
    if not text:
        return ""
    return str(_markdown(text))
