"""Template helpers for rendering RAML documentation.

Each helper is registered with the Jinja2 environment both as a filter and
as a global function, so templates can use either form:

    {{ method.description | md }}
    {% if request_block_needed(method.uriParameters, method.queryParameters,
                               method.headers, method.body) %}

Helpers that return HTML wrap it in markupsafe.Markup so autoescaping does
not escape it a second time.
"""

import re
from collections.abc import Callable
from typing import Any

from jinja2 import Undefined
from markupsafe import Markup

from raml2html.renderers.markdown import to_html

# A sentence ends with ., ? or ! followed by whitespace
_SENTENCE_RE = re.compile(r".*?[.?!]\s", re.DOTALL)

# Single wrapping paragraph produced by the markdown converter
_PARAGRAPH_RE = re.compile(r"<p>(.*?)</p>", re.DOTALL | re.IGNORECASE)

# Prefixes that mark a schema value as a link rather than inline content
SCHEMA_URL_PREFIXES: tuple[str, ...] = ("htt", "../")

LOCK_ICON = (
    ' <span class="glyphicon glyphicon-lock" title="Authentication required"></span>'
)


def _is_absent(value: Any) -> bool:
    return value is None or isinstance(value, Undefined)


def split_sentences(text: str) -> list[str]:
    """Split text into sentences.

    Trailing text without a terminator becomes the last sentence, so text
    with no terminator at all is a single sentence.

    Examples:
        >>> split_sentences("One. Two? Three")
        ['One. ', 'Two? ', 'Three ']
    """
    padded = text + " "
    sentences = _SENTENCE_RE.findall(padded)
    remainder = padded[sum(len(s) for s in sentences):]
    if remainder.strip():
        sentences.append(remainder)
    return sentences


def md(text: Any) -> Markup | str:
    """Render markdown text as HTML.

    Args:
        text: Markdown source (None or empty renders nothing)

    Returns:
        Pre-escaped HTML, or an empty string
    """
    if _is_absent(text) or not str(text):
        return ""
    return Markup(to_html(str(text)))


def md_first_sentence(text: Any) -> Markup | str:
    """Render only the first sentence of text, without a wrapping paragraph."""
    if _is_absent(text) or not str(text):
        return ""

    first = split_sentences(str(text))[0]
    html = to_html(first.strip()).strip()
    return Markup(_PARAGRAPH_RE.sub(r"\1", html))


def md_rest(text: Any) -> Markup | str:
    """Render every sentence after the first.

    Returns an empty string when text has a single sentence.
    """
    if _is_absent(text) or not str(text):
        return ""

    rest = "".join(split_sentences(str(text))[1:]).strip()
    if not rest:
        return ""
    return Markup(to_html(rest))


def schema_url_link(text: Any) -> Markup | None:
    """Link to a schema given by URL or relative path.

    Args:
        text: Schema value from the document

    Returns:
        Anchor tag labelled "Schema", or None when text is inline content
    """
    if not isinstance(text, str):
        return None

    url = text.strip()
    if url.startswith(SCHEMA_URL_PREFIXES):
        return Markup('<a href="{}">Schema</a>').format(url)
    return None


def lock_icon(secured_by: Any) -> Markup | str:
    """Render a lock icon when a method requires authentication.

    A None entry in securedBy means "may be called anonymously". The first
    such entry is dropped; if any scheme remains, authentication is required.
    The caller's sequence is not modified.
    """
    if _is_absent(secured_by) or not secured_by:
        return ""

    schemes = list(secured_by)
    if None in schemes:
        schemes.remove(None)

    if schemes:
        return Markup(LOCK_ICON)
    return ""


def request_block_needed(
    uri_params: Any,
    query_params: Any,
    header_params: Any,
    body: Any,
) -> bool:
    """Decide whether a method needs a "Request" section.

    uri_params is accepted for call-site symmetry but does not affect the
    decision; URI parameters are shown with the resource.
    """
    return not (
        _is_absent(query_params) and _is_absent(header_params) and _is_absent(body)
    )


def resource_block_needed(node: Any) -> bool:
    """Decide whether a resource gets its own panel.

    True when the resource has methods, or when it has a description and
    sits below another resource.
    """
    if _is_absent(node) or not hasattr(node, "get"):
        return False

    if node.get("methods"):
        return True
    return bool(node.get("description") and node.get("parentUrl"))


# Helpers whose presence in the default set is configurable
SENTENCE_HELPERS: dict[str, Callable[..., Any]] = {
    "md_first_sentence": md_first_sentence,
    "md_rest": md_rest,
}

HELPERS: dict[str, Callable[..., Any]] = {
    "md": md,
    **SENTENCE_HELPERS,
    "schema_url_link": schema_url_link,
    "lock_icon": lock_icon,
    "request_block_needed": request_block_needed,
    "resource_block_needed": resource_block_needed,
}


def default_helpers(sentence_helpers: bool = True) -> dict[str, Callable[..., Any]]:
    """Return a fresh copy of the default helper set.

    Args:
        sentence_helpers: Include md_first_sentence and md_rest

    Returns:
        Helper name -> callable
    """
    helpers = dict(HELPERS)
    if not sentence_helpers:
        for name in SENTENCE_HELPERS:
            helpers.pop(name)
    return helpers
