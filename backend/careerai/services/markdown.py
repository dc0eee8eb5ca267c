"""Minimal markdown-subset renderer for feedback and interview messages.

Handles only what the model is asked to produce: ``### `` headings,
``**bold**``, ``- `` list items and line breaks. Best-effort cosmetic
formatting; any input renders to something.
"""

import html
import re

_HEADING_PATTERN = re.compile(r"### (.*)")
_BOLD_PATTERN = re.compile(r"\*\*([^*]+)\*\*")
_LIST_ITEM_PATTERN = re.compile(r"^- (.*)", re.MULTILINE)


def render_simple_markdown(text: str) -> str:
    """Render the markdown subset to HTML.

    Input is HTML-escaped first so model output cannot inject markup.

    Args:
        text: Markdown-ish text from the model.

    Returns:
        HTML fragment.
    """
    escaped = html.escape(text or "", quote=False)
    rendered = _HEADING_PATTERN.sub(r"<h3>\1</h3>", escaped)
    rendered = _BOLD_PATTERN.sub(r"<strong>\1</strong>", rendered)
    rendered = _LIST_ITEM_PATTERN.sub(r"<li>\1</li>", rendered)
    return rendered.replace("\n", "<br />")
