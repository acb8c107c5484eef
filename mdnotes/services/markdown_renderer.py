from __future__ import annotations

import html
from pathlib import Path

import markdown as md

from mdnotes.errors import RenderFailure
from mdnotes.infrastructure.filesystem import atomic_write_text
from mdnotes.logging_setup import log
from mdnotes.services.sanitize import sanitize_rendered_html

MD_EXTENSIONS = ["fenced_code", "tables", "toc"]

BASE_CSS = """
    body { font-family: sans-serif; padding: 16px; line-height: 1.5; }
    code, pre { background: #f5f5f5; }
    pre { padding: 12px; overflow-x: auto; }
    a { text-decoration: none; }
    a:hover { text-decoration: underline; }
"""


def render_markdown(text: str) -> str:
    """Markdown -> sanitized HTML fragment. Raises RenderFailure."""
    try:
        rendered = md.markdown(text, extensions=MD_EXTENSIONS)
        return sanitize_rendered_html(rendered)
    except Exception as exc:
        raise RenderFailure(f"Error rendering Markdown: {exc}") from exc


class MarkdownRenderer:
    """Preview adapter: never lets a rendering error escape."""

    def __init__(self, *, render=render_markdown):
        self._render = render

    def render(self, text: str) -> str:
        try:
            return self._render(text)
        except RenderFailure as exc:
            log.warning("%s; falling back to raw text", exc)
            return text

    def render_page(self, text: str, *, title: str = "") -> str:
        body = self.render(text)
        return f"""\
<html>
<head>
  <meta charset="utf-8"/>
  <title>{html.escape(title)}</title>
  <style>{BASE_CSS}</style>
</head>
<body>{body}</body>
</html>
"""

    def write_preview(self, text: str, path: Path, *, title: str = "") -> Path:
        path = Path(path)
        atomic_write_text(path, self.render_page(text, title=title))
        log.info("Preview written: %s", path)
        return path
