from .editor import edit_text
from .markdown_renderer import MarkdownRenderer, render_markdown
from .sanitize import sanitize_rendered_html

__all__ = ["edit_text",
           "MarkdownRenderer",
           "render_markdown",
           "sanitize_rendered_html"
           ]
