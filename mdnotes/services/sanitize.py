from __future__ import annotations

import bleach

ALLOWED_TAGS = [
    "a", "p", "br", "hr",
    "strong", "em", "code", "pre", "blockquote",
    "ul", "ol", "li",
    "h1", "h2", "h3", "h4", "h5", "h6",
    "table", "thead", "tbody", "tr", "th", "td",
]

ALLOWED_ATTRS = {
    "a": ["href", "title"],
    "th": ["align"], "td": ["align"],
    # anchors emitted by the markdown 'toc' extension
    "h1": ["id"], "h2": ["id"], "h3": ["id"],
    "h4": ["id"], "h5": ["id"], "h6": ["id"],
}

ALLOWED_PROTOCOLS = ["http", "https", "mailto"]


def sanitize_rendered_html(rendered_html: str) -> str:
    """
    Sanitize HTML output from Markdown before it is opened in a browser.
    Without this, raw HTML inside notes would execute in the preview page.
    """
    return bleach.clean(
        rendered_html,
        tags=ALLOWED_TAGS,
        attributes=ALLOWED_ATTRS,
        protocols=ALLOWED_PROTOCOLS,
        strip=True,
    )
