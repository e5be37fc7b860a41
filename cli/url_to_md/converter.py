from __future__ import annotations

import logging
import re

from markdownify import markdownify as md

from .models import Article

logger = logging.getLogger(__name__)

_EXTRA_BLANK_LINES = re.compile(r"\n{3,}")


class MarkdownConverter:
    """Turns an extracted article into a Markdown document with a metadata header."""

    def convert_body(self, content_html: str) -> str:
        body = md(content_html, heading_style="ATX", bullets="-")
        return _EXTRA_BLANK_LINES.sub("\n\n", body).strip()

    def to_markdown_document(self, article: Article, source_url: str) -> str:
        logger.info("Converting to Markdown...")
        parts = [f"# {article.title}\n\n"]
        if article.byline:
            parts.append(f"*By {article.byline}*\n\n")
        if article.excerpt:
            parts.append(f"> {article.excerpt}\n\n")
        parts.append(f"**Source:** {source_url}\n\n---\n\n")
        parts.append(self.convert_body(article.content_html))
        parts.append("\n")
        return "".join(parts)
