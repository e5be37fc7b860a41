"""Data models for url-to-md."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Article:
    """Main content of a page as isolated by readability."""

    title: str
    content_html: str
    byline: Optional[str] = None
    excerpt: Optional[str] = None
