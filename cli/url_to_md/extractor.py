from __future__ import annotations

import json
import logging
import re
from typing import Any, Dict, List, Optional

from bs4 import BeautifulSoup
from readability import Document

from .exceptions import ExtractionError
from .models import Article

logger = logging.getLogger(__name__)

_BYLINE_PATTERN = re.compile(r"byline|author|dateline|writtenby", re.IGNORECASE)


def _clean(value: Any) -> Optional[str]:
    if not isinstance(value, str):
        return None
    collapsed = " ".join(value.split())
    return collapsed or None


class ArticleExtractor:
    """Isolates the main article of a rendered page with readability."""

    def extract(self, html: str, base_url: str) -> Article:
        """
        Run readability over the page and collect header metadata.

        Args:
            html: Rendered page markup
            base_url: URL the page was loaded from, relative links resolve against it

        Returns:
            Article with title, optional byline and excerpt, and content HTML

        Raises:
            ExtractionError: no article-like content was found
        """
        logger.info("Extracting main content...")
        try:
            doc = Document(html, url=base_url)
            content_html = doc.summary(html_partial=True)
            readability_title = doc.short_title()
        except Exception as e:
            logger.debug("Readability failed: %s", e)
            raise ExtractionError("Failed to extract article content") from e

        content_soup = BeautifulSoup(content_html or "", "html.parser")
        if not content_soup.get_text(" ", strip=True):
            raise ExtractionError("Failed to extract article content")

        soup = BeautifulSoup(html, "html.parser")
        json_ld = self._json_ld_objects(soup)

        title = _clean(readability_title) or self._json_ld_headline(json_ld) or self._extract_title(soup) or base_url
        byline = self._json_ld_author(json_ld) or self._extract_byline(soup)
        excerpt = self._extract_excerpt(soup, content_soup)

        return Article(title=title, content_html=content_html, byline=byline, excerpt=excerpt)

    def _extract_title(self, soup: BeautifulSoup) -> Optional[str]:
        og_title = soup.find("meta", property="og:title")
        if og_title and _clean(og_title.get("content")):
            return _clean(og_title.get("content"))

        h1 = soup.find("h1")
        if h1 and _clean(h1.get_text()):
            return _clean(h1.get_text())

        title_tag = soup.find("title")
        if title_tag:
            return _clean(title_tag.get_text())

        return None

    def _extract_byline(self, soup: BeautifulSoup) -> Optional[str]:
        author = (
            soup.find("meta", {"name": "author"})
            or soup.find("meta", {"property": "article:author"})
            or soup.find("meta", {"name": "dc.creator"})
            or soup.find("meta", {"property": "og:author"})
        )
        if author:
            value = _clean(author.get("content"))
            # article:author is frequently a profile URL rather than a name
            if value and not value.startswith(("http://", "https://")):
                return value

        link = soup.find("a", rel="author")
        if link and _clean(link.get_text()):
            return _clean(link.get_text())

        for elem in soup.find_all(["span", "p", "div", "address"]):
            signature = " ".join(elem.get("class", [])) + " " + (elem.get("id") or "")
            if _BYLINE_PATTERN.search(signature):
                text = _clean(elem.get_text(" "))
                if text and len(text) < 100:
                    return text
        return None

    def _extract_excerpt(self, soup: BeautifulSoup, content_soup: BeautifulSoup) -> Optional[str]:
        for attrs in ({"name": "description"}, {"property": "og:description"}, {"name": "twitter:description"}):
            meta = soup.find("meta", attrs)
            if meta and _clean(meta.get("content")):
                return _clean(meta.get("content"))

        for p in content_soup.find_all("p"):
            text = _clean(p.get_text(" "))
            if text:
                return text
        return None

    def _json_ld_objects(self, soup: BeautifulSoup) -> List[Dict[str, Any]]:
        """schema.org objects from every JSON-LD block, with @graph flattened."""
        objects: List[Dict[str, Any]] = []
        for script in soup.find_all("script", type="application/ld+json"):
            try:
                data = json.loads(script.get_text())
            except ValueError:
                continue
            for node in data if isinstance(data, list) else [data]:
                if not isinstance(node, dict):
                    continue
                graph = node.get("@graph")
                objects.extend(item for item in (graph if isinstance(graph, list) else [node]) if isinstance(item, dict))
        return objects

    def _json_ld_headline(self, objects: List[Dict[str, Any]]) -> Optional[str]:
        for obj in objects:
            headline = _clean(obj.get("headline"))
            if headline:
                return headline
        return None

    def _json_ld_author(self, objects: List[Dict[str, Any]]) -> Optional[str]:
        for obj in objects:
            author = obj.get("author")
            if isinstance(author, list):
                author = author[0] if author else None
            if isinstance(author, dict):
                author = author.get("name")
            name = _clean(author)
            if name:
                return name
        return None
