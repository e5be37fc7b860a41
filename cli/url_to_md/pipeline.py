"""Orchestration: provision -> fetch -> extract -> convert."""

from __future__ import annotations

from typing import Optional, Protocol

from .browser import BrowserProvisioner, PageFetcher
from .converter import MarkdownConverter
from .extractor import ArticleExtractor
from .models import Article


class Provisioner(Protocol):
    def ensure_available(self) -> None: ...


class HtmlFetcher(Protocol):
    def fetch(self, url: str) -> str: ...


class ContentExtractor(Protocol):
    def extract(self, html: str, base_url: str) -> Article: ...


class DocumentConverter(Protocol):
    def to_markdown_document(self, article: Article, source_url: str) -> str: ...


class UrlToMarkdown:
    """Runs one URL through the whole pipeline. Any collaborator can be swapped out."""

    def __init__(
        self,
        provisioner: Optional[Provisioner] = None,
        fetcher: Optional[HtmlFetcher] = None,
        extractor: Optional[ContentExtractor] = None,
        converter: Optional[DocumentConverter] = None,
    ):
        self.provisioner = provisioner or BrowserProvisioner()
        self.fetcher = fetcher or PageFetcher()
        self.extractor = extractor or ArticleExtractor()
        self.converter = converter or MarkdownConverter()

    def convert(self, url: str) -> str:
        self.provisioner.ensure_available()
        html = self.fetcher.fetch(url)
        article = self.extractor.extract(html, url)
        return self.converter.to_markdown_document(article, url)
