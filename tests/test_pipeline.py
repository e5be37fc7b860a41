import pytest

from conftest import FakeProvisioner, StaticFetcher
from url_to_md.exceptions import ProvisioningError
from url_to_md.models import Article
from url_to_md.pipeline import UrlToMarkdown

URL = "https://example.com/tides"


class RecordingExtractor:
    def __init__(self, calls):
        self.calls = calls

    def extract(self, html, base_url):
        self.calls.append(("extract", html, base_url))
        return Article(title="T", content_html="<p>body</p>")


class RecordingConverter:
    def __init__(self, calls):
        self.calls = calls

    def to_markdown_document(self, article, source_url):
        self.calls.append(("convert", article.title, source_url))
        return "# T\n"


def test_steps_run_in_order_with_source_url():
    calls = []
    fetcher = StaticFetcher(html="<html></html>")
    pipeline = UrlToMarkdown(
        provisioner=FakeProvisioner(),
        fetcher=fetcher,
        extractor=RecordingExtractor(calls),
        converter=RecordingConverter(calls),
    )

    assert pipeline.convert(URL) == "# T\n"
    assert fetcher.urls == [URL]
    assert calls == [("extract", "<html></html>", URL), ("convert", "T", URL)]


def test_provisioning_failure_stops_before_fetch():
    class BrokenProvisioner:
        def ensure_available(self):
            raise ProvisioningError("no browser")

    fetcher = StaticFetcher(html="<html></html>")
    pipeline = UrlToMarkdown(provisioner=BrokenProvisioner(), fetcher=fetcher)

    with pytest.raises(ProvisioningError):
        pipeline.convert(URL)
    assert fetcher.urls == []


def test_real_extractor_and_converter(article_html):
    provisioner = FakeProvisioner()
    pipeline = UrlToMarkdown(provisioner=provisioner, fetcher=StaticFetcher(html=article_html))

    doc = pipeline.convert(URL)

    assert provisioner.calls == 1
    assert doc.startswith("# How Tides Work\n\n*By Jane Doe*\n\n> A short guide to the tides.\n\n")
    assert f"**Source:** {URL}\n\n---\n\n" in doc
