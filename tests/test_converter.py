from url_to_md.converter import MarkdownConverter
from url_to_md.models import Article

URL = "https://example.com/a?ref=feed"

BODY = "<h2>Setup</h2><p>Hello <strong>world</strong>.</p><pre><code>x = 1</code></pre><ul><li>one</li><li>two</li></ul>"


def test_header_order_with_all_fields():
    article = Article(title="Guide", content_html=BODY, byline="Jane Doe", excerpt="In short.")

    doc = MarkdownConverter().to_markdown_document(article, URL)

    assert doc.startswith(
        "# Guide\n\n*By Jane Doe*\n\n> In short.\n\n**Source:** https://example.com/a?ref=feed\n\n---\n\n## Setup"
    )


def test_optional_lines_are_omitted():
    article = Article(title="Guide", content_html=BODY)

    doc = MarkdownConverter().to_markdown_document(article, URL)

    assert doc.startswith("# Guide\n\n**Source:** https://example.com/a?ref=feed\n\n---\n\n")
    assert "By " not in doc
    assert "\n> " not in doc


def test_body_uses_atx_headings_fenced_code_and_dash_bullets():
    doc = MarkdownConverter().to_markdown_document(Article(title="Guide", content_html=BODY), URL)

    assert "## Setup" in doc
    assert "Hello **world**." in doc
    assert "```\nx = 1\n```" in doc
    assert "- one" in doc
    assert "\n\n\n" not in doc
    assert doc.endswith("\n") and not doc.endswith("\n\n")


def test_conversion_is_deterministic():
    article = Article(title="Guide", content_html=BODY, byline="Jane Doe")
    converter = MarkdownConverter()

    assert converter.to_markdown_document(article, URL) == converter.to_markdown_document(article, URL)
