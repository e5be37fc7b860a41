import os
import sys

# Ensure cli/ is on sys.path so tests can import the package when running from repo root.
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "cli")))

import pytest

ARTICLE_HTML = """<html>
<head>
<title>How Tides Work</title>
<meta name="author" content="Jane Doe">
<meta name="description" content="A short guide to the tides.">
</head>
<body>
<nav><a href="/">Home</a> <a href="/about">About</a></nav>
<article>
<h1>How Tides Work</h1>
<p>The tides rise and fall twice a day, pulled by the gravity of the moon, and to a lesser degree by the sun, across every ocean on Earth.</p>
<p>When the sun, moon and Earth line up, the pull adds together, and the resulting spring tides are higher than usual, as any sailor knows.</p>
<p>Read more in the <a href="/docs/tides">tide tables</a>, which list predicted heights, times and ranges for the coming year, port by port.</p>
</article>
<footer>Copyright Example Harbour Authority</footer>
</body>
</html>
"""

BLANK_HTML = "<html><head></head><body></body></html>"


class FakeProvisioner:
    def __init__(self):
        self.calls = 0

    def ensure_available(self):
        self.calls += 1


class StaticFetcher:
    def __init__(self, html=None, error=None):
        self.html = html
        self.error = error
        self.urls = []

    def fetch(self, url):
        self.urls.append(url)
        if self.error is not None:
            raise self.error
        return self.html


@pytest.fixture
def article_html():
    return ARTICLE_HTML


@pytest.fixture
def blank_html():
    return BLANK_HTML
