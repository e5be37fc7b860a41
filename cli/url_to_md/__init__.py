"""url-to-md - Convert any webpage to clean Markdown"""

__version__ = "0.1.0"

import logging

from .exceptions import ExtractionError, NavigationError, OutputError, ProvisioningError, UrlToMdError
from .models import Article
from .pipeline import UrlToMarkdown

__all__ = [
    "Article",
    "ExtractionError",
    "NavigationError",
    "OutputError",
    "ProvisioningError",
    "UrlToMarkdown",
    "UrlToMdError",
    "main",
]

logging.getLogger(__name__).addHandler(logging.NullHandler())


def main() -> None:
    # CLI dependencies stay out of the library import path
    from .__main__ import main as _main

    _main()
