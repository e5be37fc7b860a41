"""Errors raised by url-to-md. Only the CLI catches them."""


class UrlToMdError(Exception):
    """Base class for every failure that should end the run with exit code 1."""


class ProvisioningError(UrlToMdError):
    """The Chromium binary is missing and could not be installed."""


class NavigationError(UrlToMdError):
    """The browser could not launch or load the page."""


class ExtractionError(UrlToMdError):
    """Readability found no article content in the rendered page."""


class OutputError(UrlToMdError):
    """The Markdown could not be written to its destination."""
