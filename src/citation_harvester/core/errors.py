"""
Error taxonomy for source fetching.

FetchError subclasses are reported to callers as data inside a FetchResult.
ParseError is deliberately outside that branch: a malformed API body is not
recoverable and escapes fetch() as an exception.
"""

from typing import Any


class HarvesterError(Exception):
    """Base class for all citation-harvester errors."""


class FetchError(HarvesterError):
    """A fetch failed in a way that is reported in FetchResult.errors."""


class TransportError(FetchError):
    """The HTTP request could not complete (DNS, connection, timeout...)."""

    def __init__(self, url: str, cause: Exception):
        super().__init__(f"Request to {url} failed: {cause}")
        self.url = url
        self.cause = cause


class HttpStatusError(FetchError):
    """The HTTP request completed with a status other than 200."""

    def __init__(self, status_code: int, url: str, body: Any = None):
        super().__init__(f"Received a {status_code} when making a request to {url}")
        self.status_code = status_code
        self.url = url
        self.body = body


class UnsupportedUrlError(FetchError):
    """No handler recognises the URL."""

    def __init__(self, url: str):
        super().__init__(f"Unsupported source URL: {url!r}")
        self.url = url


class ParseError(HarvesterError):
    """A successful response carried a body that is not valid JSON."""

    def __init__(self, url: str, cause: Exception):
        super().__init__(f"Invalid JSON in response from {url}: {cause}")
        self.url = url
        self.cause = cause
