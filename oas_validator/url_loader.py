"""Loaders that fetch JSON schema documents by URL."""

from __future__ import annotations

import json
import ssl
import urllib.error
import urllib.parse
import urllib.request
from typing import Any, Optional


class LoaderError(Exception):
    """A schema document could not be loaded."""


class HTTPURLLoader:
    """Load JSON documents over HTTP(S)."""

    def __init__(self, timeout: float = 15.0, insecure: bool = False) -> None:
        self.timeout = timeout
        self.insecure = insecure
        self.ssl_context: Optional[ssl.SSLContext] = None
        if insecure:
            ctx = ssl.create_default_context()
            ctx.check_hostname = False
            ctx.verify_mode = ssl.CERT_NONE
            self.ssl_context = ctx

    def load(self, url: str) -> Any:
        try:
            with urllib.request.urlopen(
                url, timeout=self.timeout, context=self.ssl_context
            ) as resp:
                status = resp.status
                body = resp.read()
        except urllib.error.HTTPError as exc:
            exc.close()
            raise LoaderError(f"{url} returned status code {exc.code}") from exc
        except (urllib.error.URLError, OSError, ValueError) as exc:
            raise LoaderError(f"failed to load {url}: {exc}") from exc
        if status != 200:
            raise LoaderError(f"{url} returned status code {status}")
        try:
            return json.loads(body)
        except ValueError as exc:
            raise LoaderError(f"invalid JSON from {url}: {exc}") from exc


class FileLoader:
    """Load JSON documents from file:// URLs."""

    def load(self, url: str) -> Any:
        parsed = urllib.parse.urlparse(url)
        path = urllib.request.url2pathname(parsed.path)
        try:
            with open(path, encoding="utf-8") as fh:
                return json.load(fh)
        except (OSError, ValueError) as exc:
            raise LoaderError(f"failed to load {url}: {exc}") from exc


def new_http_url_loader(insecure: bool) -> HTTPURLLoader:
    """Create an HTTP loader with a 15 second timeout."""
    return HTTPURLLoader(timeout=15.0, insecure=insecure)


def new_compiler_loader() -> dict[str, Any]:
    """Return loaders keyed by URL scheme."""
    return {
        "file": FileLoader(),
        "http": new_http_url_loader(False),
        "https": new_http_url_loader(False),
    }