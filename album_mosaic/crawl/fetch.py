"""HTTP fetching utilities for the album mosaic pipeline."""

from __future__ import annotations

import logging
from threading import Lock
from urllib.parse import quote, urlparse

import requests
from requests import Session
from tenacity import (  # type: ignore[import-untyped]
    Retrying,
    before_sleep_log,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

logger = logging.getLogger(__name__)

DEFAULT_RELAY = "https://api.allorigins.win/raw?url="

DEFAULT_TIMEOUT = 10.0
_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/120.0.0.0 Safari/537.36"
)

_session_lock = Lock()
_session: Session | None = None


class FetchFailure(Exception):
    """Raised when the album page could not be retrieved."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"Failed to fetch {url}: {reason}")
        self.url = url
        self.reason = reason


class RetryableHTTPStatusError(Exception):
    """Raised for HTTP status codes that should trigger a retry."""

    def __init__(self, status_code: int) -> None:
        super().__init__(f"Server returned status {status_code}")
        self.status_code = status_code


def _get_session() -> Session:
    """Return a shared requests session configured with default headers."""
    global _session
    if _session is None:
        with _session_lock:
            if _session is None:
                session = requests.Session()
                session.headers.update(
                    {
                        "User-Agent": _USER_AGENT,
                        "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
                        "Accept-Language": "en-US,en;q=0.5",
                    }
                )
                _session = session
    return _session


_retryer = Retrying(
    stop=stop_after_attempt(3),
    wait=wait_exponential(multiplier=1, min=1, max=5),
    retry=retry_if_exception_type(
        (requests.Timeout, requests.ConnectionError, RetryableHTTPStatusError)
    ),
    before_sleep=before_sleep_log(logger, logging.DEBUG),
    reraise=True,
)


def _ensure_http_scheme(url: str) -> str:
    """Ensure *url* is qualified with an HTTP scheme, defaulting to https."""
    cleaned = url.strip()
    if not cleaned:
        return cleaned
    if cleaned.startswith(("http://", "https://")):
        return cleaned
    if cleaned.startswith("//"):
        return f"https:{cleaned}"
    parsed = urlparse(cleaned)
    if parsed.scheme:
        return cleaned
    return f"https://{cleaned}"


def relay_url(url: str, relay: str | None = None) -> str:
    """Return the address to request for *url*, routed through *relay* if given."""
    target = _ensure_http_scheme(url)
    if not relay:
        return target
    return f"{relay}{quote(target, safe='')}"


def _fetch_once(url: str, timeout: float) -> str:
    """Issue a single HTTP GET request and return the response text."""
    session = _get_session()
    response = session.get(url, timeout=timeout, allow_redirects=True)
    if 500 <= response.status_code < 600:
        raise RetryableHTTPStatusError(response.status_code)
    if not response.ok:
        raise FetchFailure(url, f"status {response.status_code}")
    if not response.encoding:
        response.encoding = response.apparent_encoding or "utf-8"
    return response.text


def fetch_text(
    url: str,
    relay: str | None = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> str | None:
    """Fetch *url*, optionally through *relay*, and return the page text.

    Retries are attempted for transient failures such as server errors or
    timeouts. On error the function returns ``None`` and logs the failure.
    """
    if not url or not url.strip():
        logger.warning("No URL given to fetch")
        return None
    target = relay_url(url, relay)
    logger.info("Fetching photos from %s", url)
    try:
        return _retryer(lambda: _fetch_once(target, timeout))
    except FetchFailure as exc:
        logger.warning("%s", exc)
    except RetryableHTTPStatusError as exc:
        logger.warning("Server error fetching %s: %s", url, exc)
    except requests.RequestException as exc:
        logger.warning("Request error fetching %s: %s", url, exc)
    except Exception:  # noqa: BLE001 - avoid leaking unexpected exceptions
        logger.exception("Unexpected error fetching %s", url)
    return None
