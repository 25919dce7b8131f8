"""Remote document retrieval over httpx."""
from __future__ import annotations

import logging

import httpx

from css_inliner.errors import FetchError, FetchTimeoutError

__all__ = ["fetch_document"]

logger = logging.getLogger(__name__)


def fetch_document(
    url: str,
    *,
    timeout: float = 10.0,
    user_agent: str = "css-inliner",
    client: httpx.Client | None = None,
) -> str:
    """GET *url* and return the decoded response body.

    Transport failures and non-2xx/3xx responses are mapped to
    :class:`FetchError` (or :class:`FetchTimeoutError`). An injected
    *client* is used as-is and left open.
    """
    owned = client is None
    if client is None:
        client = httpx.Client(timeout=timeout, follow_redirects=True)

    try:
        logger.info("Fetching %s", url)
        try:
            resp = client.get(url, headers={"User-Agent": user_agent})
        except httpx.TimeoutException as exc:
            raise FetchTimeoutError(f"Timed out fetching {url}", url=url, cause=exc) from exc
        except httpx.HTTPError as exc:
            raise FetchError(f"Could not fetch {url}: {exc}", url=url, cause=exc) from exc

        if resp.status_code >= 400:
            raise FetchError(
                f"Fetching {url} failed with HTTP {resp.status_code}",
                url=url,
                status_code=resp.status_code,
            )
        return resp.text
    finally:
        if owned:
            client.close()
