"""Retrieval of the source page markup."""

from __future__ import annotations

import asyncio
import logging
from typing import Optional

import requests

from .config import DEFAULT_USER_AGENT
from .errors import FetchError

logger = logging.getLogger("colorlist")


def fetch_html(
    url: str,
    timeout: Optional[float] = None,
    user_agent: str = DEFAULT_USER_AGENT,
) -> str:
    """Download a page and return its body decoded as UTF-8."""
    with requests.Session() as session:
        session.headers["User-Agent"] = user_agent
        try:
            resp = session.get(url, timeout=timeout)
            resp.raise_for_status()
        except requests.RequestException as exc:
            raise FetchError(f"Failed to fetch {url}: {exc}") from exc
        except ValueError as exc:
            # urllib3 rejects non-positive timeouts before connecting.
            raise FetchError(f"Invalid request for {url}: {exc}") from exc

    logger.debug(
        "Fetched %s (status=%s, %d bytes)", url, resp.status_code, len(resp.content)
    )
    return resp.content.decode("utf-8", errors="replace")


async def fetch_html_async(
    url: str,
    timeout: Optional[float] = None,
    user_agent: str = DEFAULT_USER_AGENT,
) -> str:
    """Await :func:`fetch_html` on a worker thread."""
    return await asyncio.to_thread(fetch_html, url, timeout, user_agent)
