from __future__ import annotations

import logging

import requests

from ..errors import FetchError
from ..settings import REQUEST_TIMEOUT, USER_AGENT

logger = logging.getLogger(__name__)


def build_session() -> requests.Session:
    session = requests.Session()
    session.headers.update(
        {
            "User-Agent": USER_AGENT,
            "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
            "Accept-Language": "da,en;q=0.5",
        }
    )
    return session


def fetch_document(url: str, session: requests.Session | None = None, timeout: float = REQUEST_TIMEOUT) -> str:
    """Return the page body for ``url``; any transport or status failure is fatal."""
    owns_session = session is None
    active = session or build_session()
    try:
        response = active.get(url, timeout=timeout)
        response.raise_for_status()
    except requests.RequestException as exc:
        raise FetchError(f"Could not load {url}: {exc}") from exc
    finally:
        if owns_session:
            active.close()

    if not response.encoding or "charset" not in response.headers.get("Content-Type", "").lower():
        response.encoding = "utf-8"

    text = response.text
    logger.debug("Fetched %s (%d chars)", url, len(text))
    return text
