from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable

from ..domain import Word
from ..extraction.extractor import extract_sources
from ..extraction.normalizers import normalize
from ..extraction.providers import Provider
from ..parsers import parse_html
from .fetch_service import fetch_document

logger = logging.getLogger(__name__)

Fetcher = Callable[[str], str]


def build_words_from_html(raw_html: str, provider: Provider, url: str) -> list[Word]:
    document = parse_html(raw_html)
    sources = extract_sources(document, provider, url)
    return [normalize(source) for source in sources]


def lookup_words(
    query: str,
    provider: Provider,
    fetcher: Fetcher | None = None,
    html_path: Path | None = None,
) -> list[Word]:
    """Run one query through fetch, extraction and normalization. An empty list means no entries."""
    url = provider.query_url(query)
    if html_path is not None:
        logger.debug("Reading %s instead of fetching %s", html_path, url)
        raw_html = html_path.read_text(encoding="utf-8", errors="replace")
    else:
        raw_html = (fetcher or fetch_document)(url)

    words = build_words_from_html(raw_html, provider, url)
    logger.debug("%s returned %d word(s) for %r", provider.name, len(words), query)
    return words
