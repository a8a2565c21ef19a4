from __future__ import annotations

import logging

from bs4 import Tag

from ..domain import Source
from ..parsers import all_entry_scopes, all_texts, text_at
from ..utils import letters_only
from .providers import FieldRules, Provider

logger = logging.getLogger(__name__)


def _build_source(scope: Tag, rules: FieldRules, url: str) -> Source:
    # Headwords carry homograph markers such as "vokse1"; other fields are kept verbatim.
    return Source(
        value=letters_only(text_at(scope, rules.value)),
        group=text_at(scope, rules.group),
        bending=text_at(scope, rules.bending),
        pronunciation=text_at(scope, rules.pronunciation),
        origin=text_at(scope, rules.origin),
        synonyms=tuple(all_texts(scope, rules.synonyms)) if rules.synonyms else (),
        url=url,
    )


def extract_single(document: Tag, rules: FieldRules, url: str) -> Source:
    return _build_source(document, rules, url)


def extract_entries(document: Tag, provider: Provider, url: str) -> list[Source]:
    if provider.entry_rule is None:
        raise ValueError(f"Provider {provider.name} does not define entry blocks")

    scopes = all_entry_scopes(document, provider.entry_rule)
    logger.debug("%s: found %d entry block(s)", provider.name, len(scopes))
    return [_build_source(scope, provider.rules, url) for scope in scopes]


def extract_sources(document: Tag, provider: Provider, url: str) -> list[Source]:
    if provider.multi_entry:
        return extract_entries(document, provider, url)
    return [extract_single(document, provider.rules, url)]
