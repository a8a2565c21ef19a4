from __future__ import annotations

from dataclasses import dataclass
from urllib.parse import urlencode

from ..parsers import LocationRule
from ..settings import DEFAULT_TEMPLATE_NAME


@dataclass(frozen=True)
class FieldRules:
    value: LocationRule
    group: LocationRule
    bending: LocationRule
    pronunciation: LocationRule
    origin: LocationRule
    synonyms: LocationRule | None = None


@dataclass(frozen=True)
class Provider:
    key: str
    name: str
    base_url: str
    query_param: str
    rules: FieldRules
    entry_rule: LocationRule | None = None
    default_template: str = DEFAULT_TEMPLATE_NAME

    @property
    def multi_entry(self) -> bool:
        return self.entry_rule is not None

    def query_url(self, query: str) -> str:
        return f"{self.base_url}?{urlencode({self.query_param: query})}"


ORDNET = Provider(
    key="primary",
    name="Ordnet",
    base_url="https://ordnet.dk/ddo/ordbog",
    query_param="query",
    rules=FieldRules(
        value=LocationRule("div.artikel span.match"),
        group=LocationRule("div.definitionBoxTop span.tekstmedium"),
        bending=LocationRule("#id-boj span.tekstmedium"),
        pronunciation=LocationRule("#id-udt span.tekstmedium"),
        origin=LocationRule("#id-ety span.tekstmedium"),
        synonyms=LocationRule("#id-syn span.tekstmedium a"),
    ),
)

# Rules are relative to one ".ar" article block.
DSL = Provider(
    key="secondary",
    name="DSL",
    base_url="https://ws.dsl.dk/ddo/query",
    query_param="q",
    entry_rule=LocationRule(".ar"),
    rules=FieldRules(
        value=LocationRule(".head .k"),
        group=LocationRule(".pos"),
        bending=LocationRule(".m"),
        pronunciation=LocationRule(".phon"),
        origin=LocationRule(".etym"),
        synonyms=LocationRule(".onym .k"),
    ),
)

PROVIDERS = {provider.key: provider for provider in (ORDNET, DSL)}


def get_provider(key: str) -> Provider:
    try:
        return PROVIDERS[key]
    except KeyError:
        raise ValueError(f"Unsupported provider: {key}") from None
