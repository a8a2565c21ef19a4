from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import soupsieve
from bs4 import BeautifulSoup, Tag

from ..utils import compact_whitespace


@dataclass(frozen=True)
class LocationRule:
    """A CSS selector compiled eagerly, so a bad literal fails where it is defined."""

    selector: str
    compiled: Any = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "compiled", soupsieve.compile(self.selector))

    def first(self, scope: Tag) -> Tag | None:
        return self.compiled.select_one(scope)

    def all(self, scope: Tag) -> list[Tag]:
        return list(self.compiled.select(scope))


def parse_html(raw_html: str) -> BeautifulSoup:
    soup = BeautifulSoup(raw_html, "lxml")

    for tag in soup(["script", "style", "noscript"]):
        tag.decompose()

    return soup


def element_text(element: Tag) -> str:
    return compact_whitespace(element.get_text())


def text_at(scope: Tag, rule: LocationRule) -> str:
    element = rule.first(scope)
    if element is None:
        return ""
    return element_text(element)


def all_texts(scope: Tag, rule: LocationRule) -> list[str]:
    texts = (element_text(element) for element in rule.all(scope))
    return [text for text in texts if text]


def all_entry_scopes(document: Tag, entry_rule: LocationRule) -> list[Tag]:
    return entry_rule.all(document)
