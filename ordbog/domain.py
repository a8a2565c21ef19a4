from __future__ import annotations

from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any


@dataclass(frozen=True)
class Source:
    value: str
    group: str
    bending: str
    pronunciation: str
    origin: str
    url: str
    synonyms: tuple[str, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict[str, Any]:
        payload = asdict(self)
        payload["synonyms"] = list(self.synonyms)
        return payload

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> Source:
        return cls(
            value=payload.get("value", ""),
            group=payload.get("group", ""),
            bending=payload.get("bending", ""),
            pronunciation=payload.get("pronunciation", ""),
            origin=payload.get("origin", ""),
            url=payload["url"],
            synonyms=tuple(payload.get("synonyms", ())),
        )


class Gender(Enum):
    FAELLESKOEN = "Fælleskøn"  # n-word
    INTETKOEN = "Intetkøn"  # t-word


@dataclass(frozen=True)
class WordGroup:
    """Closed grammatical taxonomy. Only the subclasses below are instantiated."""

    @property
    def tag(self) -> str:
        return type(self).__name__

    def to_json(self) -> str | dict[str, str]:
        return self.tag


@dataclass(frozen=True)
class NoGroup(WordGroup):
    @property
    def tag(self) -> str:
        return "None"


@dataclass(frozen=True)
class Substantiv(WordGroup):
    gender: Gender

    def to_json(self) -> dict[str, str]:
        return {self.tag: self.gender.value}


@dataclass(frozen=True)
class Verbum(WordGroup):
    pass


@dataclass(frozen=True)
class Adjektiv(WordGroup):
    pass


@dataclass(frozen=True)
class Adverbium(WordGroup):
    pass


_SIMPLE_GROUPS = {
    "None": NoGroup,
    "Verbum": Verbum,
    "Adjektiv": Adjektiv,
    "Adverbium": Adverbium,
}


def group_from_json(payload: str | dict[str, str]) -> WordGroup:
    if isinstance(payload, dict):
        if set(payload) != {"Substantiv"}:
            raise ValueError(f"Unsupported word group payload: {payload!r}")
        return Substantiv(Gender(payload["Substantiv"]))
    try:
        return _SIMPLE_GROUPS[payload]()
    except KeyError:
        raise ValueError(f"Unsupported word group payload: {payload!r}") from None


@dataclass(frozen=True)
class Word:
    source: Source
    value: str
    group: WordGroup
    value_encoded: str

    @classmethod
    def build(cls, source: Source) -> Word:
        from .extraction.normalizers import normalize

        return normalize(source)

    def to_dict(self) -> dict[str, Any]:
        return {
            "source": self.source.to_dict(),
            "value": self.value,
            "group": self.group.to_json(),
            "value_encoded": self.value_encoded,
        }

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> Word:
        return cls(
            source=Source.from_dict(payload["source"]),
            value=payload["value"],
            group=group_from_json(payload["group"]),
            value_encoded=payload["value_encoded"],
        )
