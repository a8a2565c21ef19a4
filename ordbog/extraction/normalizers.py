from __future__ import annotations

import logging
from urllib.parse import quote

from ..domain import Adjektiv, Adverbium, Gender, NoGroup, Source, Substantiv, Verbum, Word, WordGroup

logger = logging.getLogger(__name__)


GROUP_TOKENS: dict[str, WordGroup] = {
    "fælleskøn": Substantiv(Gender.FAELLESKOEN),
    "intetkøn": Substantiv(Gender.INTETKOEN),
    "verbum": Verbum(),
    "adjektiv": Adjektiv(),
    "adverbium": Adverbium(),
}


PREFIXES: dict[WordGroup, str] = {
    Substantiv(Gender.FAELLESKOEN): "en",
    Substantiv(Gender.INTETKOEN): "et",
    Verbum(): "at",
}


def classify_group(group_text: str) -> WordGroup:
    """Map a description like "substantiv, fælleskøn" to a WordGroup.

    Comma separated segments are checked left to right and the first
    recognized token wins; "substantiv" alone is not recognized, the gender
    qualifier is what identifies a noun.
    """
    for segment in group_text.split(","):
        group = GROUP_TOKENS.get(segment.strip())
        if group is not None:
            return group
    return NoGroup()


def lookup_prefix(group: WordGroup) -> str:
    return PREFIXES.get(group, "")


def prefixed_value(raw_value: str, group: WordGroup) -> str:
    prefix = lookup_prefix(group)
    return f"{prefix} {raw_value}" if prefix else raw_value


def encode_value(value: str) -> str:
    return quote(value, safe="")


def normalize(source: Source) -> Word:
    group = classify_group(source.group)
    value = prefixed_value(source.value, group)
    logger.debug("Classified %r (%r) as %s", source.value, source.group, group.tag)
    return Word(source=source, value=value, group=group, value_encoded=encode_value(value))
