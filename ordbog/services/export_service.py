from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence, Union

from ..domain import Word
from ..utils import to_json
from .template_repository import TemplateRepository


@dataclass(frozen=True)
class Json:
    pass


@dataclass(frozen=True)
class JsonPretty:
    pass


@dataclass(frozen=True)
class Custom:
    template_name: str


OutputFormat = Union[Json, JsonPretty, Custom]


def parse_format(raw: str | None, default_template: str) -> OutputFormat:
    if raw is None:
        return Custom(default_template)
    if raw == "json":
        return Json()
    if raw == "json-pretty":
        return JsonPretty()
    return Custom(raw)


def _payload(words: Word | Sequence[Word]) -> Any:
    if isinstance(words, Word):
        return words.to_dict()
    return [word.to_dict() for word in words]


def render(words: Word | Sequence[Word], output_format: OutputFormat, templates: TemplateRepository) -> str:
    payload = _payload(words)

    if isinstance(output_format, Json):
        return to_json(payload)
    if isinstance(output_format, JsonPretty):
        return to_json(payload, pretty=True)
    if isinstance(output_format, Custom):
        return templates.render(output_format.template_name, {"word": payload})
    raise ValueError(f"Unsupported output format: {output_format!r}")
