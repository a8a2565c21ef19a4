from __future__ import annotations

import json
import os
import time
from pathlib import Path

import pytest

from ordbog.domain import Source, Word
from ordbog.errors import TemplateRenderError
from ordbog.extraction.normalizers import normalize
from ordbog.services.export_service import Custom, Json, JsonPretty, parse_format, render
from ordbog.services.template_repository import DictTemplateRepository, FileTemplateRepository
from ordbog.settings import PACKAGED_TEMPLATES_DIR


def _word(value: str = "hygge", group: str = "substantiv, fælleskøn") -> Word:
    return normalize(
        Source(
            value=value,
            group=group,
            bending="-n",
            pronunciation="[ˈhygə]",
            origin="dannet af hygge",
            synonyms=("hyggelighed",),
            url="https://ordnet.dk/ddo/ordbog?query=hygge",
        )
    )


def test_parse_format_selects_output() -> None:
    assert parse_format("json", "default") == Json()
    assert parse_format("json-pretty", "default") == JsonPretty()
    assert parse_format("anki", "default") == Custom("anki")
    assert parse_format(None, "default") == Custom("default")


def test_json_round_trip_reproduces_word() -> None:
    word = _word()
    rendered = render(word, Json(), DictTemplateRepository({}))

    assert "\n" not in rendered
    payload = json.loads(rendered)
    assert payload["group"] == {"Substantiv": "Fælleskøn"}
    assert payload["value"] == "en hygge"
    assert Word.from_dict(payload) == word


def test_json_pretty_contains_same_data() -> None:
    word = _word(value="vokse", group="verbum")
    rendered = render(word, JsonPretty(), DictTemplateRepository({}))

    assert rendered.startswith("{\n  ")
    payload = json.loads(rendered)
    assert payload["group"] == "Verbum"
    assert Word.from_dict(payload) == word


def test_json_renders_sequence_as_array() -> None:
    words = [_word(), _word(value="desuden", group="adverbium")]
    payload = json.loads(render(words, Json(), DictTemplateRepository({})))

    assert [item["value"] for item in payload] == ["en hygge", "desuden"]
    assert payload[1]["group"] == "Adverbium"


def test_custom_template_receives_word_binding() -> None:
    templates = DictTemplateRepository(
        {"short.txt": "{{ word.value }} -> {{ word.value_encoded | translate_url }}"}
    )

    rendered = render(_word(), Custom("short"), templates)

    assert rendered == "en hygge -> https://translate.google.com/?sl=da&tl=en&text=en%20hygge&op=translate"


def test_unknown_template_is_fatal() -> None:
    with pytest.raises(TemplateRenderError):
        render(_word(), Custom("missing"), DictTemplateRepository({"default.txt": "{{ word.value }}"}))


def test_template_syntax_and_undefined_errors_are_fatal() -> None:
    with pytest.raises(TemplateRenderError):
        render(_word(), Custom("broken"), DictTemplateRepository({"broken": "{% if word %}"}))
    with pytest.raises(TemplateRenderError):
        render(_word(), Custom("typo"), DictTemplateRepository({"typo": "{{ word.valeu }}"}))


def test_packaged_templates_render_single_and_many() -> None:
    templates = FileTemplateRepository(PACKAGED_TEMPLATES_DIR)

    single = render(_word(), Custom("default"), templates)
    assert single.startswith("en hygge | substantiv, fælleskøn | [ˈhygə] | https://translate.google.com/")
    assert "\n" not in single

    many = render([_word(), _word(value="vokse", group="verbum")], Custom("default"), templates)
    assert " ;; at vokse | verbum" in many

    card = render(_word(), Custom("anki"), templates)
    assert card.split("\t")[:5] == ["en hygge", "-n", "[ˈhygə]", "dannet af hygge", "hyggelighed"]


def test_file_templates_are_reloaded_between_renders(tmp_path: Path) -> None:
    template = tmp_path / "mine.txt"
    template.write_text("first {{ word.value }}", encoding="utf-8")
    templates = FileTemplateRepository(tmp_path)

    assert render(_word(), Custom("mine"), templates) == "first en hygge"

    template.write_text("second {{ word.value }}", encoding="utf-8")
    later = time.time() + 5
    os.utime(template, (later, later))

    assert render(_word(), Custom("mine"), templates) == "second en hygge"


def test_missing_template_directory_is_fatal(tmp_path: Path) -> None:
    with pytest.raises(TemplateRenderError):
        render(_word(), Custom("default"), FileTemplateRepository(tmp_path / "nope"))


@pytest.mark.parametrize(
    ("group", "tag"),
    [
        ("noget andet", "None"),
        ("substantiv, intetkøn", {"Substantiv": "Intetkøn"}),
        ("adjektiv", "Adjektiv"),
    ],
)
def test_json_round_trip_for_remaining_groups(group: str, tag: str | dict[str, str]) -> None:
    word = _word(value="hus", group=group)
    payload = json.loads(render(word, Json(), DictTemplateRepository({})))

    assert payload["group"] == tag
    assert Word.from_dict(payload) == word


def test_runtime_template_failure_is_fatal() -> None:
    with pytest.raises(TemplateRenderError, match="sum"):
        render(_word(), Custom("sum"), DictTemplateRepository({"sum": "{{ word.value + 1 }}"}))


def test_anki_template_keeps_many_cards_on_one_line() -> None:
    templates = FileTemplateRepository(PACKAGED_TEMPLATES_DIR)

    cards = render([_word(), _word(value="vokse", group="verbum")], Custom("anki"), templates)

    assert "\n" not in cards
    assert cards.count(" ;; ") == 1
