from __future__ import annotations

import json
from typing import Any


def to_json(value: Any, pretty: bool = False) -> str:
    if pretty:
        return json.dumps(value, ensure_ascii=False, indent=2)
    return json.dumps(value, ensure_ascii=False)


def compact_whitespace(text: str) -> str:
    return " ".join(text.split())


def letters_only(text: str) -> str:
    return "".join(char for char in text if char.isalpha())
