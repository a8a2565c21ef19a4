from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator


class LookupRequest(BaseModel):
    query: str
    output_format: str | None = Field(default=None, description="json, json-pretty or a template name.")
    provider: Literal["primary", "secondary"] = "primary"
    all_entries: bool = False
    templates_dir: Path | None = None
    html_path: Path | None = None

    @field_validator("query")
    @classmethod
    def _query_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("query must not be empty")
        return value
