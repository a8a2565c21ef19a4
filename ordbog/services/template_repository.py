from __future__ import annotations

from pathlib import Path
from typing import Any, Protocol

from jinja2 import BaseLoader, DictLoader, Environment, FileSystemLoader, StrictUndefined, TemplateError

from ..errors import TemplateRenderError
from ..settings import TEMPLATE_SUFFIXES, TRANSLATE_URL


class TemplateRepository(Protocol):
    def render(self, name: str, context: dict[str, Any]) -> str: ...


def translate_url(value_encoded: str) -> str:
    return TRANSLATE_URL.format(text=value_encoded)


def _build_environment(loader: BaseLoader) -> Environment:
    environment = Environment(
        loader=loader,
        undefined=StrictUndefined,
        keep_trailing_newline=False,
        autoescape=False,
    )
    environment.filters["translate_url"] = translate_url
    return environment


def _render(environment: Environment, name: str, context: dict[str, Any]) -> str:
    candidates = [f"{name}{suffix}" for suffix in TEMPLATE_SUFFIXES]
    try:
        template = environment.select_template(candidates)
    except TemplateError as exc:
        raise TemplateRenderError(f"Template '{name}' failed: {exc}") from exc

    try:
        return template.render(**context)
    except Exception as exc:  # noqa: BLE001
        raise TemplateRenderError(f"Template '{name}' failed: {exc}") from exc


class FileTemplateRepository:
    """Reads templates from a directory. The environment is rebuilt per render so edits are never stale."""

    def __init__(self, directory: str | Path) -> None:
        self.directory = Path(directory)

    def render(self, name: str, context: dict[str, Any]) -> str:
        if not self.directory.is_dir():
            raise TemplateRenderError(f"Template directory not found: {self.directory}")
        environment = _build_environment(FileSystemLoader(str(self.directory)))
        return _render(environment, name, context)


class DictTemplateRepository:
    def __init__(self, templates: dict[str, str]) -> None:
        self.templates = dict(templates)

    def render(self, name: str, context: dict[str, Any]) -> str:
        return _render(_build_environment(DictLoader(self.templates)), name, context)
