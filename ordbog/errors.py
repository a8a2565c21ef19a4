from __future__ import annotations


class OrdbogError(Exception):
    """Fatal condition for a single lookup; the CLI reports it and exits non-zero."""


class FetchError(OrdbogError):
    pass


class TemplateRenderError(OrdbogError):
    pass


class NoEntriesError(OrdbogError):
    def __init__(self, query: str) -> None:
        super().__init__(f"No entries found for '{query}'")
        self.query = query
