from __future__ import annotations

from .html_parser import LocationRule, all_entry_scopes, all_texts, parse_html, text_at

__all__ = ["LocationRule", "all_entry_scopes", "all_texts", "parse_html", "text_at"]
