from __future__ import annotations

import os
from pathlib import Path

PACKAGE_DIR = Path(__file__).resolve().parent
PACKAGED_TEMPLATES_DIR = PACKAGE_DIR / "templates"
TEMPLATES_DIR = Path(os.environ.get("ORDBOG_TEMPLATES_DIR", PACKAGED_TEMPLATES_DIR))
DEFAULT_TEMPLATE_NAME = "default"
TEMPLATE_SUFFIXES = ("", ".txt", ".j2")

REQUEST_TIMEOUT = 15.0
USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/124.0 Safari/537.36"
)

TRANSLATE_URL = "https://translate.google.com/?sl=da&tl=en&text={text}&op=translate"
