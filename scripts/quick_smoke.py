from __future__ import annotations

import contextlib
import io
import json
from pathlib import Path
import sys

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from ordbog.cli.main import main as cli_main  # noqa: E402

DATA_DIR = REPO_ROOT / "data"


def fail(message: str) -> None:
    print(f"SMOKE_FAIL: {message}")
    raise SystemExit(1)


def run_cli(args: list[str]) -> str:
    buffer = io.StringIO()
    with contextlib.redirect_stdout(buffer):
        status = cli_main(args)
    if status != 0:
        fail(f"ordbog {' '.join(args)} exited with {status}")
    return buffer.getvalue()


def main() -> None:
    hygge = json.loads(run_cli(["hygge", "json", "--from-file", str(DATA_DIR / "ordnet" / "hygge.html")]))
    if hygge.get("value") != "en hygge":
        fail(f"unexpected primary record: {hygge}")

    entries = json.loads(
        run_cli(
            [
                "vokse",
                "json",
                "--provider",
                "secondary",
                "--all",
                "--from-file",
                str(DATA_DIR / "dsl" / "vokse.html"),
            ]
        )
    )
    if len(entries) != 3:
        fail(f"expected 3 entries for vokse, got {len(entries)}")

    line = run_cli(["hygge", "--from-file", str(DATA_DIR / "ordnet" / "hygge.html")]).strip()
    if "translate.google.com" not in line:
        fail("default template did not include translation link")

    print("SMOKE_OK")


if __name__ == "__main__":
    main()
