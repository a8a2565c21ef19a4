"""Command line entrypoint: look up a Danish word and print the rendered record."""

from __future__ import annotations

import argparse
import logging
import sys

from pydantic import ValidationError

from ..errors import NoEntriesError, OrdbogError
from ..extraction.providers import PROVIDERS, get_provider
from ..services.export_service import parse_format, render
from ..services.lookup_service import lookup_words
from ..services.template_repository import FileTemplateRepository
from ..settings import TEMPLATES_DIR
from .models import LookupRequest


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="ordbog", description="Look up a word in an online Danish dictionary")
    parser.add_argument("query", help="Word to look up")
    parser.add_argument("format", nargs="?", default=None, help="json, json-pretty or a template name")
    parser.add_argument("--provider", choices=sorted(PROVIDERS), default="primary", help="Dictionary to query")
    parser.add_argument("--all", dest="all_entries", action="store_true", help="Render every entry, not just the first")
    parser.add_argument("--templates-dir", default=None, help="Directory holding custom templates")
    parser.add_argument("--from-file", dest="html_path", default=None, help="Extract from a saved HTML page")
    parser.add_argument("--verbose", action="store_true", help="Log debug output to stderr")
    return parser


def run(request: LookupRequest) -> str:
    provider = get_provider(request.provider)
    output_format = parse_format(request.output_format, provider.default_template)
    templates = FileTemplateRepository(request.templates_dir or TEMPLATES_DIR)

    words = lookup_words(request.query, provider, html_path=request.html_path)
    if not words:
        raise NoEntriesError(request.query)

    if request.all_entries:
        return render(words, output_format, templates)
    return render(words[0], output_format, templates)


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        request = LookupRequest(
            query=args.query,
            output_format=args.format,
            provider=args.provider,
            all_entries=args.all_entries,
            templates_dir=args.templates_dir,
            html_path=args.html_path,
        )
        output = run(request)
    except ValidationError as exc:
        message = "; ".join(error["msg"] for error in exc.errors())
        print(f"Invalid arguments: {message}", file=sys.stderr)
        return 1
    except (OrdbogError, OSError) as exc:
        print(f"Application error: {exc}", file=sys.stderr)
        return 1

    print(output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
