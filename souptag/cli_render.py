"""CLI for converting markup into a tag tree and printing the result."""

from __future__ import annotations

import argparse
import sys

from pydantic import ValidationError

from .io_utils import tag_to_json, tag_to_yaml, warn
from .mapper import map_element
from .models import ConversionOptions
from .parsing import SoupParser


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Convert an HTML fragment into a tag tree")
    parser.add_argument("markup", nargs="?", help="HTML fragment; read from stdin when omitted")
    parser.add_argument("--parser", default="html.parser", help="BeautifulSoup tree builder (html.parser or lxml)")
    parser.add_argument(
        "--raw-text",
        action="store_true",
        help="Keep decoded text nodes as-is instead of re-escaping them",
    )
    parser.add_argument(
        "--format",
        choices=("html", "json", "yaml"),
        default="html",
        help="Print rendered markup or a dump of the tag tree",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = _parse_args(argv)
    try:
        options = ConversionOptions(parser=args.parser, escape_text=not args.raw_text)
    except ValidationError as exc:
        raise SystemExit(f"Invalid options: {exc}") from exc

    markup = args.markup if args.markup is not None else sys.stdin.read()
    elements = SoupParser(options.parser).elements(markup)
    if not elements:
        warn("[render] markup contains no element")
        raise SystemExit(1)

    element = elements[0]
    extra = len(elements) - 1
    if extra > 0:
        warn(f"[render] ignoring {extra} top-level element(s) after <{element.name}>")

    tag = map_element(element, options)
    if args.format == "json":
        sys.stdout.write(tag_to_json(tag))
    elif args.format == "yaml":
        sys.stdout.write(tag_to_yaml(tag))
    else:
        print(tag.render())


if __name__ == "__main__":
    main(sys.argv[1:])
