"""Command line entry point: parse a document and print a tag and a content."""

from __future__ import annotations

import argparse
import sys

from rawxml.parser import Parser

SAMPLE = (
    "<book>"
    '<content page_number="12" text="hello">'
    "<maintext>"
    "hello2"
    "</maintext>"
    "</content>"
    "<author>"
    "oscar wilde"
    "</author>"
    "</book>"
    "<mehmet>"
    "jedi"
    "</mehmet>"
)


def _build_argument_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rawxml",
        description="Parse XML and print one tag name and one content value.",
    )
    parser.add_argument(
        "file",
        nargs="?",
        help="XML file to read ('-' for standard input); a built-in sample is used if omitted",
    )
    parser.add_argument("--tag", default="book", help="path whose tag is printed")
    parser.add_argument(
        "--content", default="book/content/maintext", help="path whose content is printed"
    )
    parser.add_argument("--index", type=int, default=0, help="entry index for both lookups")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the command and return its exit status."""
    args = _build_argument_parser().parse_args(argv)

    if args.file is None:
        text = SAMPLE
    elif args.file == "-":
        text = sys.stdin.read()
    else:
        try:
            with open(args.file, encoding="utf-8") as handle:
                text = handle.read()
        except OSError as error:
            print(f"rawxml: {error}", file=sys.stderr)
            return 1

    parser = Parser()
    parser.parse(text)
    try:
        tag_name = parser.get_tag(args.tag, args.index)
        content_name = parser.get_content(args.content, args.index)
    except ValueError as error:
        print(f"rawxml: {error}", file=sys.stderr)
        return 1

    print(tag_name)
    print(content_name)
    return 0


if __name__ == "__main__":
    sys.exit(main())