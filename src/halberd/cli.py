"""
halberd CLI - render a HAL+JSON document as HAL+JSON or HAL+XML.
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from typing import Optional, Sequence

from halberd.core.config import load_render_config, parse_indent
from halberd.core.errors import HalError
from halberd.core.logging import setup_logging
from halberd.core.resource import Resource

log = logging.getLogger("halberd.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="halberd",
        description="Rebuild a HAL+JSON document and render it as JSON or XML",
    )
    parser.add_argument(
        "file",
        nargs="?",
        default="-",
        help="HAL+JSON file to read (default: stdin)",
    )
    parser.add_argument(
        "--format",
        "-f",
        choices=("json", "xml"),
        default="json",
        help="Output format (default: json)",
    )
    parser.add_argument(
        "--indent",
        "-i",
        default=None,
        help="Indent unit: a number of spaces or a literal string such as '\\t'",
    )
    parser.add_argument(
        "--uri",
        default=None,
        help="href for the self link, overriding the document's own",
    )
    return parser


def _read_source(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    with open(path, encoding="utf-8") as fh:
        return fh.read()


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    config = load_render_config()
    setup_logging(config.log_level)

    start = time.perf_counter()
    try:
        resource = Resource.loads(_read_source(args.file), args.uri)
    except (OSError, UnicodeDecodeError) as exc:
        print(f"halberd: cannot read {args.file}: {exc}", file=sys.stderr)
        return 1
    except HalError as exc:
        print(f"halberd: {exc}", file=sys.stderr)
        return 1

    indent = parse_indent(args.indent) if args.indent is not None else None
    if args.format == "xml":
        output = resource.to_xml(indent or config.xml_indent)
    else:
        output = resource.dumps(indent or config.json_indent)

    print(output)
    log.info(
        "hal_rendered",
        extra={
            "format": args.format,
            "source": args.file,
            "duration_ms": int((time.perf_counter() - start) * 1000),
        },
    )
    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
