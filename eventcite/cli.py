"""
Inspect the citations embedded in event descriptions.

Usage:
    eventcite [FILE ...] [--lines] [--format text|json] [--urls] [--config PATH]

Reads standard input when no file is given.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Iterable, List, Optional, TextIO

from dotenv import load_dotenv

from .citations import extract_urls, format_citations, parse_citations
from .config import OUTPUT_FORMATS, CliConfig, load_cli_config
from .utils import setup_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="eventcite",
        description="Extract and format citations from event descriptions.",
    )
    parser.add_argument("files", nargs="*", help="Input files ('-' for stdin)")
    parser.add_argument(
        "--lines",
        action="store_true",
        default=None,
        help="Treat every non-blank line as a separate description",
    )
    parser.add_argument("--format", choices=OUTPUT_FORMATS, default=None, help="Output format")
    parser.add_argument(
        "--urls",
        action="store_true",
        default=None,
        help="Also list URLs found in anchors and cite directives",
    )
    parser.add_argument("--config", help="Path to a YAML config file")
    parser.add_argument("--log-level", help="Logging level (default: $EVENTCITE_LOG_LEVEL or INFO)")
    return parser


def _read_inputs(paths: List[str], stdin: TextIO) -> List[str]:
    if not paths:
        return [stdin.read()]
    texts: List[str] = []
    for path in paths:
        if path == "-":
            texts.append(stdin.read())
            continue
        with open(path, "r", encoding="utf-8") as f:
            texts.append(f.read())
    return texts


def _descriptions(texts: Iterable[str], split_lines: bool) -> List[str]:
    if not split_lines:
        return [text for text in texts if text.strip()]
    return [line for text in texts for line in text.splitlines() if line.strip()]


def render_text(description: str, show_urls: bool) -> str:
    result = parse_citations(description)
    lines = [result.clean_text]
    for index, formatted in enumerate(format_citations(result.citations), start=1):
        lines.append(f"  {index}. {formatted}")
    if show_urls:
        urls = extract_urls(description)
        if urls:
            lines.append("  URLs:")
            lines.extend(f"    - {url}" for url in urls)
    return "\n".join(lines)


def render_json(description: str, show_urls: bool) -> str:
    payload = parse_citations(description).to_dict()
    if show_urls:
        payload["urls"] = extract_urls(description)
    return json.dumps(payload, ensure_ascii=False)


def main(
    argv: Optional[List[str]] = None,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> int:
    load_dotenv()
    parser = build_parser()
    args = parser.parse_args(argv)
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout

    config = CliConfig()
    if args.config:
        try:
            config = load_cli_config(args.config)
        except (OSError, ValueError) as exc:
            parser.error(f"invalid config {args.config}: {exc}")

    setup_logging(args.log_level or config.log_level, config.log_file)

    output_format = args.format or config.format
    show_urls = config.urls if args.urls is None else args.urls
    split_lines = config.lines if args.lines is None else args.lines

    try:
        texts = _read_inputs(args.files, stdin)
    except (OSError, ValueError) as exc:
        logger.error("Failed to read input: %s", exc)
        parser.error(str(exc))

    descriptions = _descriptions(texts, split_lines)
    logger.info("Parsing %d description(s)", len(descriptions))

    render = render_json if output_format == "json" else render_text
    separator = "\n" if output_format == "json" else "\n\n"
    if descriptions:
        stdout.write(separator.join(render(d, show_urls) for d in descriptions) + "\n")
    return 0
