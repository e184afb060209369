"""CLI entrypoint for the word search board generator."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import List

from wordsearch.core.constants import MAX_PLACEMENT_ATTEMPTS, DirectionMode
from wordsearch.core.exceptions import ConfigurationError
from wordsearch.core.models import AlignmentConfig, BoardSize, ShapeFlags
from wordsearch.engine.generator import GeneratorConfig, WordSearchGenerator
from wordsearch.utils.logger import configure_logging
from wordsearch.utils.pretty import STYLES, pretty_print_board


SHAPE_OPTIONS = (
    ("horizontal", "--horizontal", "Allow left-to-right rows"),
    ("vertical", "--vertical", "Allow top-to-bottom columns"),
    ("diagonal", "--diagonal", "Allow both diagonal directions"),
    ("bends_straight", "--bends-straight", "Allow L-shaped words with one right-angle bend"),
    ("bends_diagonal", "--bends-diagonal", "Allow words made of two diagonal legs meeting at a pivot"),
    ("block", "--block", "Allow words packed into a rectangle in reading order"),
)


def parse_words_file(path: Path) -> List[str]:
    """Read words from a file, one entry per line. Blank lines and # comments are skipped."""
    entries: List[str] = []
    for line in path.read_text(encoding="utf-8").splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        entries.append(line)
    return entries


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Place words on a word search board",
    )
    parser.add_argument("--height", type=int, required=True, help="Board height in cells")
    parser.add_argument("--width", type=int, required=True, help="Board width in cells")
    parser.add_argument(
        "--words",
        nargs="+",
        metavar="WORD",
        help="Words to place, in placement order",
    )
    parser.add_argument(
        "--words-file",
        type=Path,
        metavar="FILE",
        help="File with one word per line (# comments and blank lines ignored)",
    )
    for dest, flag, help_text in SHAPE_OPTIONS:
        parser.add_argument(flag, dest=dest, action="store_true", help=help_text)
    parser.add_argument(
        "--direction",
        type=str,
        choices=[mode.value for mode in DirectionMode],
        default=DirectionMode.FORWARD.value,
        help="How letters are ordered along a placement",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducibility")
    parser.add_argument(
        "--max-attempts",
        type=int,
        default=MAX_PLACEMENT_ATTEMPTS,
        help="Random placement attempts per word before giving up",
    )
    parser.add_argument(
        "--style",
        type=str,
        choices=STYLES,
        default="compact",
        help="Board rendering style",
    )
    parser.add_argument("--empty-char", type=str, default="·", help="Placeholder for empty cells")
    parser.add_argument("--output", type=Path, help="Optional path to JSON output")
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def build_alignment(args: argparse.Namespace) -> AlignmentConfig:
    flags = {dest: getattr(args, dest) for dest, _, _ in SHAPE_OPTIONS}
    if not any(flags.values()):
        flags["horizontal"] = flags["vertical"] = True
    return AlignmentConfig(lines=ShapeFlags(**flags), direction=DirectionMode(args.direction))


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    level = getattr(logging, args.log_level.upper(), logging.INFO)
    configure_logging(level)

    words: List[str] = []
    if args.words:
        words.extend(args.words)
    if args.words_file:
        words.extend(parse_words_file(args.words_file))
    if not words:
        parser.error("provide at least --words or --words-file")
    if args.max_attempts < 1:
        parser.error("--max-attempts must be at least 1")

    alignment = build_alignment(args)
    config = GeneratorConfig(
        board_size=BoardSize(width=args.width, height=args.height),
        alignment=alignment,
        seed=args.seed,
        max_attempts=args.max_attempts,
    )
    generator = WordSearchGenerator(config)
    try:
        result = generator.generate(words)
    except ConfigurationError as exc:
        parser.error(str(exc))

    pretty_print_board(result.board, style=args.style, empty_char=args.empty_char)
    if result.failed:
        print("Skipped: " + ", ".join(entry.word for entry in result.failed))

    if args.output:
        payload = result.to_jsonable()
        payload["alignment"] = {
            "lines": alignment.lines.to_jsonable(),
            "direction": alignment.direction.value,
        }
        args.output.write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8")


if __name__ == "__main__":  # pragma: no cover
    main()
