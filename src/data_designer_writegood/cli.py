"""``writegood`` command: batch-check prose files and print a report."""

from __future__ import annotations

import argparse
import dataclasses
import logging
import re
import sys
from pathlib import Path

from data_designer_writegood import commands
from data_designer_writegood.buffer import TextBuffer
from data_designer_writegood.core import DEFAULT_SETTINGS, PASSIVE, WEASEL, Settings

logger = logging.getLogger(__name__)

_CHECKS = {
    WEASEL: commands.check_weasel,
    PASSIVE: commands.check_passive,
    "duplicates": commands.check_duplicates,
}


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="writegood", description="Flag weasel words, passive voice and duplicated words.")
    ap.add_argument("paths", nargs="*", help="Text files to check ('-' or none reads stdin)")
    ap.add_argument(
        "--check",
        action="append",
        choices=sorted(_CHECKS),
        help="Run only this check (repeatable; default: all)",
    )
    ap.add_argument("--readability", action="store_true", help="Also print reading ease and grade level")
    ap.add_argument("--match-case", action="store_true", help="Match weasel words and passive voice case-sensitively")
    ap.add_argument("--regular-participles", action="store_true", help="Treat any '-ed' word as a past participle")
    ap.add_argument(
        "--keep-adjacency-on-punctuation",
        action="store_true",
        help="Report 'word. word' as a duplicate",
    )
    ap.add_argument("--weasel-word", action="append", default=[], metavar="WORD", help="Extra weasel word pattern")
    ap.add_argument("-v", "--verbose", action="store_true")
    return ap


def settings_from_args(args: argparse.Namespace) -> Settings:
    return dataclasses.replace(
        DEFAULT_SETTINGS,
        weasel_words=DEFAULT_SETTINGS.weasel_words + tuple(args.weasel_word),
        match_regular_participles=args.regular_participles,
        duplicate_punctuation_resets=not args.keep_adjacency_on_punctuation,
    )


def _read(path: str) -> TextBuffer:
    if path == "-":
        return TextBuffer("<stdin>", sys.stdin.read())
    return TextBuffer(path, Path(path).read_text(encoding="utf-8"))


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.INFO if args.verbose else logging.WARNING, format="%(levelname)s %(name)s: %(message)s")

    try:
        settings = settings_from_args(args)
    except re.error as exc:
        print(f"error: invalid word pattern: {exc}", file=sys.stderr)
        return 2

    checks = [_CHECKS[name] for name in (args.check or [WEASEL, PASSIVE, "duplicates"])]
    found = 0
    for path in args.paths or ["-"]:
        try:
            buffer = _read(path)
        except OSError as exc:
            print(f"error: cannot read {path}: {exc}", file=sys.stderr)
            return 2
        buffer.case_fold_search = not args.match_case

        for check in checks:
            report = check(buffer, settings=settings)
            found += len(report)
            for line in report.lines():
                print(line)
        if args.readability:
            print(f"{buffer.name}: reading ease {commands.reading_ease(buffer)}, grade level {commands.grade_level(buffer)}")

    logger.info(f"{found} issue(s) found")
    return 0 if not found else 1


if __name__ == "__main__":
    raise SystemExit(main())
