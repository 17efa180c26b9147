#!/usr/bin/env python
"""Play a Detective Quest case in the terminal."""
from __future__ import annotations

import argparse
import io
import logging
import sys
from pathlib import Path
from typing import BinaryIO, Optional, Sequence, TextIO

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from mysteries.session import GameSession
from service.cases import CaseFileError, load_case
from service.config import get_settings

ACCUSE_PROMPT = "\nWho do you accuse? Type the suspect's name (e.g. 'Mr. Black'): "
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def text_input(binary: BinaryIO) -> TextIO:
    """Decode player input leniently; undecodable bytes become U+FFFD."""
    return io.TextIOWrapper(binary, encoding="utf-8", errors="replace")


def read_accusation(stream: TextIO) -> str:
    line = stream.readline()
    if line.endswith("\n"):
        line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
    return line


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Explore the mansion, collect clues, accuse a suspect")
    parser.add_argument("--case", default=None, help="Case name under cases/ or path to a case JSON file")
    parser.add_argument("--threshold", type=int, default=None, help="Clues needed to sustain an accusation")
    parser.add_argument("--log-level", default=None, type=str.upper, choices=LOG_LEVELS,
                        help="Logging level")
    return parser


def main(argv: Optional[Sequence[str]] = None, stdin: Optional[TextIO] = None,
         stdout: Optional[TextIO] = None) -> int:
    args = build_parser().parse_args(argv)
    stdin = stdin or text_input(sys.stdin.buffer)
    stdout = stdout or sys.stdout
    settings = get_settings()

    logging.basicConfig(
        level=(args.log_level or settings.log_level).upper(),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        case = load_case(args.case, settings)
    except CaseFileError as exc:
        raise SystemExit(str(exc))

    def emit(line: str) -> None:
        stdout.write(line + "\n")

    def read_line() -> Optional[str]:
        stdout.write("Choice: ")
        stdout.flush()
        line = stdin.readline()
        return line if line else None

    threshold = args.threshold if args.threshold is not None else settings.verdict_threshold
    with GameSession(case, threshold=threshold, bucket_count=settings.hash_buckets) as session:
        emit(f"=== {case.title} ===")
        for line in case.intro:
            emit(line)

        session.explore(read_line, emit)

        emit("\n=== Clues collected ===")
        for line in session.clue_lines():
            emit(line)

        stdout.write(ACCUSE_PROMPT)
        stdout.flush()
        verdict = session.accuse(read_accusation(stdin))
        emit("")
        for line in verdict.lines():
            emit(line)

    emit("\nThe end. Thanks for playing!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
