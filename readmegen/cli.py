"""
cli.py

Responsibility: CLI entrypoint for readmegen.

High-level flow (single invocation):
1) Collect answers -> `AnswerSet` (interactive prompts, or `--answers FILE`)
2) Render the README markdown
3) Write it to `README.md` (or `--output`)

This module should orchestrate behavior but keep concerns isolated:
- Answer model and answers files: `answers.py`
- Prompting: `prompts.py`
- Rendering and writing: `renderer.py`
"""

from __future__ import annotations

import argparse
import logging
import os
from pathlib import Path

from rich.logging import RichHandler

from readmegen.answers import AnswerSet, AnswersError, load_answers
from readmegen.console import console_err, print_error, print_success
from readmegen.prompts import UserCancelledError, collect_answers
from readmegen.renderer import WriteError, generate_readme, write_readme

log = logging.getLogger(__name__)

DEFAULT_OUTPUT = "README.md"
LOG_ENV_VAR = "READMEGEN_LOG"


def _configure_logging(verbose: bool) -> None:
    level = logging.WARNING
    if verbose or os.environ.get(LOG_ENV_VAR, "").lower() == "debug":
        level = logging.DEBUG

    logger = logging.getLogger("readmegen")
    logger.handlers.clear()
    handler = RichHandler(console=console_err, show_path=False)
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False


def _gather(args: argparse.Namespace) -> AnswerSet:
    if args.answers:
        log.debug("Reading answers from %s", args.answers)
        return load_answers(args.answers)
    return collect_answers()


def generate_cmd(args: argparse.Namespace) -> int:
    answers = _gather(args)
    readme = generate_readme(answers)

    # Written only after every answer is collected.
    output = write_readme(Path(args.output), readme)
    print_success(f"Successfully written {output}!")
    return 0


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="readmegen", description="Generate a README.md by answering a few questions")
    p.add_argument(
        "--answers",
        default=None,
        help="YAML file with answers (skips the interactive prompts)",
    )
    p.add_argument("--output", default=DEFAULT_OUTPUT, help=f"File to write (default: {DEFAULT_OUTPUT})")
    p.add_argument("-v", "--verbose", action="store_true", help=f"Debug logging (or set {LOG_ENV_VAR}=debug)")
    p.set_defaults(func=generate_cmd)
    return p


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    _configure_logging(bool(args.verbose))

    try:
        return int(args.func(args))
    except (AnswersError, WriteError, UserCancelledError) as e:
        print_error(str(e))
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
