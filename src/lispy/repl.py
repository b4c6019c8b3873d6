# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Arjun Guha
"""
Command-line driver for Lispy: an interactive prompt, batch evaluation of
files, and one-shot evaluation with --eval.

Every line is parsed and evaluated on its own. A bad line is reported and
the driver moves on to the next one.
"""

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional

from tqdm import tqdm

from . import __version__
from .interpreter import run_line

try:
    import readline
except ImportError:
    # Not available on Windows. The prompt still works, without editing.
    readline = None

BANNER = f"Lispy version {__version__}\nPress CTRL+C to exit.\n"
DEFAULT_PROMPT = "lispy> "


def _load_history(history_file: Optional[Path]):
    if readline is None or history_file is None:
        return
    if history_file.exists():
        try:
            readline.read_history_file(str(history_file))
        except OSError as e:
            logging.warning(f"Warning: Could not read history file {history_file}: {e}")


def _save_history(history_file: Optional[Path]):
    if readline is None or history_file is None:
        return
    try:
        readline.write_history_file(str(history_file))
    except OSError as e:
        logging.warning(f"Warning: Could not write history file {history_file}: {e}")


def repl(prompt: str = DEFAULT_PROMPT, show_banner: bool = True, history_file: Optional[Path] = None):
    """
    Read lines until end of input or Ctrl+C, printing the result of each.
    """
    if show_banner:
        print(BANNER)
    _load_history(history_file)
    try:
        while True:
            try:
                line = input(prompt)
            except (EOFError, KeyboardInterrupt):
                print()
                break
            if not line.strip():
                continue
            output, _ = run_line(line)
            for out in output:
                print(out)
    finally:
        _save_history(history_file)


def run_file(path: Path, progress: bool = False) -> bool:
    """
    Evaluate each non-blank line of a file independently. Returns True if
    every line produced only numbers.
    """
    all_passed = True
    try:
        lines = path.read_text(encoding="utf-8").splitlines()
    except (OSError, UnicodeDecodeError) as e:
        logging.error(f"Error: Could not read {path}: {e}")
        return False
    logging.info(f"Evaluating {len(lines)} line(s) from {path}")
    for line_num, line in enumerate(tqdm(lines, desc=path.name, disable=not progress, file=sys.stderr), 1):
        if not line.strip():
            continue
        output, ok = run_line(line, filename=str(path), first_line=line_num)
        for out in output:
            tqdm.write(out)
        if not ok:
            all_passed = False
    return all_passed


def _get_log_level() -> int:
    """
    Determine log level from LOGLEVEL environment variable.
    Defaults to WARNING if not set.
    """
    loglevel_env = os.getenv("LOGLEVEL", "").upper()
    if loglevel_env:
        level = getattr(logging, loglevel_env, None)
        if isinstance(level, int):
            return level
    return logging.WARNING


def main_with_args(
    files: List[Path],
    eval_line: Optional[str] = None,
    progress: bool = False,
    no_banner: bool = False,
    prompt: str = DEFAULT_PROMPT,
    history: Optional[Path] = None,
) -> int:
    # Configure logging from LOGLEVEL environment variable
    logging.basicConfig(
        level=_get_log_level(),
        format='%(message)s',
        stream=sys.stderr
    )

    if eval_line is not None:
        output, ok = run_line(eval_line, filename="<eval>")
        for out in output:
            print(out)
        return 0 if ok else 1

    if not files:
        repl(prompt=prompt, show_banner=not no_banner, history_file=history)
        return 0

    all_passed = True
    for path in files:
        if not path.is_file():
            logging.error(f"Error: File not found: {path}")
            all_passed = False
            continue
        if not run_file(path, progress=progress):
            all_passed = False
    return 0 if all_passed else 1


def main():
    parser = argparse.ArgumentParser(
        description="Evaluate parenthesized integer arithmetic, e.g. (+ 1 (* 2 3))"
    )
    parser.add_argument(
        "files",
        type=Path,
        nargs="*",
        help="Files to evaluate line by line. Without files, start an interactive prompt.",
    )
    parser.add_argument(
        "-e",
        "--eval",
        dest="eval_line",
        metavar="EXPR",
        help="Evaluate EXPR, print the result, and exit",
    )
    parser.add_argument(
        "--progress",
        action="store_true",
        help="Show a progress bar on stderr while evaluating files",
    )
    parser.add_argument(
        "--no-banner",
        action="store_true",
        help="Do not print the version banner at the interactive prompt",
    )
    parser.add_argument(
        "--prompt",
        default=DEFAULT_PROMPT,
        help=f"Interactive prompt (default: {DEFAULT_PROMPT!r})",
    )
    parser.add_argument(
        "--history",
        type=Path,
        default=None,
        help="File to load and save interactive history",
    )
    args = parser.parse_args()
    if args.eval_line is not None and args.files:
        parser.error("--eval cannot be combined with files")
    sys.exit(main_with_args(**vars(args)))


if __name__ == "__main__":
    main()
