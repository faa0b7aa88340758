#!/usr/bin/env python3
"""
Command-line runner: bfi <file.bf>

Validates and reads the program file, runs it on the console and prints any
failure in red with a category label.
"""

import argparse
import logging
import sys
from typing import List, Optional

from colorama import Fore, Style, just_fix_windows_console
from dotenv import load_dotenv

from bfi import __version__
from bfi.brainfuck import BrainfuckInterpreter
from bfi.config import Settings
from bfi.console import Console
from bfi.debugger import BrainfuckDebugger
from bfi.errors import ExecutionError

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1


def print_err(error_type: str, error, color: bool = True) -> None:
    """Print an error to the terminal, in red when colour is enabled."""
    message = f"{error_type} {error}" if error_type else str(error)
    if color:
        message = f"{Fore.RED}{message}{Style.RESET_ALL}"
    print(message)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="bfi", description="BrainFuck interpreter")
    ap.add_argument("filename", help="file to read")
    ap.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    ap.add_argument("--trace", action="store_true", help="Print tape and loop state after every step")
    ap.add_argument("--no-color", action="store_true", help="Disable coloured error output")
    return ap


def load_program(filename: str, settings: Settings) -> str:
    """Read the whole program file. OSError and UnicodeError propagate."""
    with open(filename, "r", encoding=settings.encoding, newline="") as f:
        return f.read()


def run(tokens: str, settings: Settings, trace: bool = False, console: Optional[Console] = None) -> None:
    console = console if console is not None else Console(encoding=settings.encoding)
    if trace:
        interpreter = BrainfuckDebugger(tokens, console, show_memory_range=settings.trace_window)
    else:
        interpreter = BrainfuckInterpreter(tokens, console)
    interpreter.execute()


def main(argv: Optional[List[str]] = None) -> int:
    just_fix_windows_console()
    load_dotenv()
    args = build_parser().parse_args(argv)
    try:
        settings = Settings.from_env()
    except ValueError as e:
        print_err("configuration error: ", e, not args.no_color)
        return EXIT_FAILURE
    color = settings.color and not args.no_color

    level = getattr(logging, settings.log_level, None)
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    if not args.filename:
        print_err("", "No file provided", color)
        return EXIT_FAILURE
    if not args.filename.endswith(settings.source_suffix):
        print_err("", "Invalid file type", color)
        return EXIT_FAILURE

    try:
        contents = load_program(args.filename, settings)
    except UnicodeError as e:
        print_err("error in processing file: ", e, color)
        return EXIT_FAILURE
    except OSError as e:
        print_err("error in reading file: ", e, color)
        return EXIT_FAILURE

    logger.info("loaded %s (%d characters)", args.filename, len(contents))
    try:
        run(contents, settings, trace=args.trace)
    except ExecutionError as e:
        print_err("execution error: ", e, color)
        return EXIT_FAILURE
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
