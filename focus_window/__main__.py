#! /usr/bin/env python

"""
Command-line entry point for the focus_window tools.

    focus-window <program> [arguments...]

runs one of the executable modules below as __main__, with the remaining
arguments as its command line.
"""

import sys
import argparse
import runpy
from typing import Sequence
from pathlib import PurePosixPath


# The consistency of this list is verified in focus_window/tests/test_main.py
EXECUTABLES = [
    "focus_window/utils/replay_scenario.py",
    "focus_window/utils/version.py",
]


def program_name(path: str) -> str:
    return PurePosixPath(path).stem


def program_module(path: str) -> str:
    return '.'.join(PurePosixPath(path).with_suffix('').parts)


PROGRAMS = {program_name(path): program_module(path) for path in EXECUTABLES}


def run_program(module_name: str, arguments: Sequence[str]) -> int:
    sys.argv = [module_name] + list(arguments)
    runpy.run_module(module_name, run_name='__main__', alter_sys=True)
    return 0


def get_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Run a focus_window tool.", add_help=False)
    parser.add_argument("--version", action="store_true", help="Print version and exit.")
    parser.add_argument('--help', action='store_true', help='Show this help message and exit.')
    parser.add_argument("program", nargs='?', choices=PROGRAMS.keys(), help="Program name.")
    parser.add_argument("arguments", nargs=argparse.REMAINDER, help="Program arguments.")
    return parser


def main(argv: Sequence[str]) -> int:
    parser = get_parser()
    args = parser.parse_args(argv)

    if args.version:
        return run_program(PROGRAMS['version'], [])
    if args.help:
        parser.print_help()
        return 0
    if args.program is None:
        parser.print_help()
        return 1
    return run_program(PROGRAMS[args.program], args.arguments)


def cli() -> int:
    return main(sys.argv[1:])


if __name__ == '__main__':
    sys.exit(cli())
