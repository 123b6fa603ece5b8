"""CLI for checking permalink formats against sample paths."""

from __future__ import annotations

import argparse
import json
import sys

from backend.permalink.canonical import FixStatus, fix_path
from backend.permalink.matcher import parse_path
from backend.permalink.tokens import Literal, compile_format


def describe_tokens(fmt: str) -> list[str]:
    """One human-readable line per compiled token."""
    lines: list[str] = []
    for token in compile_format(fmt):
        if isinstance(token, Literal):
            lines.append(f"literal     {token.text!r}")
        else:
            terminator = repr(token.terminator) if token.terminator is not None else "end"
            lines.append(f"placeholder {token.name} (until {terminator})")
    return lines


def cmd_compile(fmt: str) -> int:
    for line in describe_tokens(fmt):
        print(line)
    return 0


def cmd_match(fmt: str, path: str) -> int:
    captures = parse_path(fmt, path)
    if captures is None:
        print(f"Error: {path!r} does not match {fmt!r}", file=sys.stderr)
        return 1
    print(json.dumps(captures, indent=2))
    return 0


def cmd_fix(fmt: str, path: str) -> int:
    fix = fix_path(fmt, path)
    if fix.status is FixStatus.CHANGED:
        print(fix.path)
        return 0
    if fix.status is FixStatus.UNCHANGED:
        print("Already canonical")
        return 0
    print(f"Error: no correction available ({fix.error_kind or 'error'})", file=sys.stderr)
    return 1


def main(argv: list[str] | None = None) -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="permalinker-check",
        description="Inspect how a permalink format compiles and matches paths",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    compile_parser = subparsers.add_parser("compile", help="Show the compiled tokens")
    compile_parser.add_argument("format", help="Permalink format, e.g. %%year%%/%%postname%%")

    match_parser = subparsers.add_parser("match", help="Print captures for a path")
    match_parser.add_argument("format")
    match_parser.add_argument("path")

    fix_parser = subparsers.add_parser("fix", help="Print the canonical form of a path")
    fix_parser.add_argument("format")
    fix_parser.add_argument("path")

    args = parser.parse_args(argv)

    if args.command == "compile":
        code = cmd_compile(args.format)
    elif args.command == "match":
        code = cmd_match(args.format, args.path)
    else:
        code = cmd_fix(args.format, args.path)
    sys.exit(code)


if __name__ == "__main__":
    main()
