"""wwt CLI -- remember commands by describing them, find them again later.

Usage:
  wwt remember "ls -l" "list contents of current directory"
  wwt find "list directory"
  wwt forget "ls -l"
  wwt list

The store lives at $WWT_STORE_PATH, or under the per-user config directory
(~/.config/wwt/store.json on Linux).
"""

from __future__ import annotations

import argparse
import logging
import sys

from dotenv import find_dotenv, load_dotenv

import wwt
from wwt.client import WhatWasThat
from wwt.config import STORE_PATH_ENV, WwtConfig
from wwt.exceptions import ConfigError, StorageError

log = logging.getLogger(__name__)


def _text(value: str) -> str:
    try:
        value.encode("utf-8")
    except UnicodeEncodeError:
        raise argparse.ArgumentTypeError(f"not valid UTF-8: {value!r}") from None
    return value


def _non_empty(value: str) -> str:
    if not value:
        raise argparse.ArgumentTypeError("must not be empty")
    return _text(value)


def _positive_int(value: str) -> int:
    n = int(value)
    if n < 1:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {value}")
    return n


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wwt",
        description="Remember a thing by its description, and find it again later.",
        epilog=f"environment:\n  {STORE_PATH_ENV}  custom path to the store file",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {wwt.__version__}")
    parser.add_argument("--store-path", help="Custom path to the store file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug output to stderr")

    sub = parser.add_subparsers(dest="command", metavar="COMMAND", required=True)

    p = sub.add_parser(
        "remember",
        aliases=["set"],
        help="Remember a thing and its description",
        description='Remember a thing and its description.\n\n'
        'Example:\n  wwt remember "ls" "list files"',
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument("name", type=_non_empty, help="The thing to remember")
    p.add_argument("description", type=_text, help="What it does")
    p.set_defaults(func=cmd_remember)

    p = sub.add_parser(
        "find",
        aliases=["get"],
        help="Find a thing using a description",
        description='Find a thing using a description. Best matches come first.\n\n'
        "Words match case-insensitively. A word of 3+ letters also matches inside\n"
        'a longer word ("list" finds "listing"); shorter words must match exactly,\n'
        'so "ls" does not find "lsblk".\n\n'
        'Example:\n  $ wwt find "list files"\n  ls -> list files\n'
        '  ls -l -> list files with longer format',
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument("description", type=_text, help="Roughly what the thing does")
    p.add_argument("--limit", type=_positive_int, help="Show at most this many matches")
    p.set_defaults(func=cmd_find)

    p = sub.add_parser(
        "forget",
        aliases=["delete"],
        help="Forget a thing",
        description="Forget a thing. The name must match exactly; use `wwt find` "
        "to look it up first.\n\nExample:\n  wwt forget \"ls\"",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument("name", type=_non_empty, help="The exact thing to forget")
    p.set_defaults(func=cmd_forget)

    p = sub.add_parser("list", aliases=["ls"], help="List everything remembered")
    p.set_defaults(func=cmd_list)

    return parser


# -- Commands --


def cmd_remember(client: WhatWasThat, args: argparse.Namespace) -> int:
    replaced = client.remember(args.name, args.description)
    print(f"{'Updated' if replaced else 'Remembered'}: {args.name}")
    return 0


def cmd_find(client: WhatWasThat, args: argparse.Namespace) -> int:
    matches = client.find(args.description, limit=args.limit)
    if not matches:
        print("No matches found.", file=sys.stderr)
        return 0
    for m in matches:
        print(f"{m.record.command} -> {m.record.description}")
    return 0


def cmd_forget(client: WhatWasThat, args: argparse.Namespace) -> int:
    if client.forget(args.name):
        print(f"Forgot: {args.name}")
    else:
        print(f"Nothing to forget: {args.name} not found", file=sys.stderr)
    return 0


def cmd_list(client: WhatWasThat, args: argparse.Namespace) -> int:
    records = client.list()
    if not records:
        print("Nothing remembered yet.", file=sys.stderr)
        return 0
    for r in records:
        print(f"{r.command} -> {r.description}")
    return 0


def main(argv: list[str] | None = None) -> int:
    load_dotenv(find_dotenv(usecwd=True))
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        config = WwtConfig.from_env(store_path=args.store_path)
        return args.func(WhatWasThat(config), args)
    except ConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    except StorageError as exc:
        log.debug("Storage failure", exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        return 1


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
