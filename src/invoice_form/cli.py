"""
Command line tool for share links.

Lets scripts and other tools work with share URLs without reimplementing
the compression map:

    invoice-form-share keymap [PATH]          print or write the key map JSON
    invoice-form-share encode URL [FILE]      pack invoice JSON (file or stdin)
    invoice-form-share decode URL             print the invoice in a share URL
"""

import argparse
import sys
from typing import Sequence

from invoice_form.lib import logs, objects
from invoice_form.sharing.key_map import key_map_json, write_key_map
from invoice_form.sharing.links import ShareError, ensure_shareable, generate_share_url, load_from_url


def _keymap(args: argparse.Namespace) -> int:
    if args.path:
        target = write_key_map(args.path)
        print(f"Wrote {target}")
    else:
        print(key_map_json())
    return 0


def _encode(args: argparse.Namespace) -> int:
    text = args.file.read()
    try:
        data = objects.from_json(text)
    except ValueError as exc:
        print(f"Invalid invoice JSON: {exc}", file=sys.stderr)
        return 1
    if not isinstance(data, dict):
        print(f"Invalid invoice JSON: expected an object, got {type(data).__name__}", file=sys.stderr)
        return 1
    try:
        ensure_shareable(data)
    except ShareError as exc:
        print(str(exc), file=sys.stderr)
        return 1
    print(generate_share_url(data, args.url))
    return 0


def _decode(args: argparse.Namespace) -> int:
    data = load_from_url(args.url)
    if data is None:
        print("No invoice data found in URL", file=sys.stderr)
        return 1
    print(objects.to_json(data, indent=2))
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Return the argument parser for invoice-form-share."""
    parser = argparse.ArgumentParser(
        prog="invoice-form-share", description="Work with invoice share links."
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Log level for diagnostics on stderr (default: WARNING).",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    keymap = commands.add_parser("keymap", help="Publish the key compression map as JSON.")
    keymap.add_argument("path", nargs="?", help="File to write; prints to stdout when omitted.")
    keymap.set_defaults(handler=_keymap)

    encode = commands.add_parser("encode", help="Build a share URL from invoice JSON.")
    encode.add_argument("url", help="Page URL to attach the data parameter to.")
    encode.add_argument(
        "file",
        nargs="?",
        type=argparse.FileType("r", encoding="utf-8"),
        default=sys.stdin,
        help="Invoice JSON file; reads stdin when omitted.",
    )
    encode.set_defaults(handler=_encode)

    decode = commands.add_parser("decode", help="Print the invoice packed into a share URL.")
    decode.add_argument("url", help="Share URL.")
    decode.set_defaults(handler=_decode)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Entrypoint used by the invoice-form-share script."""
    args = build_parser().parse_args(argv)
    logs.set_level(args.log_level)
    return args.handler(args)


if __name__ == "__main__":
    sys.exit(main())
