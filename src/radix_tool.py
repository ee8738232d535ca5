#!/usr/bin/env python3
#-*- coding: utf-8 -*-
#
# Radix Codec: Arbitrary-Base Byte Encoding
# Copyright (C) 2025 Peter J. Marko
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.
#
# Filename: src/radix_tool.py

"""
Command-line front end for the radix codec.

Converts bytes to base-N digits and back so shell scripts can use the codec
without writing Python. Only the digits or the decoded bytes are written to
stdout; everything else goes to stderr, keeping stdout safe to capture.

Usage:
    # Encode a hex string in base 62
    radix-tool encode --hex ffff

    # Encode a binary file in base 36
    radix-tool encode -b 36 -i payload.bin

    # Decode back to hex, or to raw bytes
    radix-tool decode h31
    radix-tool decode -b 62 --raw h31 > payload.bin

When `-b` is omitted the base comes from `RADIX_DEFAULT_BASE` or
`[Codec] default_base` in config.ini (see radix_config.py), else 62.

Exit codes: 0 on success, 1 on a codec or input error, 2 on bad usage.
"""

import argparse
import binascii
import logging
import sys

from colorama import Fore, init

from radix_codec import decode, encode
from radix_config import APP_CONFIG, get_default_base, get_log_level

# Initialize colorama
init(autoreset=True)


def read_input_bytes(args) -> bytes:
    """Collects the bytes to encode from --hex, -i, or stdin."""
    if args.hex is not None:
        try:
            return binascii.unhexlify(args.hex.strip())
        except (binascii.Error, ValueError) as e:
            raise ValueError(f"Invalid hex input: {e}") from e
    if args.input_file:
        with open(args.input_file, 'rb') as f:
            return f.read()
    return sys.stdin.buffer.read()


def read_input_text(args):
    """
    Collects the digits to decode from the positional argument, -i, or stdin.

    File input is returned as bytes so decode() reports any non-ASCII byte
    as itself, at its real position.
    """
    if args.text is not None:
        return args.text.strip()
    if args.input_file:
        with open(args.input_file, 'rb') as f:
            return f.read().strip()
    return sys.stdin.read().strip()


def run_encode(args) -> int:
    data = read_input_bytes(args)
    logging.debug(f"Encoding {len(data)} byte(s) in base {args.base}")
    print(encode(data, args.base))
    if args.verbose:
        print(f"{Fore.GREEN}Encoded {len(data)} byte(s) in base {args.base}.", file=sys.stderr)
    return 0


def run_decode(args) -> int:
    text = read_input_text(args)
    logging.debug(f"Decoding {len(text)} digit(s) in base {args.base}")
    data = decode(text, args.base)
    if args.raw:
        sys.stdout.buffer.write(data)
        sys.stdout.buffer.flush()
    else:
        print(data.hex())
    if args.verbose:
        print(f"{Fore.GREEN}Decoded {len(data)} byte(s) from base {args.base}.", file=sys.stderr)
    return 0


def build_parser(default_base: int) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="radix-tool",
        description="Encode bytes in any base from 2 to 62, or decode them back.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Enable debug logging on stderr.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    enc = subparsers.add_parser("encode", help="Convert bytes to base-N digits.",
                                formatter_class=argparse.ArgumentDefaultsHelpFormatter)
    enc.add_argument("-b", "--base", type=int, default=default_base,
                     help="Target base (2-62).")
    source = enc.add_mutually_exclusive_group()
    source.add_argument("--hex", help="Input bytes as a hex string.")
    source.add_argument("-i", "--input-file", help="Read input bytes from this file.")
    enc.set_defaults(func=run_encode)

    dec = subparsers.add_parser("decode", help="Convert base-N digits back to bytes.",
                                formatter_class=argparse.ArgumentDefaultsHelpFormatter)
    dec.add_argument("text", nargs="?", help="Digits to decode. Read from stdin if omitted.")
    dec.add_argument("-b", "--base", type=int, default=default_base,
                     help="Base the digits are written in (2-62).")
    dec.add_argument("-i", "--input-file", help="Read digits from this file.")
    output = dec.add_mutually_exclusive_group()
    output.add_argument("--raw", action="store_true",
                        help="Write raw bytes instead of hex.")
    output.add_argument("--hex-out", action="store_true",
                        help="Write lowercase hex (the default).")
    dec.set_defaults(func=run_decode)

    return parser


def main(argv=None) -> int:
    """Parses arguments, runs the requested conversion, and returns an exit code."""
    parser = build_parser(get_default_base(APP_CONFIG))
    args = parser.parse_args(argv)

    if args.command == "decode" and args.text is not None and args.input_file:
        parser.error("give the digits either as an argument or with -i, not both")

    level = logging.DEBUG if args.verbose else get_log_level(APP_CONFIG)
    logging.basicConfig(level=level, format='%(levelname)s: %(message)s')

    try:
        return args.func(args)
    except (ValueError, OSError) as e:
        print(f"{Fore.RED}ERROR: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())

# === End of src/radix_tool.py ===
