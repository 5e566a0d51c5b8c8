#!/usr/bin/env python3
"""
Command-line digests.

    python -m keccak_sponge -s 2K53cuR1tY
    python -m keccak_sponge -a sha3-256 file1 file2
    cat file | python -m keccak_sponge
"""

import argparse
import logging
import sys

from .digest import KeccakHash
from .errors import ConfigurationError
from .variants import VARIANTS

logger = logging.getLogger("keccak_sponge")

CHUNK_SIZE = 64 * 1024


def hash_stream(h, stream):
    while True:
        chunk = stream.read(CHUNK_SIZE)
        if not chunk:
            break
        h.update(chunk)
    return h.hexdigest()


def hash_file(variant, path):
    h = KeccakHash(variant)
    if path == "-":
        return hash_stream(h, sys.stdin.buffer)
    with open(path, "rb") as f:
        return hash_stream(h, f)


def list_variants():
    for v in VARIANTS.values():
        print(f"{v.name:<12} digest={v.digest_size:>2} bytes  rate={v.rate:>3} bytes  padding={v.domain:#04x}")


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="keccak_sponge",
        description="Print Keccak / SHA-3 digests of strings, files or stdin.",
    )
    parser.add_argument("files", nargs="*", help="Files to hash ('-' for stdin)")
    parser.add_argument("-a", "--algorithm", default="keccak-256", help="Digest variant (default: keccak-256)")
    parser.add_argument("-s", "--string", help="Hash this UTF-8 string instead of files")
    parser.add_argument("--list", action="store_true", help="List the supported variants")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log progress to stderr")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.string is not None and args.files:
        parser.error("-s/--string cannot be combined with file arguments")

    if args.list:
        list_variants()
        return 0

    try:
        h = KeccakHash(args.algorithm)
    except ConfigurationError as e:
        parser.error(str(e))
    name = h.name

    if args.string is not None:
        logger.debug("hashing %d-byte string with %s", len(args.string.encode()), name)
        h.update(args.string.encode())
        print(f"{name}(\"{args.string}\") = {h.hexdigest()}")
        return 0

    status = 0
    for path in args.files or ["-"]:
        logger.debug("hashing %s with %s", path, name)
        try:
            digest_hex = hash_file(name, path)
        except OSError as e:
            logger.error("%s: %s", path, e.strerror or e)
            status = 1
            continue
        print(f"{name}({path}) = {digest_hex}")
    return status


if __name__ == "__main__":
    sys.exit(main())
