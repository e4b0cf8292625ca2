"""
SHAVault - Main Entry Point

Command-line front end for the from-scratch SHA-256:

    shavault "message"          hash the UTF-8 encoding of a string
    shavault --file PATH        hash a file (streamed)
    shavault                    hash stdin, or prompt when run interactively
    shavault --trace "abc"      show padding and the state after each block
    shavault --self-test        check against NIST vectors and `cryptography`
"""

import argparse
import logging
import os
import sys
from typing import List, Optional

from .core_crypto.constants import BLOCK_SIZE
from .core_crypto.padding import padding_for_length
from .core_crypto.sha256 import iter_block_states, new, serialize_state, sha256
from .selftest import run_self_test


logger = logging.getLogger(__name__)

# Read size when streaming files through the hasher
DEFAULT_CHUNK_SIZE = 64 * 1024

PROMPT = "Enter a string to hash: "


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="shavault",
        description="Compute SHA-256 digests (FIPS 180-4) without hashlib.",
    )
    parser.add_argument("text", nargs="?",
                        help="String to hash (UTF-8). Reads stdin when omitted.")
    parser.add_argument("-f", "--file", help="Hash the contents of this file")
    parser.add_argument("--trace", action="store_true",
                        help="Print padding details and the state after each block")
    parser.add_argument("--self-test", action="store_true",
                        help="Verify against NIST vectors and the cryptography package")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Enable debug logging")
    return parser


def hash_file(path: str, chunk_size: int = DEFAULT_CHUNK_SIZE) -> bytes:
    """
    Compute the SHA-256 of a file without loading it into memory.

    Args:
        path: File to hash
        chunk_size: Bytes read per update() call

    Returns:
        32-byte digest
    """
    hasher = new()
    with open(path, 'rb') as f:
        for chunk in iter(lambda: f.read(chunk_size), b''):
            hasher.update(chunk)
    logger.debug("Hashed %s (%d bytes)", path, hasher.message_length)
    return hasher.finalize()


def read_stdin() -> bytes:
    """Read the message from stdin, prompting when attached to a terminal."""
    if sys.stdin.isatty():
        try:
            text = input(PROMPT)
        except EOFError:
            # Ctrl-D at the prompt hashes the empty message
            print()
            return b''
        return os.fsencode(text)
    return sys.stdin.buffer.read()


def print_trace(data: bytes) -> bytes:
    """
    Print the padded layout and the hash state after every block.

    Returns:
        The digest, serialized from the state after the last block
    """
    padded_length = len(data) + len(padding_for_length(len(data)))
    print(f"Message length: {len(data)} bytes ({len(data) * 8} bits)")
    print(f"Padded length:  {padded_length} bytes ({padded_length // BLOCK_SIZE} blocks)")

    state = ()
    for index, _block, state in iter_block_states(data):
        words = " ".join(f"{word:08x}" for word in state)
        print(f"Block {index}: {words}")
    return serialize_state(state)


def print_self_test() -> int:
    """Run the self-test and report each case. Returns the exit code."""
    results = run_self_test()
    for result in results:
        status = "PASS" if result.passed else "FAIL"
        print(f"[{status}] {result.name}")
        if not result.passed:
            print(f"  Expected: {result.expected}")
            print(f"  Got:      {result.actual}")

    failed = sum(1 for result in results if not result.passed)
    print(f"{len(results) - failed}/{len(results)} passed")
    return 0 if failed == 0 else 1


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for SHAVault."""
    args = build_parser().parse_args(argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(name)s %(levelname)s %(message)s",
        )

    if args.self_test:
        if args.text is not None or args.file or args.trace:
            print("Error: --self-test takes no TEXT, --file or --trace", file=sys.stderr)
            return 2
        return print_self_test()

    if args.file and args.text is not None:
        print("Error: give either TEXT or --file, not both", file=sys.stderr)
        return 2

    try:
        if args.file and not args.trace:
            print(f"{hash_file(args.file).hex()}  {args.file}")
            return 0

        if args.file:
            with open(args.file, 'rb') as f:
                data = f.read()
        elif args.text is not None:
            # Undo argv decoding so undecodable bytes are hashed as given
            data = os.fsencode(args.text)
        else:
            data = read_stdin()
    except OSError as exc:
        print(f"Error: cannot read input: {exc}", file=sys.stderr)
        return 2

    if args.trace:
        digest = print_trace(data)
    else:
        digest = sha256(data)

    print(digest.hex())
    return 0


if __name__ == "__main__":
    sys.exit(main())
