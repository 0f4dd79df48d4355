#!/usr/bin/env python3
"""
MPAGS Cipher CLI

Command-line driver: parses options, handles help/version, then
transliterates stdin to stdout.

Usage:
    mpags-cipher < message.txt
    echo "Hello, World 2" | mpags-cipher         # -> HELLOWORLDTWO
    mpags-cipher --version
    python -m mpags_cipher -h

Options:
    -h, --help       Print the help message and exit
    --version        Print version information and exit
    -i FILE          Input file (not implemented yet, stdin is used)
    -o FILE          Output file (not implemented yet, stdout is used)
"""

import sys
from typing import IO, List, Optional

from mpags_cipher import __version__
from mpags_cipher.core import iter_chars, transliterate
from mpags_cipher.options import parse_args

USAGE = (
    "Usage: mpags-cipher [-h/--help] [--version] [-i <file>] [-o <file>]\n"
    "\n"
    "Encrypts/Decrypts input alphanumeric text using classical ciphers\n"
    "\n"
    "Available options:\n"
    "\n"
    "  -h|--help        Print this help message and exit\n"
    "\n"
    "  --version        Print version information\n"
    "\n"
    "  -i FILE          Read text to be processed from FILE\n"
    "                   Stdin will be used if not supplied\n"
    "\n"
    "  -o FILE          Write processed text to FILE\n"
    "                   Stdout will be used if not supplied\n"
)


def main(
    argv: Optional[List[str]] = None,
    stdin: Optional[IO] = None,
    stdout: Optional[IO] = None,
    stderr: Optional[IO] = None,
) -> int:
    """
    Run the program and return its exit status.

    Help takes priority over version, and both skip reading stdin.
    """
    if argv is None:
        argv = sys.argv[1:]
    if stdin is None:
        stdin = getattr(sys.stdin, "buffer", sys.stdin)
    if stdout is None:
        stdout = sys.stdout
    if stderr is None:
        stderr = sys.stderr

    result = parse_args(argv)
    if not result.ok:
        print(f"[error] {result.message}", file=stderr)
        return 1
    options = result.options

    if options.help_requested:
        print(USAGE, file=stdout)
        return 0

    if options.version_requested:
        print(__version__, file=stdout)
        return 0

    if options.input_file:
        print(
            f"[warning] input from file ('{options.input_file}') "
            f"not implemented yet, using stdin",
            file=stderr,
        )

    text = transliterate(iter_chars(stdin))

    if options.output_file:
        print(
            f"[warning] output to file ('{options.output_file}') "
            f"not implemented yet, using stdout",
            file=stderr,
        )

    print(text, file=stdout)
    return 0


def run():
    """Console-script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run()
