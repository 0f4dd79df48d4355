"""
Command-line option parsing.

Tokens are matched exactly (no abbreviations, no combined short flags)
and the outcome is returned as a value rather than printed or raised, so
the caller decides how to report it.
"""

from dataclasses import dataclass
from typing import List, Optional, Union


@dataclass(frozen=True)
class ParsedOptions:
    """Options collected from the command line."""
    help_requested: bool = False
    version_requested: bool = False
    input_file: Optional[str] = None
    output_file: Optional[str] = None


@dataclass(frozen=True)
class ParseSuccess:
    """Successful parse carrying the collected options."""
    options: ParsedOptions

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class UsageError:
    """Malformed command line: unknown token or missing filename."""
    message: str

    @property
    def ok(self) -> bool:
        return False


ParseResult = Union[ParseSuccess, UsageError]

HELP_FLAGS = ("-h", "--help")
VERSION_FLAG = "--version"
INPUT_FLAG = "-i"
OUTPUT_FLAG = "-o"


def parse_args(tokens: List[str]) -> ParseResult:
    """
    Parse the command-line tokens that follow the program name.

    Scanning stops at the first bad token. A repeated -i or -o replaces
    the earlier filename.

    Args:
        tokens: Command-line arguments, program name excluded

    Returns:
        ParseSuccess with the options, or UsageError describing the
        first problem found.
    """
    help_requested = False
    version_requested = False
    files = {INPUT_FLAG: None, OUTPUT_FLAG: None}

    i = 0
    while i < len(tokens):
        token = tokens[i]
        if token in HELP_FLAGS:
            help_requested = True
        elif token == VERSION_FLAG:
            version_requested = True
        elif token in files:
            # The following token is the filename, whatever it looks like
            if i == len(tokens) - 1:
                return UsageError(f"{token} requires a filename argument")
            files[token] = tokens[i + 1]
            i += 1
        else:
            return UsageError(f"unknown argument '{token}'")
        i += 1

    return ParseSuccess(ParsedOptions(
        help_requested=help_requested,
        version_requested=version_requested,
        input_file=files[INPUT_FLAG],
        output_file=files[OUTPUT_FLAG],
    ))
