"""
Transliteration Core

Maps single characters onto the cipher alphabet and pulls characters
lazily from an input stream. Operates on 8-bit characters only; no
Unicode normalisation is attempted.
"""

from typing import IO, Iterable, Iterator

# Digits spelled out in English, indexed by their character
DIGIT_WORDS = {
    "0": "ZERO",
    "1": "ONE",
    "2": "TWO",
    "3": "THREE",
    "4": "FOUR",
    "5": "FIVE",
    "6": "SIX",
    "7": "SEVEN",
    "8": "EIGHT",
    "9": "NINE",
}


def transliterate_char(char: str) -> str:
    """
    Transform a single character into its cipher-alphabet representation.

    Args:
        char: One input character

    Returns:
        The uppercase letter for an ASCII letter, the English word for a
        digit, or an empty string for anything else.
    """
    if char.isascii() and char.isalpha():
        return char.upper()
    return DIGIT_WORDS.get(char, "")


def transliterate(chars: Iterable[str]) -> str:
    """Transliterate a sequence of characters, preserving input order."""
    output = []
    for char in chars:
        output.append(transliterate_char(char))
    return "".join(output)


def iter_chars(stream: IO) -> Iterator[str]:
    """
    Yield characters from a stream one at a time until end of stream.

    Binary streams are decoded byte by byte as Latin-1 so that every
    8-bit value maps to exactly one character.
    """
    while True:
        chunk = stream.read(1)
        if not chunk:
            return
        if isinstance(chunk, bytes):
            chunk = chunk.decode("latin-1")
        yield chunk
