"""
MPAGS Cipher - Classical Cipher Text Preparation

Reads text from stdin and transliterates it into the uppercase,
letters-only alphabet that classical ciphers operate on: letters are
uppercased, digits are spelled out in English, everything else is dropped.
"""

__version__ = "0.1.0"
