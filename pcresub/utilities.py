"""
# pcresub: utilities.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Common utility functions.
"""

import re


def is_ascii_digit(character: str) -> bool:
    return '0' <= character <= '9'


def is_hex_digit(character: str) -> bool:
    return bool(re.fullmatch(pattern=r'[0-9a-fA-F]', string=character))


def extract_substring(text: str, start: int, end: int) -> str:
    """
    Extract the text delimited by a capture span.

    A span with a negative start belongs to a group that did not participate in the match
    (Python reports these as `(-1, -1)`), and yields the empty string.
    """
    if start < 0 or end < start:
        return ''

    return text[start:end]
