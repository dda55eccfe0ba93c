"""
# pcresub: backreferences.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Resolution of numbered and named backreferences.

Supported forms:
- `\\«digit»`, where «digit» is 0 to 9 (a single digit only, so `\\12` is group 1 followed by `2`)
- `\\g{«number»}` and `\\g<«number»>`
- `\\g{«name»}` and `\\g<«name»>`
"""

import re
from typing import Optional, Sequence

from pcresub.bases import Regex
from pcresub.utilities import extract_substring


def parse_capture_group_number(name: str) -> Optional[int]:
    """
    Parse a bracketed backreference as a decimal group number.

    Only a nonzero value, or the exact string `0`, counts as a number.
    Anything else (including `00` or `-1`) is left for name resolution.
    """
    if not re.fullmatch(pattern=r'[0-9]+', string=name):
        return None

    number = int(name)
    if number == 0 and name != '0':
        return None

    return number


def resolve_capture_group_number(regex: 'Regex', name: str) -> int:
    number = parse_capture_group_number(name)
    if number is None:
        number = regex.get_capture_group_number(name)

    return number


def is_capture_group_available(number: int, capture_spans: Sequence[tuple[int, int]]) -> bool:
    return 0 <= number < len(capture_spans)


def extract_capture_text(number: int, capture_spans: Sequence[tuple[int, int]], text: str) -> Optional[str]:
    """
    Extract the text captured by a group, or None if the group number is out of range.
    """
    if not is_capture_group_available(number, capture_spans):
        return None

    start, end = capture_spans[number]
    return extract_substring(text, start, end)
