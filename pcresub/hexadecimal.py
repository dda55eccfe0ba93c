"""
# pcresub: hexadecimal.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Decoding of hexadecimal code point escapes.

Supported forms:
- `\\x«hh»`, exactly 2 hex digits
- `\\x{«hh»}`, `\\x{«hhhh»}`, `\\x{«pphhhh»}`,
  where «pp» is the plane byte and must lie between `00` and `10`
  so that the code point does not exceed U+10FFFF
"""

from pcresub.constants import HEX_BRACE_LENGTHS, HEX_PAIR_LENGTH, PLANE_SIZE
from pcresub.utilities import is_hex_digit


def is_valid_braced_hex(digits: str) -> bool:
    if len(digits) not in HEX_BRACE_LENGTHS:
        return False

    if not all(is_hex_digit(character) for character in digits):
        return False

    if len(digits) < 6:
        return True

    return digits.startswith('0') or digits.startswith('10')


def decode_hex_pair(digits: str) -> str:
    if len(digits) != HEX_PAIR_LENGTH:
        raise ValueError(f'error: `\\x{digits}` must have exactly {HEX_PAIR_LENGTH} hex digits')

    return chr(int(digits, 16))


def decode_braced_hex(digits: str) -> str:
    """
    Decode the digits of a `\\x{...}` escape into a single code point.

    Six digits are split into the plane byte and the 4-digit offset within that plane.
    """
    if not is_valid_braced_hex(digits):
        raise ValueError(f'error: `\\x{{{digits}}}` is not a valid braced hex escape')

    if len(digits) < 6:
        return chr(int(digits, 16))

    plane = int(digits[:2], 16)
    offset = int(digits[2:], 16)

    return chr(plane * PLANE_SIZE + offset)
