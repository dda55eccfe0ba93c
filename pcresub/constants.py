"""
# pcresub: constants.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Constants.
"""

GENERIC_ERROR_EXIT_CODE = 1
COMMAND_LINE_ERROR_EXIT_CODE = 2
VERBOSE_MODE_DIVIDER_SYMBOL_COUNT = 48

CONTROL_INTRODUCER = '\\'

CONTROL_CHARACTER_FROM_LETTER = {
    'a': '\a',
    'b': '\b',
    'f': '\f',
    'n': '\n',
    'r': '\r',
    't': '\t',
    'v': '\v',
    '\\': '\\',
}

END_CASE_CHANGE_LETTER = 'E'
NAMED_BACKREFERENCE_LETTER = 'g'
HEX_ESCAPE_LETTER = 'x'

HEX_PAIR_LENGTH = 2
HEX_BRACE_LENGTHS = (2, 4, 6)
HEX_BRACE_OPENING = '{'
HEX_BRACE_CLOSING = '}'
PLANE_SIZE = 0x10000

UNRESOLVED_CAPTURE_GROUP_NUMBER = -1
