"""
# pcresub: cases.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Case transformation of emitted text segments.
"""

import enum


class CaseMode(enum.Enum):
    NONE = enum.auto()
    LOWER_NEXT = enum.auto()
    UPPER_NEXT = enum.auto()
    LOWER = enum.auto()
    UPPER = enum.auto()


CASE_MODE_FROM_LETTER = {
    'l': CaseMode.LOWER_NEXT,
    'L': CaseMode.LOWER,
    'u': CaseMode.UPPER_NEXT,
    'U': CaseMode.UPPER,
}


class CaseTransformer:
    """
    Object applying case directives to text segments and accumulating the result.

    A segment is one atomic unit of emitted text:
    a literal character, a decoded escape, or a whole backreference substitution.
    `\\l` and `\\u` therefore affect only the first character of the next non-empty segment,
    not the first character of the remaining output.

    Case directives cannot be nested or overridden.
    Once a mode is active, further requests are ignored until `clear_mode()` (`\\E`),
    so in `\\U...\\L...\\E` the `\\L` is dropped and upper-casing continues up to `\\E`.
    """
    _mode: 'CaseMode'
    _segments: list[str]

    def __init__(self):
        self._mode = CaseMode.NONE
        self._segments = []

    def request_mode(self, mode: 'CaseMode'):
        if self._mode is CaseMode.NONE:
            self._mode = mode

    def clear_mode(self):
        self._mode = CaseMode.NONE

    def transform(self, segment: str) -> str:
        if segment == '':
            return segment

        mode = self._mode

        if mode is CaseMode.LOWER_NEXT:
            self._mode = CaseMode.NONE
            return segment[0].lower() + segment[1:]

        if mode is CaseMode.UPPER_NEXT:
            self._mode = CaseMode.NONE
            return segment[0].upper() + segment[1:]

        if mode is CaseMode.LOWER:
            return segment.lower()

        if mode is CaseMode.UPPER:
            return segment.upper()

        return segment

    def append(self, segment: str):
        self._segments.append(self.transform(segment))

    def get_text(self) -> str:
        """
        Join the transformed segments.

        Adjacent surrogate halves, as produced by `\\x{D83D}\\x{DE00}`, are combined into one code point
        the way UTF-16 text would combine them. Lone halves are kept as they are.
        """
        text = ''.join(self._segments)
        return text.encode('utf-16-le', 'surrogatepass').decode('utf-16-le', 'surrogatepass')
