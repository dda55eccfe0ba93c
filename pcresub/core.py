"""
# pcresub: core.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Core replacement text construction.

A replacement pattern is scanned once, left to right, one character at a time.
Outside of a control, every character is literal text.
A backslash introduces a control, classified by the character that follows it:
````
\\0 to \\9                 numbered backreference (single digit only)
\\g{«name»} \\g<«name»>     named or numbered backreference
\\a \\b \\f \\n \\r \\t \\v \\\\    control characters
\\x«hh» \\x{«hex»}          hexadecimal code point
\\l \\u \\L \\U \\E            case changes
````
A control that is unrecognised, unterminated, or refers to a missing capture group
is emitted verbatim as literal text rather than reported as an error.
"""

from typing import NamedTuple, Optional, Sequence

from pcresub.backreferences import extract_capture_text, resolve_capture_group_number
from pcresub.bases import Regex
from pcresub.cases import CASE_MODE_FROM_LETTER, CaseTransformer
from pcresub.constants import (
    CONTROL_CHARACTER_FROM_LETTER,
    CONTROL_INTRODUCER,
    END_CASE_CHANGE_LETTER,
    HEX_BRACE_CLOSING,
    HEX_BRACE_OPENING,
    HEX_ESCAPE_LETTER,
    HEX_PAIR_LENGTH,
    NAMED_BACKREFERENCE_LETTER,
)
from pcresub.hexadecimal import decode_braced_hex, decode_hex_pair, is_valid_braced_hex
from pcresub.states import (
    BackreferenceStartState,
    Bracket,
    ControlStartState,
    HexBraceState,
    HexPairState,
    LiteralState,
    NamedBackreferenceState,
    ParseState,
)
from pcresub.utilities import is_ascii_digit, is_hex_digit


class ReplacementResult(NamedTuple):
    success: bool
    text: str


class ReplacementTextBuilder:
    """
    Object building the replacement text for a single match.

    All state is reset at the start of `build(...)`,
    so an instance may be reused for consecutive matches but not shared between threads.
    Prefer the function `build_replacement_text(...)`, which uses a fresh instance every call.
    """
    _regex: Optional['Regex']
    _text: str
    _capture_spans: Sequence[tuple[int, int]]
    _case_transformer: 'CaseTransformer'
    _state: 'ParseState'

    def __init__(self):
        self._reset()

    def _reset(self):
        self._regex = None
        self._text = ''
        self._capture_spans = ()
        self._case_transformer = CaseTransformer()
        self._state = LiteralState()

    def build(self, regex: 'Regex', text: str, capture_spans: Sequence[tuple[int, int]],
              replacement_pattern: str) -> 'ReplacementResult':
        self._reset()

        if not regex.is_valid:
            return ReplacementResult(success=False, text='')

        if CONTROL_INTRODUCER not in replacement_pattern:
            return ReplacementResult(success=True, text=replacement_pattern)

        self._regex = regex
        self._text = text
        self._capture_spans = capture_spans

        for character in replacement_pattern:
            self._state = self._advance(self._state, character)

        if not isinstance(self._state, LiteralState):
            self._state = self._emit_invalid(self._state.invalid_so_far)

        return ReplacementResult(success=True, text=self._case_transformer.get_text())

    def _emit(self, segment: str):
        self._case_transformer.append(segment)

    def _emit_invalid(self, invalid_so_far: str) -> 'LiteralState':
        self._emit(invalid_so_far)
        return LiteralState()

    def _emit_capture(self, number: int, invalid_so_far: str) -> 'LiteralState':
        capture_text = extract_capture_text(number, self._capture_spans, self._text)
        if capture_text is None:
            return self._emit_invalid(invalid_so_far)

        self._emit(capture_text)
        return LiteralState()

    def _advance(self, state: 'ParseState', character: str) -> 'ParseState':
        if isinstance(state, LiteralState):
            if character == CONTROL_INTRODUCER:
                return ControlStartState(invalid_so_far=character)

            self._emit(character)
            return state

        invalid_so_far = state.invalid_so_far + character

        if isinstance(state, ControlStartState):
            return self._classify_control(character, invalid_so_far)

        if isinstance(state, BackreferenceStartState):
            return self._open_backreference(character, invalid_so_far)

        if isinstance(state, NamedBackreferenceState):
            return self._continue_backreference(state, character, invalid_so_far)

        if isinstance(state, HexPairState):
            return self._continue_hex_pair(state, character, invalid_so_far)

        if isinstance(state, HexBraceState):
            return self._continue_hex_brace(state, character, invalid_so_far)

        raise TypeError(f'error: unrecognised parse state `{type(state).__name__}`')

    def _classify_control(self, character: str, invalid_so_far: str) -> 'ParseState':
        if is_ascii_digit(character):
            return self._emit_capture(int(character), invalid_so_far)

        if character in CONTROL_CHARACTER_FROM_LETTER:
            self._emit(CONTROL_CHARACTER_FROM_LETTER[character])
            return LiteralState()

        if character == END_CASE_CHANGE_LETTER:
            self._case_transformer.clear_mode()
            return LiteralState()

        if character in CASE_MODE_FROM_LETTER:
            self._case_transformer.request_mode(CASE_MODE_FROM_LETTER[character])
            return LiteralState()

        if character == NAMED_BACKREFERENCE_LETTER:
            return BackreferenceStartState(invalid_so_far=invalid_so_far)

        if character == HEX_ESCAPE_LETTER:
            return HexPairState(invalid_so_far=invalid_so_far, digits='')

        return self._emit_invalid(invalid_so_far)

    def _open_backreference(self, character: str, invalid_so_far: str) -> 'ParseState':
        if character not in (Bracket.BRACE.opening, Bracket.ANGLE.opening):
            return self._emit_invalid(invalid_so_far)

        return NamedBackreferenceState(
            invalid_so_far=invalid_so_far,
            bracket=Bracket.from_opening(character),
            name='',
        )

    def _continue_backreference(self, state: 'NamedBackreferenceState', character: str,
                                invalid_so_far: str) -> 'ParseState':
        if character != state.bracket.closing:
            return state._replace(invalid_so_far=invalid_so_far, name=state.name + character)

        number = resolve_capture_group_number(self._regex, state.name)
        return self._emit_capture(number, invalid_so_far)

    def _continue_hex_pair(self, state: 'HexPairState', character: str, invalid_so_far: str) -> 'ParseState':
        if character == HEX_BRACE_OPENING and state.digits == '':
            return HexBraceState(invalid_so_far=invalid_so_far, digits='')

        if not is_hex_digit(character):
            return self._emit_invalid(invalid_so_far)

        digits = state.digits + character
        if len(digits) < HEX_PAIR_LENGTH:
            return state._replace(invalid_so_far=invalid_so_far, digits=digits)

        self._emit(decode_hex_pair(digits))
        return LiteralState()

    def _continue_hex_brace(self, state: 'HexBraceState', character: str, invalid_so_far: str) -> 'ParseState':
        if character == HEX_BRACE_CLOSING and is_valid_braced_hex(state.digits):
            self._emit(decode_braced_hex(state.digits))
            return LiteralState()

        if not is_hex_digit(character):
            return self._emit_invalid(invalid_so_far)

        return state._replace(invalid_so_far=invalid_so_far, digits=state.digits + character)


def build_replacement_text(regex: 'Regex', text: str, capture_spans: Sequence[tuple[int, int]],
                           replacement_pattern: str) -> 'ReplacementResult':
    """
    Build the text to substitute for one match.

    Returns `ReplacementResult(success=False, text='')` only if `regex` reports itself invalid.
    Malformed controls in `replacement_pattern` are never errors; they are kept as literal text.
    """
    builder = ReplacementTextBuilder()
    return builder.build(regex, text, capture_spans, replacement_pattern)
