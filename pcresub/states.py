"""
# pcresub: states.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Parse states of the replacement pattern scanner.

Exactly one state is active at any scan position.
Every state other than `LiteralState` remembers `invalid_so_far`,
the raw characters consumed since the introducing backslash,
so that an aborted or unterminated control can be emitted verbatim.
"""

import enum
from typing import NamedTuple, Union


class Bracket(enum.Enum):
    BRACE = ('{', '}')
    ANGLE = ('<', '>')

    @property
    def opening(self) -> str:
        return self.value[0]

    @property
    def closing(self) -> str:
        return self.value[1]

    @staticmethod
    def from_opening(character: str) -> 'Bracket':
        for bracket in Bracket:
            if bracket.opening == character:
                return bracket

        raise ValueError(f'error: `{character}` is not an opening bracket')


class LiteralState(NamedTuple):
    pass


class ControlStartState(NamedTuple):
    invalid_so_far: str


class BackreferenceStartState(NamedTuple):
    invalid_so_far: str


class NamedBackreferenceState(NamedTuple):
    invalid_so_far: str
    bracket: Bracket
    name: str


class HexPairState(NamedTuple):
    invalid_so_far: str
    digits: str


class HexBraceState(NamedTuple):
    invalid_so_far: str
    digits: str


ParseState = Union[
    LiteralState,
    ControlStartState,
    BackreferenceStartState,
    NamedBackreferenceState,
    HexPairState,
    HexBraceState,
]
