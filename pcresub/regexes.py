"""
# pcresub: regexes.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Regex collaborator backed by the standard `re` module.
"""

import re
from typing import Callable, Optional

from pcresub.bases import Regex
from pcresub.constants import UNRESOLVED_CAPTURE_GROUP_NUMBER
from pcresub.core import build_replacement_text
from pcresub.exceptions import InvalidRegexException


class PythonRegex(Regex):
    """
    A regex compiled with Python's `re`, substituting with PCRE replacement syntax.

    Compilation errors are not raised on construction;
    instead the regex reports itself invalid and remembers the error message,
    which is raised as `InvalidRegexException` by `expand` and `substitute`.
    """
    _pattern: str
    _flags: int
    _compiled_pattern: Optional[re.Pattern]
    _error_message: Optional[str]

    def __init__(self, pattern: str, flags: int = 0):
        self._pattern = pattern
        self._flags = flags

        try:
            self._compiled_pattern = re.compile(pattern, flags)
            self._error_message = None
        except re.error as regex_error:
            self._compiled_pattern = None
            self._error_message = f'invalid regex `{pattern}`: {regex_error}'

    @property
    def pattern(self) -> str:
        return self._pattern

    @property
    def flags(self) -> int:
        return self._flags

    @property
    def error_message(self) -> Optional[str]:
        return self._error_message

    @property
    def is_valid(self) -> bool:
        return self._compiled_pattern is not None

    def get_capture_group_number(self, name: str) -> int:
        if self._compiled_pattern is None:
            return UNRESOLVED_CAPTURE_GROUP_NUMBER

        return self._compiled_pattern.groupindex.get(name, UNRESOLVED_CAPTURE_GROUP_NUMBER)

    @staticmethod
    def compute_capture_spans(match: re.Match) -> list[tuple[int, int]]:
        return [match.span(group_number) for group_number in range(match.re.groups + 1)]

    def expand(self, match: re.Match, replacement_pattern: str) -> str:
        """
        Build the replacement text for one match.
        """
        result = build_replacement_text(
            self,
            match.string,
            PythonRegex.compute_capture_spans(match),
            replacement_pattern,
        )
        if not result.success:
            raise InvalidRegexException(self._error_message)

        return result.text

    def build_substitute_function(self, replacement_pattern: str) -> Callable[[re.Match], str]:
        def substitute_function(match: re.Match) -> str:
            return self.expand(match, replacement_pattern)

        return substitute_function

    def substitute_with_count(self, string: str, replacement_pattern: str, count: int = 0) -> tuple[str, int]:
        """
        Replace non-overlapping matches, returning the new string and the number of replacements made.

        If `count` is positive, at most `count` matches are replaced.
        """
        if self._compiled_pattern is None:
            raise InvalidRegexException(self._error_message)

        return self._compiled_pattern.subn(
            repl=self.build_substitute_function(replacement_pattern),
            string=string,
            count=max(count, 0),
        )

    def substitute(self, string: str, replacement_pattern: str, count: int = 0) -> str:
        substituted_string, _ = self.substitute_with_count(string, replacement_pattern, count)
        return substituted_string
