"""
# pcresub: exceptions.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Exception classes.
"""


class InvalidRegexException(Exception):
    _error_message: str

    def __init__(self, error_message: str):
        super().__init__(error_message)
        self._error_message = error_message

    @property
    def error_message(self) -> str:
        return self._error_message
