"""
# pcresub: bases.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Base classes for the regex collaborators of the replacement text builder.
"""

import abc


class Regex(abc.ABC):
    """
    Base class for a compiled regex as seen by the replacement text builder.

    The builder never compiles or executes a regex itself.
    It only needs to know
    - whether the compiled regex is usable at all (`is_valid`), and
    - the number of a named capture group (`get_capture_group_number(name)`),
    where an unknown name resolves to `UNRESOLVED_CAPTURE_GROUP_NUMBER` (-1).
    """

    @property
    @abc.abstractmethod
    def is_valid(self) -> bool:
        raise NotImplementedError

    @abc.abstractmethod
    def get_capture_group_number(self, name: str) -> int:
        """
        Resolve a capture group name to its number, or -1 if there is no such group.
        """
        raise NotImplementedError
