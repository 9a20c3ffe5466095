"""
Error types raised by line-opener.

Every failure of the core is one of three kinds, all derived from
LineOpenerError so callers can catch them together.
"""

from typing import Union


class LineOpenerError(Exception):
    """Base class for all line-opener failures."""
    pass


class FileError(LineOpenerError):
    """Raised when the target file cannot be opened, read or decoded."""

    def __init__(self, path: str, cause: Union[OSError, UnicodeDecodeError, LookupError]):
        self.path = path
        self.cause = cause
        super().__init__(f"File error: {cause}")


class InvalidDirectionError(LineOpenerError):
    """Raised when the direction cannot be taken from the starting position."""

    def __init__(self, position: str, direction: str):
        self.position = position
        self.direction = direction
        super().__init__(f'Cannot go "{direction}" from the "{position}" position.')


class MaxLinePositionError(LineOpenerError):
    """Raised when the bound lies behind the starting position."""

    def __init__(self, comparison: str, direction: str):
        self.comparison = comparison
        self.direction = direction
        super().__init__(
            f'Cannot have a max line position "{comparison}" than the current '
            f'line position when the direction is "{direction}".'
        )
