"""
Position and direction value types.

A Position says where extraction starts (or stops), a Direction says which
way the cursor moves. Both can be built from raw user input; the conversions
never fail and fall back to START / FORWARD for anything they do not
recognise.

Line Number Convention:
    Position.line is EXTERNAL (1-indexed) - the line number as shown in editors.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from .constants import BACKWARD_TOKEN, END_TOKEN


class PositionKind(Enum):
    """Variants of a Position."""
    START = "start"
    MIDDLE = "middle"
    END = "end"


@dataclass(frozen=True)
class Position:
    """Symbolic or numeric line locator."""
    kind: PositionKind = PositionKind.START
    line: Optional[int] = None  # EXTERNAL (1-indexed), MIDDLE only

    @classmethod
    def start(cls) -> 'Position':
        return cls(PositionKind.START)

    @classmethod
    def middle(cls, line: int) -> 'Position':
        return cls(PositionKind.MIDDLE, line)

    @classmethod
    def end(cls) -> 'Position':
        return cls(PositionKind.END)

    @classmethod
    def parse(cls, value: Any) -> 'Position':
        """
        Convert raw input into a Position.

        Args:
            value: None, a Position, a non-negative int, a digit string or "end"

        Returns:
            Position: Canonical position; START for anything unrecognised

        Example:
            >>> Position.parse("12")
            Position(kind=<PositionKind.MIDDLE: 'middle'>, line=12)
            >>> Position.parse("end").is_end
            True
            >>> Position.parse("-3").is_start
            True
        """
        if isinstance(value, Position):
            return value
        if isinstance(value, int) and not isinstance(value, bool):
            return cls.middle(value) if value >= 0 else cls.start()
        if isinstance(value, str):
            digits = value[1:] if value.startswith("+") else value
            if digits.isascii() and digits.isdigit():
                return cls.middle(int(digits))
            if value == END_TOKEN:
                return cls.end()
        return cls.start()

    @property
    def is_start(self) -> bool:
        return self.kind is PositionKind.START

    @property
    def is_middle(self) -> bool:
        return self.kind is PositionKind.MIDDLE

    @property
    def is_end(self) -> bool:
        return self.kind is PositionKind.END

    def line_number(self, total_lines: int, bound: bool = False) -> int:
        """
        Resolve this position to a 1-indexed line number.

        Args:
            total_lines: Number of lines in the target file
            bound: True when the position is used as a max_position; START
                then resolves to 0 so that no line lies before it

        Returns:
            int: Resolved line number
        """
        if self.is_middle:
            return self.line
        if self.is_end:
            return total_lines
        return 0 if bound else 1

    def __str__(self) -> str:
        if self.is_middle:
            return str(self.line)
        return self.kind.value


class Direction(Enum):
    """Order of traversal."""
    FORWARD = "forward"
    BACKWARD = "backward"

    @classmethod
    def parse(cls, value: Any) -> 'Direction':
        """Convert raw input into a Direction; FORWARD unless it reads "backward"."""
        if isinstance(value, Direction):
            return value
        if value == BACKWARD_TOKEN:
            return cls.BACKWARD
        return cls.FORWARD

    @property
    def step(self) -> int:
        return 1 if self is Direction.FORWARD else -1

    def has_passed(self, cursor: int, bound: int) -> bool:
        """True once the cursor has moved beyond the bound in this direction."""
        if self is Direction.FORWARD:
            return cursor > bound
        return cursor < bound
