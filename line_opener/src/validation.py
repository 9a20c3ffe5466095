"""
Request validation.

Rejects position/direction/bound combinations that can never produce a
sensible range. Runs after the line count is known and before any seek.
"""

from typing import Optional, Tuple

from .constants import INVALID_DIRECTION_WORDS
from .errors import InvalidDirectionError, MaxLinePositionError
from .position import Direction, Position


def validate_request(
    position: Position,
    direction: Direction,
    max_position: Optional[Position],
    total_lines: int
) -> Tuple[int, Optional[int]]:
    """
    Validate a request and resolve its line numbers.

    Args:
        position: Starting position
        direction: Direction of travel
        max_position: Optional bound, must lie in the direction of travel
        total_lines: Number of lines in the target file

    Returns:
        Tuple[int, Optional[int]]: Starting line and bound line (None when unbounded)

    Raises:
        InvalidDirectionError: Backward from START or forward from END
        MaxLinePositionError: Bound on the wrong side of the starting line
    """
    start_line = position.line_number(total_lines)
    bound_line = max_position.line_number(total_lines, bound=True) if max_position is not None else None

    if direction is Direction.BACKWARD and position.is_start:
        raise InvalidDirectionError(*INVALID_DIRECTION_WORDS['backward_from_start'])
    if direction is Direction.FORWARD and position.is_end:
        raise InvalidDirectionError(*INVALID_DIRECTION_WORDS['forward_from_end'])

    if bound_line is not None:
        if direction is Direction.FORWARD and bound_line < start_line:
            raise MaxLinePositionError("less", direction.value)
        if direction is Direction.BACKWARD and bound_line > start_line:
            raise MaxLinePositionError("greater", direction.value)

    return start_line, bound_line
