"""
Line number handling utilities.

This module provides type hints and range checks to prevent off-by-one
errors when working with line numbers.

Convention:
- Lines are EXTERNAL (1-indexed), as shown in editors
- 0 is reserved for "before the first line" (a START bound)
- total_lines + 1 is "after the last line" (its offset is end-of-file)
"""

from typing import NewType

ExternalLineNumber = NewType('ExternalLineNumber', int)  # 1-indexed


def validate_external(line_number: int, total_lines: int) -> bool:
    """
    Validate that external line number is within valid range.

    Args:
        line_number (int): 1-indexed line number to validate
        total_lines (int): Total number of lines in file

    Returns:
        bool: True if valid, False otherwise

    Example:
        >>> validate_external(1, 100)
        True
        >>> validate_external(0, 100)
        False
        >>> validate_external(101, 100)
        False
    """
    return 1 <= line_number <= total_lines


def seek_line(line_number: int, backward: bool) -> int:
    """
    Line whose starting offset the file handle is positioned at.

    Reading backward consumes the bytes *before* the seek point, so to make
    line N the first one read the handle must sit at the start of line N + 1.

    Args:
        line_number (int): 1-indexed line that should be read first
        backward (bool): Whether lines are read toward the start of the file

    Returns:
        int: 1-indexed line to seek to

    Example:
        >>> seek_line(3, backward=False)
        3
        >>> seek_line(3, backward=True)
        4
    """
    return line_number + 1 if backward else line_number
