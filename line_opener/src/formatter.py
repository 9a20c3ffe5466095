"""Display formatting for extracted lines."""

from typing import List

from .reader import LineExtraction


def format_lines(extraction: LineExtraction, numbered: bool = False, separator: str = ": ") -> List[str]:
    """
    Render an extraction for display.

    Args:
        extraction: Result of read_lines
        numbered: Prefix every line with its 1-indexed line number
        separator: Text placed between the number and the line

    Returns:
        List[str]: One display string per extracted line

    Example:
        >>> format_lines(LineExtraction(["a", "b"], start_line=9), numbered=True)
        [' 9: a', '10: b']
    """
    if not numbered:
        return list(extraction.lines)

    numbers = extraction.line_numbers()
    width = len(str(max(numbers))) if numbers else 0
    return [
        f"{number:>{width}}{separator}{line}"
        for number, line in zip(numbers, extraction.lines)
    ]
