"""
Byte offset resolution.

Counts the lines of a file and finds the byte at which a given line begins,
in a single linear pass that keeps only a running byte total.
"""

from dataclasses import dataclass
from typing import BinaryIO, Optional

from .errors import FileError
from ..utils.logger_setup import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class LineScan:
    """Result of one pass over a file."""
    total_lines: int
    size: int  # bytes consumed by the pass
    offset: int = 0  # start of the target line, or size when past the end


def scan_lines(handle: BinaryIO, target_line: Optional[int] = None) -> LineScan:
    """
    Count lines and locate the start of target_line in one pass.

    A trailing newline does not open an extra line; a final line without a
    newline still counts.

    Args:
        handle: File opened in binary mode; it is rewound before scanning
        target_line: 1-indexed line to locate, or None to only count

    Returns:
        LineScan: Line total, byte size and the offset of target_line
    """
    handle.seek(0)
    total_lines = 0
    consumed = 0
    offset = None

    for raw in handle:
        total_lines += 1
        if total_lines == target_line:
            offset = consumed
        consumed += len(raw)

    if offset is None:
        offset = consumed if target_line is not None else 0

    logger.debug(f"Scanned {total_lines} lines ({consumed} bytes), target {target_line} at {offset}")
    return LineScan(total_lines=total_lines, size=consumed, offset=offset)


def compute_offset(path: str, line_number: int) -> int:
    """
    Return the byte offset at which a line begins.

    Args:
        path: File to inspect
        line_number: 1-indexed line number

    Returns:
        int: Byte offset of the line; the file size for lines past the end

    Raises:
        ValueError: If line_number is less than 1
        FileError: If the file cannot be opened or read
    """
    if line_number < 1:
        raise ValueError(f"Line number must be >= 1, got {line_number}")

    try:
        with open(path, 'rb') as handle:
            return scan_lines(handle, line_number).offset
    except OSError as e:
        raise FileError(path, e) from e


def count_lines(path: str) -> int:
    """Return the number of lines in a file."""
    try:
        with open(path, 'rb') as handle:
            return scan_lines(handle).total_lines
    except OSError as e:
        raise FileError(path, e) from e
