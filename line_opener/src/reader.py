"""
Line extraction.

Opens a file, resolves where the requested range starts, seeks there and
streams lines forward or backward until the cursor leaves the file or passes
the bound. The whole range is read before anything is returned.

Line Number Convention:
    The cursor is EXTERNAL (1-indexed); lines outside [1, total_lines]
    end the read loop.
"""

import codecs
import os
from dataclasses import dataclass, field
from typing import Any, BinaryIO, Iterator, List, Optional

from .constants import DEFAULT_CHUNK_SIZE, DEFAULT_ENCODING, NEWLINE
from .errors import FileError
from .offsets import scan_lines
from .position import Direction, Position
from .validation import validate_request
from ..line_numbers import seek_line, validate_external
from ..utils.logger_setup import get_logger

logger = get_logger(__name__)


class BackwardLineReader:
    """
    Reads lines in descending order, starting from the handle's position.

    The handle is read in chunks toward byte 0. Each readline() returns the
    line that ends right before the previous one, newline included, and
    b'' once the start of the file has been reached.
    """

    def __init__(self, handle: BinaryIO, chunk_size: int = DEFAULT_CHUNK_SIZE):
        self._handle = handle
        self._chunk_size = max(1, chunk_size)
        self._position = handle.tell()
        self._buffer = b''

    def _fill(self) -> int:
        """Prepend the chunk preceding the buffer; returns the bytes added."""
        size = min(self._chunk_size, self._position)
        if size == 0:
            return 0
        self._position -= size
        self._handle.seek(self._position)
        chunk = self._handle.read(size)
        self._buffer = chunk + self._buffer
        return len(chunk)

    def readline(self) -> bytes:
        if not self._buffer:
            self._fill()
        if not self._buffer:
            return b''

        # The buffer's own terminator belongs to the line being read
        end = len(self._buffer)
        if self._buffer.endswith(NEWLINE):
            end -= 1

        start = self._buffer.rfind(NEWLINE, 0, end)
        while start == -1 and self._position > 0:
            added = self._fill()
            # Only the new chunk can hold the previous line's terminator
            start = self._buffer.rfind(NEWLINE, 0, added)

        line = self._buffer[start + 1:]
        self._buffer = self._buffer[:start + 1]
        return line

    def __iter__(self) -> Iterator[bytes]:
        while True:
            line = self.readline()
            if not line:
                return
            yield line


@dataclass
class LineExtraction:
    """Lines read by one call, plus where they came from."""
    lines: List[str] = field(default_factory=list)
    start_line: int = 1  # EXTERNAL (1-indexed) line of lines[0]
    total_lines: int = 0
    direction: Direction = Direction.FORWARD

    def line_numbers(self) -> List[int]:
        """1-indexed line number of every extracted entry."""
        step = self.direction.step
        return [self.start_line + i * step for i in range(len(self.lines))]

    def __iter__(self) -> Iterator[str]:
        return iter(self.lines)

    def __len__(self) -> int:
        return len(self.lines)


def _decode(raw: bytes, encoding: str) -> str:
    if raw.endswith(NEWLINE):
        raw = raw[:-1]
    return raw.decode(encoding)


def read_lines(
    path: str,
    position: Any = None,
    direction: Any = None,
    max_position: Any = None,
    *,
    encoding: str = DEFAULT_ENCODING,
    chunk_size: int = DEFAULT_CHUNK_SIZE
) -> LineExtraction:
    """
    Extract a run of lines from a file.

    Args:
        path: File to read
        position: Where to start; Position or raw form (None, "12", 12, "end")
        direction: Direction or raw form (None, "backward")
        max_position: Optional bound; Position or raw form
        encoding: Text encoding of the file
        chunk_size: Bytes read per step when moving backward

    Returns:
        LineExtraction: Newline-stripped lines in reading order

    Raises:
        FileError: If the file cannot be opened, read or decoded
        InvalidDirectionError: Backward from START or forward from END
        MaxLinePositionError: Bound on the wrong side of the start
    """
    position = Position.parse(position)
    direction = Direction.parse(direction)
    if max_position is not None:
        max_position = Position.parse(max_position)

    try:
        codecs.lookup(encoding)
    except LookupError as e:
        raise FileError(path, e) from e

    backward = direction is Direction.BACKWARD
    target_line = seek_line(position.line, backward) if position.is_middle else None

    try:
        with open(path, 'rb') as handle:
            scan = scan_lines(handle, target_line)
            start_line, bound_line = validate_request(
                position, direction, max_position, scan.total_lines
            )

            if position.is_start:
                handle.seek(0)
            elif position.is_middle:
                handle.seek(scan.offset)
            else:
                handle.seek(0, os.SEEK_END)
            logger.debug(
                f"{path}: start line {start_line}, bound {bound_line}, "
                f"{direction.value} from byte {handle.tell()}"
            )

            source = BackwardLineReader(handle, chunk_size) if backward else handle

            lines = []
            cursor = start_line
            while validate_external(cursor, scan.total_lines):
                if bound_line is not None and direction.has_passed(cursor, bound_line):
                    break
                lines.append(_decode(source.readline(), encoding))
                cursor += direction.step
    except (OSError, UnicodeDecodeError) as e:
        raise FileError(path, e) from e

    logger.debug(f"{path}: extracted {len(lines)} of {scan.total_lines} lines")
    return LineExtraction(
        lines=lines,
        start_line=start_line,
        total_lines=scan.total_lines,
        direction=direction
    )


def open_file(
    path: str,
    position: Any = None,
    direction: Any = None,
    max_position: Any = None,
    *,
    encoding: str = DEFAULT_ENCODING,
    chunk_size: int = DEFAULT_CHUNK_SIZE
) -> List[str]:
    """
    Open a file and read it according to the given position and direction.

    Example:
        >>> open_file("notes.txt", "end", "backward")
        ['up', 'whats', 'there', 'hello']
    """
    return read_lines(
        path,
        position,
        direction,
        max_position,
        encoding=encoding,
        chunk_size=chunk_size
    ).lines
