"""
Reads a contiguous run of lines from a text file.

Lines are read from a starting position (start, a line number, or end),
forward or backward, optionally up to a bounding position. The file is
seeked to the starting byte, so a tail or a window deep in a large file does
not require reading every line into memory.

Typical usage example:

from line_opener import open_file
last_lines = open_file("server.log", "end", "backward", "990")
"""

from .src.errors import FileError, InvalidDirectionError, LineOpenerError, MaxLinePositionError
from .src.opener import Opener, OpenerBuilder
from .src.position import Direction, Position
from .src.reader import open_file, read_lines

__version__ = "0.1.0"

__all__ = [
    "open_file",
    "read_lines",
    "Opener",
    "OpenerBuilder",
    "Position",
    "Direction",
    "LineOpenerError",
    "FileError",
    "InvalidDirectionError",
    "MaxLinePositionError",
]
