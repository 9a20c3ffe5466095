"""Core functionality modules."""

from .cli import cli, main
from .config import Config, ConfigManager, ReadingConfig, OutputConfig, LoggingConfig
from .errors import FileError, InvalidDirectionError, LineOpenerError, MaxLinePositionError
from .formatter import format_lines
from .offsets import LineScan, compute_offset, count_lines, scan_lines
from .opener import Opener, OpenerBuilder
from .position import Direction, Position, PositionKind
from .reader import BackwardLineReader, LineExtraction, open_file, read_lines
from .validation import validate_request

__all__ = [
    # CLI
    "cli",
    "main",
    # Config
    "Config",
    "ConfigManager",
    "ReadingConfig",
    "OutputConfig",
    "LoggingConfig",
    # Errors
    "LineOpenerError",
    "FileError",
    "InvalidDirectionError",
    "MaxLinePositionError",
    # Formatting
    "format_lines",
    # Offsets
    "LineScan",
    "scan_lines",
    "compute_offset",
    "count_lines",
    # Opener
    "Opener",
    "OpenerBuilder",
    # Position / Direction
    "Position",
    "PositionKind",
    "Direction",
    # Reader
    "BackwardLineReader",
    "LineExtraction",
    "open_file",
    "read_lines",
    # Validation
    "validate_request",
]
