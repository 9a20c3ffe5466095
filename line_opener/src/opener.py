"""
Opener configuration object.

Bundles the arguments of open_file so a request can be assembled in one
place (directly, or through OpenerBuilder's fluent setters) and run later.
"""

from dataclasses import dataclass, field
from typing import Any, List, Optional

from .constants import DEFAULT_CHUNK_SIZE, DEFAULT_ENCODING
from .position import Direction, Position
from .reader import LineExtraction, open_file, read_lines


@dataclass
class Opener:
    """A resolved read request for a single file."""
    path: str
    position: Position = field(default_factory=Position.start)
    direction: Direction = Direction.FORWARD
    max_position: Optional[Position] = None
    encoding: str = DEFAULT_ENCODING
    chunk_size: int = DEFAULT_CHUNK_SIZE

    def __post_init__(self):
        """Canonicalize raw position/direction input."""
        self.position = Position.parse(self.position)
        self.direction = Direction.parse(self.direction)
        if self.max_position is not None:
            self.max_position = Position.parse(self.max_position)

    def open(self) -> List[str]:
        """Read the configured range; see open_file."""
        return open_file(
            self.path,
            self.position,
            self.direction,
            self.max_position,
            encoding=self.encoding,
            chunk_size=self.chunk_size
        )

    def extract(self) -> LineExtraction:
        """Read the configured range, keeping line numbers; see read_lines."""
        return read_lines(
            self.path,
            self.position,
            self.direction,
            self.max_position,
            encoding=self.encoding,
            chunk_size=self.chunk_size
        )


class OpenerBuilder:
    """
    Fluent construction of an Opener.

    Typical usage example:

        lines = (
            OpenerBuilder()
            .path("server.log")
            .position("end")
            .direction("backward")
            .max_position("100")
            .build()
            .open()
        )
    """

    def __init__(self):
        self._path: Optional[str] = None
        self._options = {}

    def path(self, value: str) -> 'OpenerBuilder':
        self._path = str(value)
        return self

    def position(self, value: Any) -> 'OpenerBuilder':
        self._options['position'] = Position.parse(value)
        return self

    def direction(self, value: Any) -> 'OpenerBuilder':
        self._options['direction'] = Direction.parse(value)
        return self

    def max_position(self, value: Any) -> 'OpenerBuilder':
        self._options['max_position'] = Position.parse(value) if value is not None else None
        return self

    def encoding(self, value: str) -> 'OpenerBuilder':
        self._options['encoding'] = value
        return self

    def chunk_size(self, value: int) -> 'OpenerBuilder':
        self._options['chunk_size'] = int(value)
        return self

    def build(self) -> Opener:
        """
        Create the Opener.

        Raises:
            ValueError: If path was never set
        """
        if self._path is None:
            raise ValueError("`path` must be initialized")
        return Opener(path=self._path, **self._options)
