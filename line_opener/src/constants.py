"""
Shared constants for line-opener.

Centralizes the tokens and defaults used across multiple modules.
"""

# Raw input tokens recognised by Position.parse / Direction.parse
END_TOKEN = 'end'
START_TOKEN = 'start'
BACKWARD_TOKEN = 'backward'
FORWARD_TOKEN = 'forward'

# Defaults used by open_file, Opener and the config layer
DEFAULT_ENCODING = 'utf-8'
DEFAULT_CHUNK_SIZE = 8192  # bytes read per step by the backward reader

# Byte that terminates every line
NEWLINE = b'\n'

# Words used in error messages, keyed by the failing combination
INVALID_DIRECTION_WORDS = {
    'backward_from_start': ('start', 'backwards'),
    'forward_from_end': ('end', 'forwards'),
}
