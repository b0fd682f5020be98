"""Building blocks for a user-space TCP stack: sequence numbers, parsing, checksums and errors."""

__version__ = "0.1.0"
__all__ = ["errors", "parser", "util", "wrapping"]