"""Terminal detection utilities."""

import sys
from typing import TextIO


def is_tty(stream: TextIO | None = None) -> bool:
    """Check if a stream is connected to a terminal.

    Used to decide whether reports are colorized or emitted as plain text
    suitable for CI logs and redirects.

    Args:
        stream: Stream to check (defaults to stdout)

    Returns:
        True if the stream is an interactive terminal, False otherwise.
    """
    target = sys.stdout if stream is None else stream
    isatty = getattr(target, "isatty", None)
    return bool(isatty and isatty())
