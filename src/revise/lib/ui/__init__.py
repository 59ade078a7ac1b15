"""UI utilities for terminal output.

- TTY detection for adaptive output formatting
- ANSI color support with graceful degradation
"""

from revise.lib.ui.colors import ANSIColors, colorize
from revise.lib.ui.terminal import is_tty

__all__ = [
    "ANSIColors",
    "colorize",
    "is_tty",
]
