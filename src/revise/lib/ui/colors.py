"""ANSI color utilities for terminal output.

Provides color constants and helper functions for colorized diagnostic
reports with graceful degradation in non-TTY environments.
"""

from revise.lib.ui.terminal import is_tty


class ANSIColors:
    """ANSI escape codes used in reports.

    Attributes:
        RED: Bright red (errors).
        YELLOW: Bright yellow (warnings).
        CYAN: Bright cyan (help and source gutters).
        GREEN: Bright green (success summaries).
        BOLD: Bold text (headlines).
        RESET: Restore the default terminal style.
    """

    RED = "\033[91m"
    YELLOW = "\033[93m"
    CYAN = "\033[96m"
    GREEN = "\033[92m"
    BOLD = "\033[1m"
    RESET = "\033[0m"


def colorize(text: str, color: str, force_tty: bool | None = None) -> str:
    """Apply ANSI codes to text if in TTY mode.

    Args:
        text: Text to colorize.
        color: ANSI code(s) to apply (e.g., ANSIColors.RED + ANSIColors.BOLD).
        force_tty: Override TTY detection. None uses auto-detection on stdout.

    Returns:
        Colorized text if in TTY mode, plain text otherwise.
    """
    use_colors = force_tty if force_tty is not None else is_tty()
    if not use_colors or not text:
        return text
    return f"{color}{text}{ANSIColors.RESET}"
