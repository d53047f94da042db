import os
import sys

RESET = "\033[0m"
CLEAR_HOME = "\033[2J\033[H"


def fg_escape(r: int, g: int, b: int) -> str:
    """24-bit foreground colour escape sequence."""
    return f"\033[38;2;{r};{g};{b}m"


def get_terminal_size() -> tuple[int, int]:
    """Return (columns, rows) of the terminal, or (80, 24) if not a tty."""
    if not sys.stdout.isatty():
        return (80, 24)
    size = os.get_terminal_size()
    return (size.columns, size.lines)
