class TerminalError(Exception):
    """Base exception for terminal integrations."""


class TerminalIOError(TerminalError):
    """Raised when switching input modes, drawing, or clearing the terminal fails."""
