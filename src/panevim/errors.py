"""panevim exceptions.

PUBLIC API:
  - PanevimError: Base exception for all panevim failures
  - MultiplexerSessionError: No tmux session detected
  - MissingToolError: A required binary is not installed
  - MultiplexerError: A tmux command reported an error
  - ParseError: Malformed pane locator string
  - LockError: Session lock file cannot be created
"""


class PanevimError(Exception):
    """Base exception for all panevim failures."""

    pass


class MultiplexerSessionError(PanevimError):
    """Raised when panevim is not running inside a tmux session."""

    pass


class MissingToolError(PanevimError):
    """Raised when the tmux or editor binary cannot be found."""

    pass


class MultiplexerError(PanevimError):
    """Raised when a tmux command fails."""

    pass


class ParseError(PanevimError, ValueError):
    """Raised when a pane locator string is malformed."""

    pass


class LockError(PanevimError):
    """Raised when the session lock file cannot be created."""

    pass
