"""Application configuration — reads env vars and exposes a singleton.

Loads the tmux binary, editor command, default session name, lock directory
and log level from environment variables (with .env support).
The module-level `config` instance is imported by nearly every other module.

Key class: Config (singleton instantiated as `config`).
"""

import logging
import os
import re
from pathlib import Path

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

# Session names end up inside tmux variable names and lock file names
SESSION_NAME_RE = re.compile(r"^[A-Za-z0-9_.-]+$")

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Config:
    """Application configuration loaded from environment variables."""

    def __init__(self) -> None:
        load_dotenv()

        # Multiplexer and editor binaries
        self.tmux_bin: str = os.getenv("PANEVIM_TMUX") or "tmux"
        self.editor_command: str = os.getenv("PANEVIM_EDITOR") or "vim"

        # Session used when neither -s nor a last-used session is available
        self.default_session: str = os.getenv("PANEVIM_DEFAULT_SESSION", "default")
        if not SESSION_NAME_RE.match(self.default_session):
            logger.warning(
                "PANEVIM_DEFAULT_SESSION=%r is not a valid session name, using 'default'",
                self.default_session,
            )
            self.default_session = "default"

        # Prefix of every tmux environment variable we own
        self.store_prefix: str = "PANEVIM"

        # Advisory lock files guarding session creation
        self.state_dir = Path(
            os.getenv("PANEVIM_STATE_DIR", str(Path.home() / ".panevim"))
        ).expanduser()

        self.log_level: str = os.getenv("PANEVIM_LOG_LEVEL", "WARNING").upper()
        if self.log_level not in _LOG_LEVELS:
            logger.warning(
                "PANEVIM_LOG_LEVEL=%r is not one of %s, using WARNING",
                self.log_level,
                ", ".join(_LOG_LEVELS),
            )
            self.log_level = "WARNING"

        logger.debug(
            "Config initialized: tmux=%s, editor=%s, default_session=%s, state_dir=%s",
            self.tmux_bin,
            self.editor_command,
            self.default_session,
            self.state_dir,
        )

    @property
    def inside_multiplexer(self) -> bool:
        """True when the current process runs inside a tmux session."""
        return bool(os.environ.get("TMUX"))


config = Config()
