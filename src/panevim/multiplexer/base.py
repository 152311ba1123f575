"""Abstract base class for terminal multiplexer backends.

Defines the MultiplexerBackend ABC plus the PaneLocator and SplitAction value
types. The ABC provides the narrow interface panevim needs from a multiplexer:
  - Pane lifecycle: open_editor_pane, list_pane_ids, select_pane
  - Keystroke injection: send_keys
  - Per-session string storage: get_env, set_env, list_env

PaneLocator is the structured form of the `session:window.pane$pane_id`
string the backend reports when it creates a pane.

Key class: MultiplexerBackend (ABC), PaneLocator (dataclass).
"""

from __future__ import annotations

import enum
import logging
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass

from ..errors import ParseError

logger = logging.getLogger(__name__)

# session:window.pane$pane_id, e.g. "work:3.0$%17"
_LOCATOR_RE = re.compile(
    r"^(?P<session>[^:$]+):(?P<window>\d+)\.(?P<pane>\d+)\$(?P<pane_id>%\d+)$"
)


class SplitAction(enum.Enum):
    """Where a newly spawned editor pane is placed."""

    WINDOW = "window"
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"
    TAB = "tab"


@dataclass(frozen=True)
class PaneLocator:
    """Address of a multiplexer pane plus its stable pane id."""

    session: str
    window: int
    pane: int
    pane_id: str    # tmux "%N", used only for liveness checks; keys go to `target`

    @classmethod
    def parse(cls, text: str) -> PaneLocator:
        """Parse a `session:window.pane$pane_id` string.

        Raises:
            ParseError: If the string does not have the locator shape.
        """
        match = _LOCATOR_RE.match(text.strip())
        if not match:
            raise ParseError(f"Malformed pane locator: {text!r}")
        return cls(
            session=match.group("session"),
            window=int(match.group("window")),
            pane=int(match.group("pane")),
            pane_id=match.group("pane_id"),
        )

    @property
    def target(self) -> str:
        """The `session:window.pane` target used for send-keys and select-pane.

        Positional: renumbering windows or closing a sibling pane can make
        it point at a different pane than the one `pane_id` names.
        """
        return f"{self.session}:{self.window}.{self.pane}"

    def format(self) -> str:
        return f"{self.target}${self.pane_id}"

    def __str__(self) -> str:
        return self.format()


class MultiplexerBackend(ABC):
    """Abstract base for terminal multiplexer backends."""

    # Format string that makes the backend print a PaneLocator
    locator_format = "#{session_name}:#{window_index}.#{pane_index}$#{pane_id}"

    @abstractmethod
    def open_editor_pane(
        self, split: SplitAction, command: list[str], work_dir: str,
    ) -> PaneLocator:
        """Create a window or split running `command` and return its locator.

        Args:
            split: Placement of the new pane.
            command: Editor argv, including the initial file list.
            work_dir: Working directory of the new pane.
        """

    @abstractmethod
    def list_pane_ids(self) -> set[str]:
        """Return the ids of every pane currently alive on the server."""

    def has_pane(self, pane_id: str) -> bool:
        """Check whether a pane id is still alive.

        Default implementation filters list_pane_ids().
        """
        alive = pane_id in self.list_pane_ids()
        if not alive:
            logger.debug("Pane not found: %s", pane_id)
        return alive

    @abstractmethod
    def send_keys(self, target: str, keys: list[str]) -> None:
        """Send a sequence of key tokens to a pane.

        Args:
            target: `session:window.pane` target.
            keys: Key tokens, each interpreted by the multiplexer as one key
                  name (e.g. "a", "Space", "Escape", "Enter").
        """

    @abstractmethod
    def select_pane(self, target: str) -> None:
        """Focus the pane (and its window)."""

    @abstractmethod
    def get_env(self, name: str) -> str:
        """Read a session environment variable; empty string when unset."""

    @abstractmethod
    def set_env(self, name: str, value: str) -> None:
        """Write a session environment variable."""

    @abstractmethod
    def list_env(self) -> dict[str, str]:
        """Return every variable set in the session environment."""
