"""Session registry — which pane hosts the editor for each session name.

Each session name maps to two stored values:
  PANE: the PaneLocator string reported when the editor pane was created.
  DIR:  the working directory the editor was launched in.

Entries are never deleted. A locator whose pane has since been closed is
detected lazily by is_live() against the live pane list and simply
overwritten by the next registration.

Key classes: SessionRegistry, LastSessionPointer.
"""

from __future__ import annotations

import logging
import os

from .errors import ParseError
from .multiplexer import MultiplexerBackend, PaneLocator
from .store import KeyValueStore

logger = logging.getLogger(__name__)

PANE_KIND = "pane"
DIR_KIND = "dir"
LAST_KIND = "last"


class SessionRegistry:
    """Session name → pane locator / launch directory bindings."""

    def __init__(self, store: KeyValueStore, mux: MultiplexerBackend) -> None:
        self.store = store
        self.mux = mux

    def lookup(self, name: str) -> PaneLocator | None:
        """Return the registered locator, or None if absent or unreadable."""
        raw = self.store.get(PANE_KIND, name)
        if not raw:
            return None
        try:
            return PaneLocator.parse(raw)
        except ParseError as e:
            logger.warning("Ignoring stored locator for %s: %s", name, e)
            return None

    def register(self, name: str, locator: PaneLocator, working_dir: str) -> None:
        """Bind `name` to a freshly created pane, replacing any stale entry."""
        self.store.set(PANE_KIND, name, locator.format())
        self.store.set(DIR_KIND, name, working_dir)
        logger.info("Registered session %s -> %s (cwd=%s)", name, locator, working_dir)

    def is_live(self, name: str) -> bool:
        """True only if a locator is registered and its pane still exists."""
        locator = self.lookup(name)
        if locator is None:
            return False
        if not self.mux.has_pane(locator.pane_id):
            logger.info("Session %s points at closed pane %s", name, locator.pane_id)
            return False
        return True

    def last_used_working_dir(self, name: str, invoking_dir: str) -> str:
        """Directory the session's editor resolves relative paths against.

        Falls back to `invoking_dir` for this call only when nothing usable is
        stored; the stored value is never rewritten here.
        """
        stored = self.store.get(DIR_KIND, name)
        if stored and os.path.isdir(stored):
            return stored
        if stored:
            logger.debug("Stored directory %s for %s is gone, using %s", stored, name, invoking_dir)
        return invoking_dir

    def sessions(self) -> dict[str, str]:
        """All registered session names with their raw locator strings."""
        return self.store.items(PANE_KIND)


class LastSessionPointer:
    """Single slot holding the most recently used session name."""

    def __init__(self, store: KeyValueStore) -> None:
        self.store = store

    def read(self) -> str:
        return self.store.get(LAST_KIND)

    def write(self, name: str) -> None:
        self.store.set(LAST_KIND, "", name)
