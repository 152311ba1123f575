"""Namespaced string store on top of the tmux session environment.

Every key is `<prefix>_<KIND>_<entity>` (or `<prefix>_<KIND>` for
single-slot values), so panevim's entries never collide with other
variables and each tmux session keeps its own set.

Key class: KeyValueStore.
"""

from __future__ import annotations

import logging

from .multiplexer import MultiplexerBackend

logger = logging.getLogger(__name__)


class KeyValueStore:
    """Small string values persisted in the multiplexer's environment."""

    def __init__(self, mux: MultiplexerBackend, prefix: str = "PANEVIM") -> None:
        self.mux = mux
        self.prefix = prefix

    def key(self, kind: str, entity: str = "") -> str:
        """Build the namespaced variable name for a kind/entity pair."""
        base = f"{self.prefix}_{kind.upper()}"
        return f"{base}_{entity}" if entity else base

    def get(self, kind: str, entity: str = "") -> str:
        """Return the stored value, or an empty string if never set."""
        return self.mux.get_env(self.key(kind, entity))

    def set(self, kind: str, entity: str, value: str) -> None:
        self.mux.set_env(self.key(kind, entity), value)

    def items(self, kind: str) -> dict[str, str]:
        """Return every entity stored under `kind`, keyed by entity name."""
        head = self.key(kind) + "_"
        found = {
            name[len(head):]: value
            for name, value in self.mux.list_env().items()
            if name.startswith(head) and len(name) > len(head)
        }
        logger.debug("Found %d %s entries", len(found), kind)
        return found
