"""Editor launcher — decides between reusing a live pane and spawning one.

ensure_open() runs the liveness check, the pane creation and the
registration under an exclusive flock on `<state_dir>/<name>.lock`, so two
shells opening files into the same session at once cannot both create an
editor window.

Key class: EditorLauncher. Result type: LaunchResult.
"""

from __future__ import annotations

import fcntl
import logging
import shlex
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path

from .errors import LockError
from .multiplexer import MultiplexerBackend, PaneLocator, SplitAction
from .session import SessionRegistry

logger = logging.getLogger(__name__)


@dataclass
class LaunchResult:
    """Outcome of ensure_open()."""

    created: bool
    locator: PaneLocator


@contextmanager
def session_lock(state_dir: Path, name: str) -> Iterator[None]:
    """Hold an exclusive advisory lock for one session name."""
    lock_path = state_dir / f"{name}.lock"
    try:
        state_dir.mkdir(parents=True, exist_ok=True)
        lock_f = open(lock_path, "w")
    except OSError as e:
        logger.error("Failed to open lock file %s: %s", lock_path, e)
        raise LockError(f"cannot open lock file {lock_path}: {e}") from e

    with lock_f:
        fcntl.flock(lock_f, fcntl.LOCK_EX)
        logger.debug("Acquired lock on %s", lock_path)
        try:
            yield
        finally:
            fcntl.flock(lock_f, fcntl.LOCK_UN)


class EditorLauncher:
    """Creates the editor pane for a session unless a live one exists."""

    def __init__(
        self,
        registry: SessionRegistry,
        mux: MultiplexerBackend,
        editor_command: str,
        state_dir: Path,
    ) -> None:
        self.registry = registry
        self.mux = mux
        self.editor_command = editor_command
        self.state_dir = state_dir

    def editor_argv(self, files: list[str]) -> list[str]:
        """Editor command line with the initial files appended."""
        return [*shlex.split(self.editor_command), *files]

    def ensure_open(
        self, name: str, split: SplitAction, files: list[str], cwd: str,
    ) -> LaunchResult:
        """Make sure `name` has a live editor pane.

        A live pane is selected and reported with created=False; `split` is
        not applied to it. Otherwise a new pane is opened with `files` on the
        editor command line and registered together with `cwd`.
        """
        with session_lock(self.state_dir, name):
            if self.registry.is_live(name):
                locator = self.registry.lookup(name)
                assert locator is not None
                if split is not SplitAction.WINDOW:
                    logger.debug("Session %s is live, ignoring split action %s", name, split.value)
                self.mux.select_pane(locator.target)
                return LaunchResult(created=False, locator=locator)

            locator = self.mux.open_editor_pane(split, self.editor_argv(files), cwd)
            self.registry.register(name, locator, cwd)
            return LaunchResult(created=True, locator=locator)
