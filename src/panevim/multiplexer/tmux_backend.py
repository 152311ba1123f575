"""Tmux backend for the multiplexer abstraction.

Wraps libtmux to run every tmux command panevim needs against the server
the current process lives in:
  - open_editor_pane: new-window / split-window printing a pane locator.
  - list_pane_ids: liveness source for registered panes.
  - send_keys / select_pane: drive the running editor.
  - get_env / set_env / list_env: tmux session environment as a string store.

Key class: TmuxBackend(MultiplexerBackend).
"""

from __future__ import annotations

import logging
import os
import shutil

import libtmux
from libtmux import exc

from ..errors import MissingToolError, MultiplexerError
from .base import MultiplexerBackend, PaneLocator, SplitAction

logger = logging.getLogger(__name__)

_SPLIT_COMMANDS: dict[SplitAction, list[str]] = {
    SplitAction.WINDOW: ["new-window"],
    SplitAction.TAB: ["new-window", "-a"],
    SplitAction.HORIZONTAL: ["split-window", "-h"],
    SplitAction.VERTICAL: ["split-window", "-v"],
}


class TmuxBackend(MultiplexerBackend):
    """Runs panevim's tmux commands through a libtmux server connection."""

    def __init__(self, tmux_bin: str = "tmux") -> None:
        self.tmux_bin = tmux_bin
        self._server: libtmux.Server | None = None

    @property
    def server(self) -> libtmux.Server:
        """Get or create tmux server connection."""
        if self._server is None:
            self._use_tmux_binary()
            self._server = libtmux.Server()
        return self._server

    def _use_tmux_binary(self) -> None:
        """Put the configured tmux binary first on PATH, where libtmux looks it up."""
        if self.tmux_bin == "tmux":
            return
        resolved = shutil.which(self.tmux_bin)
        if not resolved:
            raise MissingToolError(f"tmux binary not found: {self.tmux_bin}")
        if os.path.basename(resolved) != "tmux":
            logger.warning(
                "libtmux only runs binaries named 'tmux'; %s may be ignored", resolved
            )
        bin_dir = os.path.dirname(resolved)
        os.environ["PATH"] = os.pathsep.join([bin_dir, os.environ.get("PATH", "")])
        logger.debug("Using tmux from %s", bin_dir)

    def _cmd(self, *args: str, check: bool = True) -> list[str]:
        """Run a tmux command and return its stdout lines.

        Raises:
            MissingToolError: tmux is not installed.
            MultiplexerError: tmux wrote to stderr and `check` is set.
        """
        try:
            proc = self.server.cmd(*args)
        except exc.TmuxCommandNotFound as e:
            raise MissingToolError("tmux not found in PATH") from e
        if check and proc.stderr:
            message = "; ".join(proc.stderr)
            logger.error("tmux %s failed: %s", args[0], message)
            raise MultiplexerError(f"tmux {args[0]} failed: {message}")
        return proc.stdout

    def open_editor_pane(
        self, split: SplitAction, command: list[str], work_dir: str,
    ) -> PaneLocator:
        """Create a window or split running the editor and parse its locator."""
        args = [
            *_SPLIT_COMMANDS[split],
            "-P",
            "-F",
            self.locator_format,
            "-c",
            work_dir,
            *command,
        ]
        stdout = self._cmd(*args)
        if not stdout:
            raise MultiplexerError(f"tmux {args[0]} printed no pane locator")
        locator = PaneLocator.parse(stdout[0])
        logger.info("Created %s pane %s running %s", split.value, locator, command[0])
        return locator

    def list_pane_ids(self) -> set[str]:
        stdout = self._cmd("list-panes", "-a", "-F", "#{pane_id}")
        return {line.strip() for line in stdout if line.strip()}

    def send_keys(self, target: str, keys: list[str]) -> None:
        if not keys:
            return
        self._cmd("send-keys", "-t", target, *keys)

    def select_pane(self, target: str) -> None:
        self._cmd("select-window", "-t", target)
        self._cmd("select-pane", "-t", target)

    def get_env(self, name: str) -> str:
        # Unknown variables are reported on stderr; absence is not an error here
        for line in self._cmd("show-environment", name, check=False):
            key, sep, value = line.partition("=")
            if sep and key == name:
                return value
        return ""

    def set_env(self, name: str, value: str) -> None:
        self._cmd("set-environment", name, value)
        logger.debug("Set %s=%s", name, value)

    def list_env(self) -> dict[str, str]:
        env: dict[str, str] = {}
        for line in self._cmd("show-environment"):
            # "-NAME" marks a variable removed from the session environment
            if line.startswith("-"):
                continue
            key, sep, value = line.partition("=")
            if sep:
                env[key] = value
        return env
