"""Command dispatcher — types file-open commands into a live editor pane.

Each file becomes keystrokes equivalent to `:badd <path><Enter>`, except the
last one which is `:edit <path><Enter>` so it ends up as the active buffer.
Paths are rewritten relative to the editor's launch directory and escaped
for the vim command line first.

Key class: CommandDispatcher. Helpers: defuse(), vim_escape().
"""

from __future__ import annotations

import logging

from .multiplexer import MultiplexerBackend
from .paths import resolve_for_editor
from .session import SessionRegistry

logger = logging.getLogger(__name__)

ESCAPE_KEY = "Escape"
ENTER_KEY = "Enter"
SPACE_KEY = "Space"

# Characters tmux would not send as themselves when given as a bare argument
_KEY_ESCAPES = {
    " ": SPACE_KEY,
    ";": "\\;",
}

# Characters vim's fnameescape() escapes on Unix
_VIM_SPECIAL = frozenset(" \t\n*?[{`$\\%#'\"|!<")


def defuse(text: str) -> list[str]:
    """Split text into one key token per character.

    Single characters cannot be mistaken for key names such as "Enter" or
    "C-c". A space becomes the "Space" key and a semicolon is escaped so
    tmux does not read it as a command separator.
    """
    return [_KEY_ESCAPES.get(ch, ch) for ch in text]


def vim_escape(path: str) -> str:
    """Backslash-escape a file name for the vim command line, like fnameescape()."""
    return "".join("\\" + ch if ch in _VIM_SPECIAL else ch for ch in path)


class CommandDispatcher:
    """Routes file-open commands into an already running editor."""

    def __init__(self, registry: SessionRegistry, mux: MultiplexerBackend) -> None:
        self.registry = registry
        self.mux = mux

    def command_keys(self, command: str, path: str) -> list[str]:
        """Keys for `:<command> <path>` followed by Enter."""
        return [*defuse(f":{command} "), *defuse(vim_escape(path)), ENTER_KEY]

    def open_files(self, name: str, files: list[str], cwd: str) -> None:
        """Open `files` in the live editor of session `name`.

        Must only be called once the session is known to be live.
        """
        locator = self.registry.lookup(name)
        if locator is None:
            logger.warning("No pane registered for session %s", name)
            return
        target = locator.target

        # Leave insert mode or a half-typed command line first
        self.mux.send_keys(target, [ESCAPE_KEY])
        if not files:
            return

        editor_dir = self.registry.last_used_working_dir(name, cwd)
        *background, active = files
        for file in background:
            path = resolve_for_editor(file, cwd, editor_dir)
            logger.debug("badd %s in %s", path, target)
            self.mux.send_keys(target, self.command_keys("badd", path))

        path = resolve_for_editor(active, cwd, editor_dir)
        logger.debug("edit %s in %s", path, target)
        self.mux.send_keys(target, self.command_keys("edit", path))
