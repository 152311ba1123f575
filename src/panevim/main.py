"""Application entry point — CLI parsing and the open-or-reuse flow.

Handles two execution modes:
  1. `panevim --list` — prints every registered session and whether its
     pane is still alive.
  2. Default — resolves the session name (explicit, last used, configured
     default), then either spawns the editor pane or routes the files into
     the live one.

Key functions: main() (CLI entry), open_in_session(), resolve_session_name().
"""

from __future__ import annotations

import argparse
import logging
import os
import shlex
import shutil
import sys

from .config import SESSION_NAME_RE, config
from .dispatcher import CommandDispatcher
from .errors import MissingToolError, MultiplexerSessionError, PanevimError
from .launcher import EditorLauncher, LaunchResult
from .multiplexer import MultiplexerBackend, SplitAction, get_mux
from .session import LastSessionPointer, SessionRegistry
from .store import KeyValueStore

logger = logging.getLogger(__name__)


def _session_name(value: str) -> str:
    """argparse type for -s."""
    if not SESSION_NAME_RE.match(value):
        raise argparse.ArgumentTypeError(
            f"invalid session name {value!r} (use letters, digits, '.', '_' or '-')"
        )
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="panevim",
        description="Open files in one persistent editor pane per tmux session",
        add_help=False,
    )
    parser.add_argument("-s", dest="session", type=_session_name, help="session name")
    placement = parser.add_mutually_exclusive_group()
    placement.add_argument(
        "-t", dest="split", action="store_const", const=SplitAction.TAB,
        help="open a new editor in a new tab",
    )
    placement.add_argument(
        "-v", dest="split", action="store_const", const=SplitAction.VERTICAL,
        help="open a new editor in a vertical split",
    )
    placement.add_argument(
        "-h", dest="split", action="store_const", const=SplitAction.HORIZONTAL,
        help="open a new editor in a horizontal split",
    )
    parser.add_argument("--list", action="store_true", help="list registered sessions")
    parser.add_argument("--debug", action="store_true", help="log debug output to stderr")
    parser.add_argument("--help", action="help", help="show this help message and exit")
    parser.add_argument("files", nargs="*", help="files to open, the last one becomes active")
    parser.set_defaults(split=SplitAction.WINDOW)
    return parser


def require_multiplexer_session() -> None:
    if not config.inside_multiplexer:
        raise MultiplexerSessionError("not inside a tmux session ($TMUX is not set)")


def require_editor() -> None:
    editor = shlex.split(config.editor_command)
    if not editor or not shutil.which(editor[0]):
        raise MissingToolError(f"editor not found: {config.editor_command!r}")


def resolve_session_name(explicit: str | None, pointer: LastSessionPointer) -> str:
    """Explicit name, else the last used session, else the configured default."""
    if explicit:
        return explicit
    last = pointer.read()
    if last and SESSION_NAME_RE.match(last):
        return last
    return config.default_session


def open_in_session(
    name: str,
    split: SplitAction,
    files: list[str],
    cwd: str,
    mux: MultiplexerBackend | None = None,
) -> LaunchResult:
    """Open `files` in session `name`, spawning the editor pane if needed."""
    mux = mux or get_mux()
    store = KeyValueStore(mux, config.store_prefix)
    registry = SessionRegistry(store, mux)
    LastSessionPointer(store).write(name)

    launcher = EditorLauncher(registry, mux, config.editor_command, config.state_dir)
    result = launcher.ensure_open(name, split, files, cwd)
    if result.created:
        logger.info("Started editor for %s in %s", name, result.locator)
    else:
        CommandDispatcher(registry, mux).open_files(name, files, cwd)
    return result


def list_sessions(mux: MultiplexerBackend) -> list[str]:
    """One line per registered session: marker, name, locator, state."""
    store = KeyValueStore(mux, config.store_prefix)
    registry = SessionRegistry(store, mux)
    last = LastSessionPointer(store).read()
    live_ids = mux.list_pane_ids()

    lines = []
    for name, raw in sorted(registry.sessions().items()):
        locator = registry.lookup(name)
        state = "live" if locator and locator.pane_id in live_ids else "stale"
        marker = "*" if name == last else " "
        lines.append(f"{marker} {name}\t{raw}\t{state}")
    return lines


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        level=logging.WARNING,
        stream=sys.stderr,
    )
    logging.getLogger("panevim").setLevel(logging.DEBUG if args.debug else config.log_level)

    try:
        require_multiplexer_session()
        mux = get_mux()
        if args.list:
            for line in list_sessions(mux):
                print(line)
            return 0

        require_editor()
        pointer = LastSessionPointer(KeyValueStore(mux, config.store_prefix))
        name = resolve_session_name(args.session, pointer)
        logger.debug("Session %s, split=%s, files=%s", name, args.split.value, args.files)
        open_in_session(name, args.split, args.files, os.getcwd(), mux=mux)
    except PanevimError as e:
        logger.debug("Fatal: %r", e)
        print(f"panevim: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
