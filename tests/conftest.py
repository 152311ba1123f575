"""Shared test fixtures and helpers for panevim test suite.

Provides an in-memory multiplexer (panes, session environment, recorded
keystrokes) and helpers to read the recorded keys back as typed text.
"""

import os

# Config isolation: keep a developer's environment out of the config singleton
for _var in ("PANEVIM_TMUX", "PANEVIM_EDITOR", "PANEVIM_DEFAULT_SESSION", "PANEVIM_LOG_LEVEL"):
    os.environ.pop(_var, None)

from pathlib import Path

import pytest

from panevim.multiplexer.base import MultiplexerBackend, PaneLocator, SplitAction
from panevim.session import SessionRegistry
from panevim.store import KeyValueStore


# ── In-memory multiplexer ────────────────────────────────────────────────


class FakeMux(MultiplexerBackend):
    """Multiplexer double recording every call."""

    def __init__(self, session: str = "work") -> None:
        self.session = session
        self.env: dict[str, str] = {}
        self.panes: dict[str, PaneLocator] = {}
        self.created: list[tuple[SplitAction, list[str], str]] = []
        self.sent: list[tuple[str, list[str]]] = []
        self.selected: list[str] = []
        self._counter = 0

    def open_editor_pane(
        self, split: SplitAction, command: list[str], work_dir: str,
    ) -> PaneLocator:
        self._counter += 1
        locator = PaneLocator(self.session, self._counter, 0, f"%{self._counter + 40}")
        self.panes[locator.pane_id] = locator
        self.created.append((split, list(command), work_dir))
        return locator

    def close_pane(self, pane_id: str) -> None:
        del self.panes[pane_id]

    def list_pane_ids(self) -> set[str]:
        return set(self.panes)

    def send_keys(self, target: str, keys: list[str]) -> None:
        self.sent.append((target, list(keys)))

    def select_pane(self, target: str) -> None:
        self.selected.append(target)

    def get_env(self, name: str) -> str:
        return self.env.get(name, "")

    def set_env(self, name: str, value: str) -> None:
        self.env[name] = value

    def list_env(self) -> dict[str, str]:
        return dict(self.env)


_KEY_TEXT = {"Space": " ", "Enter": "\n", "Escape": "<Esc>", "\\;": ";"}


def typed(keys: list[str]) -> str:
    """Render key tokens as the text the editor would receive."""
    return "".join(_KEY_TEXT.get(k, k) for k in keys)


def typed_commands(mux: FakeMux) -> list[str]:
    """Every send_keys call rendered as text, in order."""
    return [typed(keys) for _, keys in mux.sent]


# ── Fixtures ─────────────────────────────────────────────────────────────


@pytest.fixture
def mux() -> FakeMux:
    return FakeMux()


@pytest.fixture
def store(mux: FakeMux) -> KeyValueStore:
    return KeyValueStore(mux, "PANEVIM")


@pytest.fixture
def registry(store: KeyValueStore, mux: FakeMux) -> SessionRegistry:
    return SessionRegistry(store, mux)


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    """A canonical project directory with a nested source folder."""
    root = Path(os.path.realpath(tmp_path)) / "proj"
    (root / "src").mkdir(parents=True)
    return root


@pytest.fixture
def state_dir(tmp_path: Path, monkeypatch) -> Path:
    """Point lock files at a temporary directory."""
    path = tmp_path / "state"
    monkeypatch.setattr("panevim.config.config.state_dir", path)
    return path
