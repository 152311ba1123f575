"""Multiplexer abstraction package — the tmux side of panevim.

Re-exports the core types and provides a singleton factory:
  - MultiplexerBackend: ABC for all backends.
  - PaneLocator: Structured `session:window.pane$pane_id` address.
  - SplitAction: Placement of a new editor pane.
  - get_mux(): Returns the singleton tmux backend instance.
"""

from .base import MultiplexerBackend, PaneLocator, SplitAction

__all__ = ["MultiplexerBackend", "PaneLocator", "SplitAction", "get_mux"]

_mux: MultiplexerBackend | None = None


def get_mux() -> MultiplexerBackend:
    """Return the singleton multiplexer backend.

    Lazily initialized on first call with the tmux binary from
    config.tmux_bin.
    """
    global _mux
    if _mux is not None:
        return _mux

    from ..config import config
    from .tmux_backend import TmuxBackend

    _mux = TmuxBackend(config.tmux_bin)
    return _mux
