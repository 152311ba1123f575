"""panevim — reuse one editor pane per named tmux session.

Repeated invocations route file-open commands into the already running editor
via tmux send-keys instead of spawning new editor processes.
"""

__version__ = "0.1.0"
