"""tmux status line weather segment with an expiring on-disk cache."""

__version__ = "0.1.0"
