"""tmux-cluster: open a synchronized tmux pane for every host of a cluster."""

__version__ = "0.1.0"
