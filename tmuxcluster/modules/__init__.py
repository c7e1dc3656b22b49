"""
Cluster resolution and tmux script modules.
"""
from .errors import TmuxClusterError
from .loader import load_registry
from .resolver import resolve, exclude
from .script import generate, render_script

__all__ = [
    'TmuxClusterError',
    'load_registry',
    'resolve',
    'exclude',
    'generate',
    'render_script',
]
