"""
Error types shared by the loader, resolver, script generator and CLI.
"""

EXIT_RUNTIME = 1
EXIT_USAGE = 2
EXIT_CONFIG = 3
EXIT_DEPENDENCY = 4

class TmuxClusterError(Exception):
    """Base exception for tmux-cluster errors."""
    exit_code = EXIT_RUNTIME

class MissingDependencyError(TmuxClusterError):
    """Raised when a required external program is not installed."""
    exit_code = EXIT_DEPENDENCY

class ConfigMissingError(TmuxClusterError):
    """Raised when there is neither a config directory nor a cluster line."""
    exit_code = EXIT_CONFIG

class NameCollisionError(TmuxClusterError):
    """Raised when an ad-hoc cluster name is already defined."""
    exit_code = EXIT_CONFIG

    def __init__(self, name: str):
        super().__init__(f"Cluster name '{name}' is already defined in the configuration")
        self.name = name

class ArgConflictError(TmuxClusterError):
    """Raised for conflicting options or an option used out of context."""
    exit_code = EXIT_USAGE

class NoHostsError(TmuxClusterError):
    """Raised when a cluster resolves to no hosts."""

class TmuxCommandError(TmuxClusterError):
    """Raised when tmux rejects the generated script."""
