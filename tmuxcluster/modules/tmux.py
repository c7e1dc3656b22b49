"""
Interaction with the tmux server: binary lookup, client detection,
geometry, session names and script execution.
"""
import os
import re
import shlex
import shutil
import subprocess
import tempfile
import logging
from typing import Iterable, List, Optional

from tmuxcluster.config import Config
from .errors import MissingDependencyError, TmuxCommandError
from .script import Geometry

logger = logging.getLogger("tmuxcluster.tmux")

# tmux rewrites these characters in session names
_SESSION_NAME_RE = re.compile(r"[.:]")

def find_program(command: str) -> str:
    """Return the full path of the program `command` starts with.

    Raises:
        MissingDependencyError: If it is not on PATH
    """
    parts = shlex.split(command)
    program = parts[0] if parts else ""
    path = shutil.which(program) if program else None
    if not path:
        raise MissingDependencyError(f"Required program '{program or command}' not found in PATH")
    return path

def find_tmux() -> str:
    return find_program(Config.TMUX_BINARY)

def inside_client() -> bool:
    """Whether we run inside a tmux client."""
    return bool(os.environ.get("TMUX"))

def query_geometry(tmux: str) -> Optional[Geometry]:
    """Size of the current tmux window, or None if it cannot be read."""
    result = subprocess.run(
        [tmux, "display-message", "-p", "#{window_width} #{window_height}"],
        capture_output=True,
        text=True,
    )
    if result.returncode != 0:
        logger.warning(f"Could not read window size: {result.stderr.strip()}")
        return None
    try:
        columns, rows = (int(value) for value in result.stdout.split())
    except ValueError:
        logger.warning(f"Unexpected window size output: {result.stdout!r}")
        return None
    return Geometry(columns=columns, rows=rows)

def list_sessions(tmux: str) -> List[str]:
    """Names of the running sessions; empty when no server is running."""
    result = subprocess.run(
        [tmux, "list-sessions", "-F", "#{session_name}"],
        capture_output=True,
        text=True,
    )
    if result.returncode != 0:
        return []
    return [line for line in result.stdout.splitlines() if line]

def session_name(cluster: str, existing: Iterable[str] = (), prefix: Optional[str] = None) -> str:
    """Session name for `cluster`, unique among `existing`.

    `.` and `:` are replaced with `_`; a numeric suffix is added on clashes.
    """
    prefix = Config.SESSION_PREFIX if prefix is None else prefix
    base = _SESSION_NAME_RE.sub("_", f"{prefix}{cluster}")
    taken = set(existing)
    name = base
    suffix = 0
    while name in taken:
        suffix += 1
        name = f"{base}-{suffix}"
    return name

def execute_script(tmux: str, script: str) -> None:
    """Run a tmux script through `source-file`.

    The server is started first so the script also works outside tmux.

    Raises:
        TmuxCommandError: If tmux exits with an error
    """
    fd, path = tempfile.mkstemp(prefix="tmux-cluster-", suffix=".tmux")
    try:
        with os.fdopen(fd, "w") as f:
            f.write(script)
        logger.debug(f"Sourcing {path}")
        result = subprocess.run([tmux, "start-server", ";", "source-file", path])
    finally:
        os.unlink(path)
    if result.returncode != 0:
        raise TmuxCommandError(f"tmux exited with status {result.returncode}")
