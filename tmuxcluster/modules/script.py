"""
Generate the tmux command script that opens one synchronized pane per host.
"""
import logging
import shlex
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple, Union

from tmuxcluster.config import Config
from .errors import NoHostsError

logger = logging.getLogger("tmuxcluster.script")

# ssh exits with 255 when the connection itself fails
SSH_CONNECTION_FAILED = 255

@dataclass(frozen=True)
class Geometry:
    """Size of the window a new session should match."""
    columns: int
    rows: int

@dataclass(frozen=True)
class NewSession:
    """Open the panes in a new detached session."""
    name: str

@dataclass(frozen=True)
class ExistingWindow:
    """Open the panes in a new window of the current session."""
    window_name: Optional[str] = None

SessionMode = Union[NewSession, ExistingWindow]

@dataclass(frozen=True)
class Directive:
    """One tmux command."""
    command: str
    args: Tuple[str, ...] = ()

    def render(self) -> str:
        return " ".join([self.command] + [shlex.quote(arg) for arg in self.args])

    def __str__(self) -> str:
        return self.render()

def connect_command(host: str, ssh_command: Optional[str] = None) -> str:
    """Shell command that connects to `host`.

    When ssh fails to connect, the pane waits for enter instead of closing so
    the error stays readable.
    """
    ssh_command = ssh_command or Config.SSH_COMMAND
    quoted = shlex.quote(host)
    return (
        f"{ssh_command} {quoted}; "
        f"if [ $? -eq {SSH_CONNECTION_FAILED} ]; then "
        f"echo {shlex.quote(f'Connection to {host} failed. Press enter to close.')}; "
        f"read _; fi"
    )

def _target(mode: SessionMode) -> Tuple[str, ...]:
    if isinstance(mode, NewSession):
        return ("-t", mode.name)
    return ()

def generate(
    hosts: Sequence[str],
    mode: SessionMode,
    geometry: Optional[Geometry] = None,
    inside_client: bool = False,
    ssh_command: Optional[str] = None,
) -> List[Directive]:
    """Build the directives for a synchronized multi-pane session.

    Args:
        hosts: Resolved hosts; the first one gets the primary pane
        mode: NewSession or ExistingWindow
        geometry: Size for a new session, if known
        inside_client: Whether we run inside a tmux client
        ssh_command: Remote shell command (default: Config.SSH_COMMAND)

    Returns:
        Directives in execution order

    Raises:
        NoHostsError: If `hosts` is empty
    """
    if not hosts:
        raise NoHostsError("No hosts to connect to")

    first, *rest = hosts
    target = _target(mode)
    directives: List[Directive] = []

    if isinstance(mode, NewSession):
        args: Tuple[str, ...] = ("-d", "-s", mode.name)
        if geometry is not None:
            args += ("-x", str(geometry.columns), "-y", str(geometry.rows))
        directives.append(Directive("new-session", args + (connect_command(first, ssh_command),)))
    else:
        args = ("-n", mode.window_name) if mode.window_name else ()
        directives.append(Directive("new-window", args + (connect_command(first, ssh_command),)))

    for host in rest:
        directives.append(Directive("split-window", target + (connect_command(host, ssh_command),)))
        # tmux does not redistribute existing panes on split
        directives.append(Directive("select-layout", target + ("tiled",)))

    directives.append(Directive("set-window-option", target + ("synchronize-panes", "on")))

    if isinstance(mode, NewSession):
        if inside_client:
            directives.append(Directive("switch-client", target))
        else:
            directives.append(Directive("attach-session", target))

    # attaching or switching can leave a stale layout
    directives.append(Directive("select-layout", target + ("tiled",)))

    logger.debug(f"Generated {len(directives)} directives for {len(hosts)} hosts")
    return directives

def render_script(directives: Sequence[Directive]) -> str:
    """Render directives as a tmux script, one command per line."""
    return "".join(f"{directive.render()}\n" for directive in directives)
