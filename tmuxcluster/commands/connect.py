"""Resolve a cluster and open one synchronized tmux pane per host."""
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, List, Optional, Tuple

from tmuxcluster.config import Config
from tmuxcluster.registry import Registry
from tmuxcluster.modules import loader, resolver, script, tmux
from tmuxcluster.modules.errors import (
    ArgConflictError, ConfigMissingError, MissingDependencyError, NoHostsError
)

logger = logging.getLogger("tmuxcluster.connect")

@dataclass
class Options:
    """Parsed command-line options."""
    cluster: Optional[str] = None
    cluster_line: Optional[str] = None
    exclude: Optional[str] = None
    dump_hosts: bool = False
    dump_commands: bool = False
    new_window: bool = False
    list_clusters: bool = False
    config_dir: Optional[Path] = None

def validate_options(options: Options, in_client: bool) -> None:
    """Reject conflicting options before anything is loaded.

    Raises:
        ArgConflictError: On any conflict
    """
    if options.dump_hosts and options.dump_commands:
        raise ArgConflictError("--dump-hosts and --dump-commands are mutually exclusive")
    if options.cluster and options.cluster_line:
        raise ArgConflictError("CLUSTER and --cluster-line are mutually exclusive")
    if options.list_clusters:
        return
    if not options.cluster and not options.cluster_line:
        raise ArgConflictError("Either CLUSTER or --cluster-line is required")
    if options.new_window and not in_client:
        raise ArgConflictError("--new-window can only be used inside tmux")

def resolve_hosts(registry: Registry, cluster: str, exclude: Optional[str] = None) -> Tuple[str, ...]:
    """Hosts of `cluster` minus the space-separated `exclude` list.

    Raises:
        NoHostsError: If nothing is left
    """
    hosts = resolver.resolve(registry, [cluster])
    if exclude:
        hosts = resolver.exclude(registry, hosts, exclude.split())
    if not hosts:
        raise NoHostsError(f"Cluster '{cluster}' has no hosts to connect to")
    logger.info(f"Cluster {cluster}: {len(hosts)} hosts")
    return hosts

def build_directives(
    hosts: Tuple[str, ...],
    cluster: str,
    new_window: bool,
    in_client: bool,
    tmux_path: Optional[str] = None,
) -> List[script.Directive]:
    """Pick the session mode and geometry, then generate the directives.

    Without a tmux binary the session name is not checked against running
    sessions and no geometry is queried.
    """
    if new_window:
        return script.generate(hosts, script.ExistingWindow(window_name=cluster), inside_client=True)

    existing = tmux.list_sessions(tmux_path) if tmux_path else []
    mode = script.NewSession(tmux.session_name(cluster, existing))
    geometry = tmux.query_geometry(tmux_path) if tmux_path and in_client else None
    return script.generate(hosts, mode, geometry=geometry, inside_client=in_client)

def _optional_tmux() -> Optional[str]:
    try:
        return tmux.find_tmux()
    except MissingDependencyError:
        logger.debug("tmux not found, generating commands without it")
        return None

def run(options: Options, echo: Callable[[str], None] = print) -> None:
    """Carry out one invocation.

    Raises:
        TmuxClusterError: On any fatal condition
    """
    in_client = tmux.inside_client()
    validate_options(options, in_client)
    try:
        Config.validate()
    except ValueError as e:
        raise ConfigMissingError(str(e)) from e

    registry = loader.load_registry(options.config_dir, options.cluster_line)

    if options.list_clusters:
        for name in registry.names():
            echo(name)
        return

    cluster = options.cluster
    if options.cluster_line:
        cluster, _ = loader.parse_line(options.cluster_line)

    hosts = resolve_hosts(registry, cluster, options.exclude)

    if options.dump_hosts:
        echo(" ".join(hosts))
        return

    if options.dump_commands:
        directives = build_directives(hosts, cluster, options.new_window, in_client, _optional_tmux())
        echo(script.render_script(directives).rstrip("\n"))
        return

    tmux_path = tmux.find_tmux()
    tmux.find_program(Config.SSH_COMMAND)
    directives = build_directives(hosts, cluster, options.new_window, in_client, tmux_path)
    tmux.execute_script(tmux_path, script.render_script(directives))
