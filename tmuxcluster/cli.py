import typer
import logging
from pathlib import Path
from typing import Optional

from tmuxcluster import __version__
from tmuxcluster.commands import connect
from tmuxcluster.logging import setup_logging
from tmuxcluster.modules.errors import ArgConflictError, TmuxClusterError

app = typer.Typer(add_completion=False)

logger = logging.getLogger("tmuxcluster.cli")

def version_callback(value: bool):
    if value:
        typer.echo(f"tmux-cluster {__version__}")
        raise typer.Exit()

@app.command()
def main(
    cluster: Optional[str] = typer.Argument(None, help="Cluster or tag to connect to"),
    cluster_line: Optional[str] = typer.Option(
        None, "--cluster-line", "-c",
        help="Ad-hoc cluster definition: 'name host_or_cluster...'"
    ),
    exclude: Optional[str] = typer.Option(
        None, "--exclude", "-x",
        help="Space-separated hosts, clusters or tags to leave out"
    ),
    dump_hosts: bool = typer.Option(False, "--dump-hosts", "-d", help="Print the resolved hosts and exit"),
    dump_commands: bool = typer.Option(False, "--dump-commands", "-t", help="Print the tmux commands and exit"),
    new_window: bool = typer.Option(
        False, "--new-window", "-w",
        help="Open a new window in the current session (inside tmux only)"
    ),
    list_clusters: bool = typer.Option(False, "--list", "-l", help="List the known clusters and tags"),
    config_dir: Optional[Path] = typer.Option(
        None, "--config-dir",
        help="Directory with the 'clusters' and 'tags' files (default: ~/.clusterssh)"
    ),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
    version: Optional[bool] = typer.Option(
        None, "--version", callback=version_callback, is_eager=True,
        help="Show the version and exit"
    ),
):
    """Open one synchronized tmux pane per host of a cluster."""
    setup_logging(debug)
    logger.debug("Debug mode enabled")

    options = connect.Options(
        cluster=cluster,
        cluster_line=cluster_line,
        exclude=exclude,
        dump_hosts=dump_hosts,
        dump_commands=dump_commands,
        new_window=new_window,
        list_clusters=list_clusters,
        config_dir=config_dir,
    )
    try:
        connect.run(options, echo=typer.echo)
    except ArgConflictError as e:
        raise typer.BadParameter(str(e))
    except TmuxClusterError as e:
        logger.debug("Aborting", exc_info=True)
        typer.echo(f"❌ {e}", err=True)
        raise typer.Exit(code=e.exit_code)

if __name__ == "__main__":
    app()
