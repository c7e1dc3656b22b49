"""
Build a Registry from the clusters file, the tags file and an ad-hoc cluster line.
"""
import logging
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Tuple

from tmuxcluster.config import Config
from tmuxcluster.registry import Registry
from .errors import ArgConflictError, ConfigMissingError, NameCollisionError

logger = logging.getLogger("tmuxcluster.loader")

def parse_line(line: str) -> Optional[Tuple[str, List[str]]]:
    """Split a definition line into its name and members.

    Returns None for blank lines and comments (first non-blank character `#`).
    """
    stripped = line.strip()
    if not stripped or stripped.startswith("#"):
        return None
    name, *members = stripped.split()
    return name, members

def iter_definitions(lines: Iterable[str]) -> Iterator[Tuple[str, List[str]]]:
    for line in lines:
        parsed = parse_line(line)
        if parsed is not None:
            yield parsed

def add_clusters(registry: Registry, lines: Iterable[str]) -> None:
    """Define one cluster per `name member...` line."""
    for name, members in iter_definitions(lines):
        definition_id = registry.define(name)
        registry.add_members(definition_id, members)
        logger.debug(f"Cluster {name}: +{len(members)} members")

def add_tags(registry: Registry, lines: Iterable[str]) -> None:
    """Add the host of each `host tag...` line to every tag it lists."""
    for host, tags in iter_definitions(lines):
        if not tags:
            logger.debug(f"Host {host} has no tags, skipping")
            continue
        for tag in tags:
            registry.add_members(registry.define(tag), [host])

def add_cluster_line(registry: Registry, line: str) -> str:
    """Define the ad-hoc cluster given on the command line.

    Returns:
        The cluster name declared by the line

    Raises:
        ArgConflictError: If the line is empty
        NameCollisionError: If the name is already defined
    """
    parsed = parse_line(line)
    if parsed is None:
        raise ArgConflictError("Cluster line must start with a cluster name")
    name, members = parsed
    if name in registry:
        raise NameCollisionError(name)
    registry.add_members(registry.define(name), members)
    logger.debug(f"Ad-hoc cluster {name}: {len(members)} members")
    return name

def _read_lines(path: Path) -> List[str]:
    if not path.is_file():
        logger.debug(f"{path} not found, skipping")
        return []
    try:
        with open(path, "r", encoding="utf-8") as f:
            return f.readlines()
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigMissingError(f"Cannot read {path}: {e}") from e

def load_registry(config_dir: Optional[Path] = None, cluster_line: Optional[str] = None) -> Registry:
    """Build and freeze the registry for one invocation.

    Args:
        config_dir: Directory holding the clusters and tags files
            (default: Config.CONFIG_DIR)
        cluster_line: Optional ad-hoc `name member...` definition

    Raises:
        ConfigMissingError: If the directory does not exist and no cluster line is given,
            or a definitions file cannot be read or decoded
        NameCollisionError: If the cluster line redefines a configured name
    """
    config_dir = Path(config_dir) if config_dir else Config.CONFIG_DIR
    registry = Registry()

    if config_dir.is_dir():
        add_clusters(registry, _read_lines(config_dir / Config.CLUSTERS_FILE))
        add_tags(registry, _read_lines(config_dir / Config.TAGS_FILE))
        logger.info(f"Loaded {len(registry)} definitions from {config_dir}")
    elif cluster_line is None:
        raise ConfigMissingError(
            f"Config directory {config_dir} not found and no cluster line given"
        )

    if cluster_line is not None:
        add_cluster_line(registry, cluster_line)

    return registry.freeze()
