"""
Expand cluster and tag names into a flat list of hosts.
"""
import logging
from typing import Iterable, List, Set, Tuple

from tmuxcluster.registry import Registry

logger = logging.getLogger("tmuxcluster.resolver")

def resolve(registry: Registry, seeds: Iterable[str]) -> Tuple[str, ...]:
    """Resolve names and hosts into hosts, breadth first.

    Each round processes the whole current queue and collects the members of
    every name it meets into the next round. Every string is handled once, so
    cyclic definitions terminate and hosts reachable through several branches
    appear once. Strings unknown to the registry are hosts.

    Args:
        registry: Cluster and tag definitions
        seeds: Names and/or hosts to resolve

    Returns:
        Hosts in the order they were first reached
    """
    handled: Set[str] = set()
    hosts: List[str] = []
    queue = list(seeds)
    rounds = 0

    while queue:
        batch, queue = queue, []
        for item in batch:
            if item in handled:
                continue
            handled.add(item)
            definition_id = registry.lookup_id(item)
            if definition_id is None:
                hosts.append(item)
            else:
                queue.extend(registry.members_of(definition_id))
        rounds += 1

    logger.debug(f"Resolved {len(hosts)} hosts in {rounds} rounds")
    return tuple(hosts)

def exclude(registry: Registry, base: Iterable[str], to_exclude: Iterable[str]) -> Tuple[str, ...]:
    """Drop every host `to_exclude` resolves to from `base`, keeping order."""
    excluded = set(resolve(registry, to_exclude))
    kept = tuple(host for host in base if host not in excluded)
    if excluded:
        logger.debug(f"Excluded {excluded}, {len(kept)} hosts left")
    return kept
