"""Cluster and tag definitions, keyed by name."""
from typing import Dict, Iterable, List, Optional

class Registry:
    """Maps cluster and tag names to their ordered member lists.

    Clusters and tags share one namespace. Each newly seen name is assigned
    the next sequential id, starting at 0. Members are kept as given, with
    duplicates; they are only deduplicated during resolution.
    """

    def __init__(self):
        self._ids: Dict[str, int] = {}
        self._members: List[List[str]] = []
        self._frozen = False

    def define(self, name: str) -> int:
        """Return the id for `name`, allocating a new definition if needed."""
        definition_id = self._ids.get(name)
        if definition_id is not None:
            return definition_id
        self._check_writable()
        definition_id = len(self._members)
        self._ids[name] = definition_id
        self._members.append([])
        return definition_id

    def add_members(self, definition_id: int, members: Iterable[str]) -> None:
        """Append members, in order, to an existing definition."""
        self._check_writable()
        self._members[definition_id].extend(members)

    def lookup_id(self, name: str) -> Optional[int]:
        return self._ids.get(name)

    def members_of(self, definition_id: int) -> List[str]:
        return list(self._members[definition_id])

    def names(self) -> List[str]:
        """Defined names in id order."""
        return sorted(self._ids, key=self._ids.__getitem__)

    def freeze(self) -> "Registry":
        """Make the registry read-only and return it."""
        self._frozen = True
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    def _check_writable(self) -> None:
        if self._frozen:
            raise RuntimeError("Registry is frozen; definitions can no longer change")

    def __contains__(self, name: object) -> bool:
        return name in self._ids

    def __len__(self) -> int:
        return len(self._ids)

    def __repr__(self) -> str:
        return f"Registry({len(self)} definitions, frozen={self._frozen})"
