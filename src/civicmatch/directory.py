"""Read-only authority directories.

Every directory hands out immutable snapshots. ``SnapshotDirectory`` can be
reloaded at runtime; a reload swaps in a new tuple, so a caller holding the
previous snapshot keeps a consistent view.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Callable, Iterable, List, Optional, Sequence, Tuple

from .distance import haversine
from .exceptions import DirectoryError
from .geohash import decode, encode, neighbors, precision_for_km
from .models import Authority
from .types import Coordinate

logger = logging.getLogger(__name__)

Snapshot = Tuple[Authority, ...]
Loader = Callable[[], Iterable[Authority]]


def _freeze(authorities: Iterable[Authority]) -> Snapshot:
    snapshot = tuple(authorities)
    seen = set()
    for authority in snapshot:
        if authority.id in seen:
            raise DirectoryError(f"duplicate authority id {authority.id!r}")
        seen.add(authority.id)
    return snapshot


def _same(a: Optional[str], b: str) -> bool:
    return a is not None and a.lower() == b.lower()


class AuthorityDirectory(ABC):
    @abstractmethod
    def list_authorities(self) -> Sequence[Authority]:
        """Current snapshot, in directory order."""

    def count(self) -> int:
        return len(self.list_authorities())

    def get(self, authority_id: str) -> Optional[Authority]:
        for authority in self.list_authorities():
            if authority.id == authority_id:
                return authority
        return None

    def by_city(self, city: str) -> List[Authority]:
        return [a for a in self.list_authorities() if _same(a.city, city)]

    def by_state(self, state: str) -> List[Authority]:
        return [a for a in self.list_authorities() if _same(a.state, state)]

    def find_near(self, coord: Coordinate, radius_km: float = 10.0) -> List[Authority]:
        """Authorities whose geohash jurisdiction overlaps the area around ``coord``.

        The area is the query cell plus its eight neighbors at the precision
        matching ``radius_km``. Results are nearest first, measured to the
        center of each authority's closest prefix cell.
        """
        cell = encode(coord, precision_for_km(radius_km))
        cells = (cell,) + tuple(neighbors(cell))

        ranked = []
        for authority in self.list_authorities():
            overlapping = [
                prefix
                for prefix in authority.geohash_prefixes
                if any(prefix.startswith(c) or c.startswith(prefix) for c in cells)
            ]
            if not overlapping:
                continue
            distance = min(haversine(coord, decode(p).center) for p in overlapping)
            ranked.append((distance, authority))

        ranked.sort(key=lambda item: item[0])
        return [authority for _, authority in ranked]


class StaticAuthorityDirectory(AuthorityDirectory):
    def __init__(self, authorities: Iterable[Authority]) -> None:
        self._snapshot = _freeze(authorities)

    def list_authorities(self) -> Snapshot:
        return self._snapshot


class SnapshotDirectory(AuthorityDirectory):
    """Directory whose contents can be replaced while readers are active."""

    def __init__(self, authorities: Iterable[Authority] = ()) -> None:
        self._snapshot = _freeze(authorities)
        self._version = 0

    @property
    def version(self) -> int:
        return self._version

    def list_authorities(self) -> Snapshot:
        return self._snapshot

    def replace(self, authorities: Iterable[Authority]) -> Snapshot:
        snapshot = _freeze(authorities)
        self._snapshot = snapshot
        self._version += 1
        logger.info(
            "Published authority snapshot v%d with %d authorities",
            self._version,
            len(snapshot),
        )
        return snapshot

    def load(self, loader: Loader) -> Snapshot:
        return self.replace(loader())
