# campus_nav/domain/store.py
import math
from collections.abc import Iterator
from dataclasses import dataclass, field

from campus_nav.domain.entities.geography import Location


@dataclass
class LocationStore:
    """Name-keyed registry of campus locations.

    Insertion is an upsert: a second record under an existing name replaces the
    first but keeps its original insertion slot.
    """

    _by_name: dict[str, Location] = field(default_factory=dict)

    def add(self, loc: Location) -> None:
        self._by_name[loc.name] = loc

    def upsert(self, name: str, category: str, x: float, y: float) -> None:
        self.add(Location.at(name, category, x, y))

    def exists(self, name: str) -> bool:
        return name in self._by_name

    def get(self, name: str) -> Location | None:
        return self._by_name.get(name)

    def distance_between(self, a: str, b: str) -> float:
        la, lb = self._by_name.get(a), self._by_name.get(b)
        if la is None or lb is None:
            return math.inf  # unreachable sentinel
        return la.distance_to(lb)

    def all_names(self) -> set[str]:
        return set(self._by_name)

    def names(self) -> list[str]:
        # insertion order
        return list(self._by_name)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def __len__(self) -> int:
        return len(self._by_name)

    def __iter__(self) -> Iterator[Location]:
        return iter(self._by_name.values())
