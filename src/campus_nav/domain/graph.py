# campus_nav/domain/graph.py
import math
import time
from collections.abc import Iterator
from typing import Literal

from campus_nav.domain.entities.geography import Location
from campus_nav.domain.entities.route import RouteOption
from campus_nav.domain.store import LocationStore
from campus_nav.routing.dijkstra import DijkstraResult, dijkstra_shortest_path
from campus_nav.routing.hooks import NoopHooks, RoutingHooks

TieBreak = Literal["insertion", "name"]


class CampusGraph:
    """
    Locations plus a symmetric adjacency list between them.

    Edge weight is always the Euclidean distance between the endpoints,
    recomputed per edge. Repeated add_path calls keep parallel entries.
    Not safe for mutation concurrent with queries; callers serialize.
    """

    def __init__(self, hooks: RoutingHooks | None = None, tie_break: TieBreak = "insertion"):
        if tie_break not in ("insertion", "name"):
            raise ValueError(f"Unknown tie_break {tie_break!r}")
        self._store = LocationStore()
        self._adj: dict[str, list[str]] = {}
        self._hooks = hooks or NoopHooks()
        self.tie_break = tie_break

    # ----------------- Mutation ---------------------

    def add_location(self, loc: Location) -> None:
        self._store.add(loc)
        self._adj.setdefault(loc.name, [])
        self._hooks.location_added(name=loc.name, category=loc.category)

    def upsert_location(self, name: str, category: str, x: float, y: float) -> None:
        self.add_location(Location.at(name, category, x, y))

    def add_path(self, a: str, b: str) -> None:
        missing = [n for n in (a, b) if n not in self._adj]
        if missing:
            # unknown endpoints are dropped, not raised
            self._hooks.path_dropped(a=a, b=b, missing=missing)
            return
        self._adj[a].append(b)
        self._adj[b].append(a)
        self._hooks.path_added(a=a, b=b)

    # ----------------- Lookups ---------------------

    def exists(self, name: str) -> bool:
        return self._store.exists(name)

    def get(self, name: str) -> Location | None:
        return self._store.get(name)

    def all_names(self) -> set[str]:
        return self._store.all_names()

    def locations(self) -> Iterator[Location]:
        return iter(self._store)

    @property
    def location_count(self) -> int:
        return len(self._store)

    def neighbors(self, name: str) -> list[str]:
        return list(self._adj.get(name, ()))

    def distance_between(self, a: str, b: str) -> float:
        return self._store.distance_between(a, b)

    # ----------------- Paths ---------------------

    def _scan_order(self) -> list[str]:
        names = self._store.names()
        return sorted(names) if self.tie_break == "name" else names

    def _dijkstra(self, source: str, destination: str) -> DijkstraResult:
        if not (self.exists(source) and self.exists(destination)):
            return DijkstraResult([], math.inf, 0)
        if source == destination:
            return DijkstraResult([source], 0.0, 0)
        return dijkstra_shortest_path(
            self._scan_order(), self._adj, self.distance_between, source, destination
        )

    def shortest_path(self, source: str, destination: str) -> list[str]:
        """Stops from source to destination inclusive; [] if unknown or unreachable."""
        t0 = time.perf_counter()
        res = self._dijkstra(source, destination)
        self._hooks.shortest_path(
            source=source,
            destination=destination,
            stops=len(res.path),
            distance_m=res.distance_m if res.path else None,
            settled=res.settled,
            ms=(time.perf_counter() - t0) * 1000,
        )
        return res.path

    def path_distance(self, path: list[str]) -> float:
        if len(path) < 2:
            return 0.0
        return sum(self.distance_between(u, v) for u, v in zip(path, path[1:]))

    def travel_time(self, path: list[str], walking_speed_kmh: float) -> float:
        """Minutes to walk ``path``; coordinates are meters, speed is km/h."""
        if len(path) < 2:
            return 0.0
        if not walking_speed_kmh > 0:
            return math.inf  # zero, negative or NaN speed never arrives
        return (self.path_distance(path) / 1000.0) / walking_speed_kmh * 60.0

    # ----------------- Route options ---------------------

    def ranked_route_options(
        self,
        source: str,
        destination: str,
        walking_speed_kmh: float,
        *,
        max_options: int = 3,
        detour_factor: float = 1.5,
    ) -> list[RouteOption]:
        """
        Shortest route plus alternates through single waypoints, fastest first.

        Every other location is tried as a waypoint: shortest(source, m) joined
        to shortest(m, destination). A candidate is kept when its stop sequence
        is new and its length is within ``detour_factor`` of the shortest route,
        which for any positive speed is the same bound on travel time.
        This costs two Dijkstra runs per location, so it is quadratic in the
        campus size and can miss alternates that need two waypoints.
        """
        t0 = time.perf_counter()
        base = self._dijkstra(source, destination).path
        if not base:
            self._report_options(source, destination, 0, 0, 0, t0)
            return []

        first = RouteOption.shortest(
            base, self.path_distance(base), self.travel_time(base, walking_speed_kmh)
        )
        options = [first]
        seen = {first.stops}
        limit = first.distance_m * detour_factor
        considered = 0

        for m in self._store.names():
            if m == source or m == destination:
                continue
            considered += 1
            leg1 = self._dijkstra(source, m).path
            leg2 = self._dijkstra(m, destination).path
            if not leg1 or not leg2:
                continue
            stops = tuple(leg1 + leg2[1:])
            if stops in seen:
                continue
            distance = self.path_distance(list(stops))
            if distance > limit:
                continue
            seen.add(stops)
            minutes = self.travel_time(list(stops), walking_speed_kmh)
            options.append(RouteOption.via(m, stops, distance, minutes))

        # stable: the shortest route stays ahead of equal-time alternates
        options.sort(key=lambda o: (o.travel_time_min, o.distance_m))
        top = options[:max_options]
        self._report_options(source, destination, considered, len(options), len(top), t0)
        return top

    def _report_options(
        self,
        source: str,
        destination: str,
        considered: int,
        accepted: int,
        returned: int,
        t0: float,
    ) -> None:
        self._hooks.route_options(
            source=source,
            destination=destination,
            considered=considered,
            accepted=accepted,
            returned=returned,
            ms=(time.perf_counter() - t0) * 1000,
        )
