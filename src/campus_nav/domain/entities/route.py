from dataclasses import dataclass

SHORTEST_ROUTE = "Shortest Distance Route"


@dataclass(frozen=True)
class RouteOption:
    stops: tuple[str, ...]
    distance_m: float
    travel_time_min: float
    description: str

    @property
    def path(self) -> list[str]:
        return list(self.stops)

    @classmethod
    def shortest(cls, stops, distance_m: float, travel_time_min: float) -> "RouteOption":
        return cls(tuple(stops), distance_m, travel_time_min, SHORTEST_ROUTE)

    @classmethod
    def via(cls, waypoint: str, stops, distance_m: float, travel_time_min: float) -> "RouteOption":
        return cls(tuple(stops), distance_m, travel_time_min, f"Alternative Route via {waypoint}")
