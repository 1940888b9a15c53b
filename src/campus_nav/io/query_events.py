# campus_nav/io/query_events.py

from dataclasses import dataclass


# Base type for query records handed to the Recorder
@dataclass
class QueryRecord:
    run_id: str
    seq: int  # per-run query counter
    name: str  # stable record name


@dataclass
class ShortestPathQueried(QueryRecord):
    source: str
    destination: str
    stops: int
    distance_m: float | None = None  # None => no route
    settled: int = 0
    ms: float | None = None


@dataclass
class RouteOptionsRanked(QueryRecord):
    source: str
    destination: str
    considered: int  # waypoints tried
    accepted: int  # candidates within the detour limit
    returned: int
    ms: float | None = None
