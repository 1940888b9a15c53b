# routing/hooks.py
from typing import Protocol


class RoutingHooks(Protocol):
    def location_added(self, *, name, category): ...
    def path_added(self, *, a, b): ...
    def path_dropped(self, *, a, b, missing): ...
    def shortest_path(self, *, source, destination, stops, distance_m, settled, ms): ...
    def route_options(self, *, source, destination, considered, accepted, returned, ms): ...


class NoopHooks:
    def location_added(self, **_):
        pass

    def path_added(self, **_):
        pass

    def path_dropped(self, **_):
        pass

    def shortest_path(self, **_):
        pass

    def route_options(self, **_):
        pass
