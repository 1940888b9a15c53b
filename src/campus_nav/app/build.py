# campus_nav/app/build.py
from collections.abc import Mapping
from dataclasses import dataclass

from campus_nav.config.models import CampusModel, NavigatorModel, RoutingModel
from campus_nav.domain.entities.geography import Location
from campus_nav.domain.entities.route import RouteOption
from campus_nav.domain.graph import CampusGraph
from campus_nav.io.recorder import Recorder
from campus_nav.io.routing_logging import RoutingLogging
from campus_nav.routing.hooks import NoopHooks, RoutingHooks


@dataclass
class App:
    graph: CampusGraph
    routing: RoutingModel
    hooks: RoutingHooks

    def route_options(self, source: str, destination: str) -> list[RouteOption]:
        return self.graph.ranked_route_options(
            source,
            destination,
            self.routing.walking_speed_kmh,
            max_options=self.routing.max_options,
            detour_factor=self.routing.detour_factor,
        )


def load_campus(graph: CampusGraph, campus: CampusModel) -> CampusGraph:
    # locations before paths, or every path would be dropped
    for loc in campus.locations:
        graph.add_location(Location.at(loc.name, loc.category, loc.x, loc.y))
    for a, b in campus.paths:
        graph.add_path(a, b)
    return graph


def build(
    cfg: NavigatorModel | Mapping | None = None,
    *,
    use_logging: bool = True,
    recorder: Recorder | None = None,
) -> App:
    # 0) Validate config
    if cfg is None:
        model = NavigatorModel()
    elif isinstance(cfg, NavigatorModel):
        model = cfg
    else:
        model = NavigatorModel.model_validate(cfg)

    # 1) Hooks
    hooks = (
        RoutingLogging(
            run_id=model.run_id,
            level=model.log.level,
            debug=model.log.debug,
            recorder=recorder,
        )
        if use_logging
        else NoopHooks()
    )

    # 2) Graph
    graph = CampusGraph(hooks=hooks, tie_break=model.routing.tie_break)
    load_campus(graph, model.campus)

    return App(graph=graph, routing=model.routing, hooks=hooks)
