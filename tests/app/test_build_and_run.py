# tests/app/test_build_and_run.py
import pytest

from campus_nav.app.build import build
from campus_nav.io.query_events import RouteOptionsRanked
from campus_nav.io.recorder import MemorySink, Recorder
from campus_nav.io.routing_logging import RoutingLogging
from campus_nav.routing.hooks import NoopHooks


def test_build_runs():
    cfg = {
        "name": "test",
        "run_id": "t-1",
        "log": {"level": "WARNING"},
        "routing": {"walking_speed_kmh": 6.0, "max_options": 2},
        "campus": {
            "locations": [
                {"name": "Gate", "category": "Gate", "x": 0, "y": 0},
                {"name": "Library", "category": "Library", "x": 300, "y": 400},
                {"name": "Hall", "category": "Residence", "x": 300, "y": 0},
            ],
            "paths": [
                ["Gate", "Library"],
                ["Gate", "Hall"],
                ["Hall", "Library"],
                ["Hall", "Pool"],
            ],
        },
    }
    app = build(cfg, use_logging=False)
    assert isinstance(app.hooks, NoopHooks)
    assert app.graph.location_count == 3
    assert app.graph.neighbors("Hall") == ["Gate", "Library"]  # Pool dropped

    opts = app.route_options("Gate", "Library")
    assert len(opts) == 2
    assert opts[0].stops == ("Gate", "Library")
    assert opts[0].travel_time_min == pytest.approx(5.0)
    assert opts[1].stops == ("Gate", "Hall", "Library")


def test_default_build_is_the_ug_campus():
    app = build(use_logging=False)
    assert app.graph.location_count == 8
    opts = app.route_options("Main Gate", "Great Hall")
    assert len(opts) == 3


def test_build_with_logging_feeds_the_recorder():
    sink = MemorySink()
    app = build({"log": {"level": "ERROR"}, "run_id": "t-2"}, recorder=Recorder(sink))
    assert isinstance(app.hooks, RoutingLogging)
    app.route_options("Main Gate", "Volta Hall")
    (rec,) = sink.records
    assert isinstance(rec, RouteOptionsRanked)
    assert rec.run_id == "t-2"


def test_tie_break_setting_reaches_the_graph():
    app = build({"routing": {"tie_break": "name"}}, use_logging=False)
    assert app.graph.tie_break == "name"
