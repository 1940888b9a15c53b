# campus_nav/cli.py
import argparse
import sys

from pydantic import ValidationError

from campus_nav.app.build import App, build
from campus_nav.config.models import NavigatorModel
from campus_nav.domain.entities.route import RouteOption
from campus_nav.io.config import load_config


def format_minutes(minutes: float) -> str:
    m = int(round(minutes))
    if m < 60:
        return f"{m} min"
    return f"{m // 60} hr {m % 60} min"


def format_option(rank: int, opt: RouteOption) -> str:
    return (
        f"{rank}. {opt.description}: {' -> '.join(opt.stops)}\n"
        f"   {opt.distance_m:.1f} m, {format_minutes(opt.travel_time_min)}"
    )


def _parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="campus-nav", description="Walking routes across campus.")
    p.add_argument("--config", help="JSON navigator config (defaults to the UG sample campus)")
    p.add_argument("--log-level", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    sub = p.add_subparsers(dest="command", required=True)

    sub.add_parser("locations", help="list known locations")

    r = sub.add_parser("route", help="rank routes between two locations")
    r.add_argument("source")
    r.add_argument("destination")
    r.add_argument("--speed", type=float, help="walking speed in km/h")
    return p


def _load_model(args) -> NavigatorModel:
    model = load_config(args.config) if args.config else NavigatorModel()
    updates = {}
    if args.log_level:
        updates["log"] = model.log.model_copy(update={"level": args.log_level})
    if getattr(args, "speed", None) is not None:
        routing = model.routing.model_dump()
        routing["walking_speed_kmh"] = args.speed
        updates["routing"] = type(model.routing).model_validate(routing)
    return model.model_copy(update=updates) if updates else model


def _cmd_locations(app: App, out) -> int:
    print("Available locations on campus:", file=out)
    for loc in app.graph.locations():
        print(f"- {loc}", file=out)
    return 0


def _cmd_route(app: App, source: str, destination: str, out, err) -> int:
    for name in (source, destination):
        if not app.graph.exists(name):
            print(f"Location {name!r} not found on campus.", file=err)
            return 1
    if source == destination:
        print("You are already at your destination.", file=out)
        return 0
    options = app.route_options(source, destination)
    if not options:
        print(f"No route found from {source!r} to {destination!r}.", file=err)
        return 1
    print(f"Routes from {source} to {destination}:", file=out)
    for i, opt in enumerate(options, start=1):
        print(format_option(i, opt), file=out)
    return 0


def main(argv=None, out=None, err=None) -> int:
    out = out or sys.stdout
    err = err or sys.stderr
    args = _parser().parse_args(argv)
    try:
        model = _load_model(args)
    except (OSError, ValidationError) as exc:
        print(f"Invalid configuration: {exc}", file=err)
        return 2

    app = build(model)
    if args.command == "locations":
        return _cmd_locations(app, out)
    return _cmd_route(app, args.source, args.destination, out, err)


if __name__ == "__main__":
    sys.exit(main())
