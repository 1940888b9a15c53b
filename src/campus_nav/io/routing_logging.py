# io/routing_logging.py
import json
import logging
import sys

from campus_nav.io.query_events import RouteOptionsRanked, ShortestPathQueried
from campus_nav.io.recorder import Recorder
from campus_nav.routing.hooks import NoopHooks


class _JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "level": record.levelname,
            "msg": record.getMessage(),
            "logger": record.name,
        }
        extra = getattr(record, "extra", None)
        if isinstance(extra, dict):
            payload.update(extra)
        return json.dumps(payload)


def _default_json_logger(name="campus_nav", level="INFO"):
    logger = logging.getLogger(name)
    if not logger.handlers:
        h = logging.StreamHandler(sys.stderr)
        h.setFormatter(_JsonFormatter())
        logger.addHandler(h)
    logger.setLevel(level)
    return logger


class RoutingLogging(NoopHooks):
    """
    Structured logs for graph mutations (debug only) and queries,
    plus query records forwarded to an optional Recorder.
    """

    def __init__(
        self,
        run_id: str = "local",
        level: str = "INFO",
        debug: bool = False,
        logger: logging.Logger | None = None,
        recorder: Recorder | None = None,
    ):
        self.run_id, self.debug = run_id, debug
        self.recorder = recorder
        self.log = logger or _default_json_logger(level="DEBUG" if debug else level)
        self._seq = 0

    # --------------- Helpers -----------------------------

    def _emit(self, level: str, msg: str, **extra):
        payload = {"run_id": self.run_id}
        self.log.log(getattr(logging, level), msg, extra={"extra": {**payload, **extra}})

    def _record(self, rec):
        if self.recorder:
            self.recorder.emit(rec)

    def _next_seq(self) -> int:
        self._seq += 1
        return self._seq

    # --------------- Graph mutations ---------------------

    def location_added(self, *, name, category):
        if self.debug:
            self._emit("DEBUG", "location_added", name=name, category=category)

    def path_added(self, *, a, b):
        if self.debug:
            self._emit("DEBUG", "path_added", a=a, b=b)

    def path_dropped(self, *, a, b, missing):
        if self.debug:
            self._emit("DEBUG", "path_dropped", a=a, b=b, missing=list(missing))

    # --------------- Queries -----------------------------

    def shortest_path(self, *, source, destination, stops, distance_m, settled, ms):
        seq = self._next_seq()
        self._emit(
            "INFO",
            "shortest_path",
            seq=seq,
            source=source,
            destination=destination,
            stops=stops,
            distance_m=distance_m,
            settled=settled,
            ms=round(ms, 3),
        )
        self._record(
            ShortestPathQueried(
                run_id=self.run_id,
                seq=seq,
                name="shortest_path",
                source=source,
                destination=destination,
                stops=stops,
                distance_m=distance_m,
                settled=settled,
                ms=ms,
            )
        )

    def route_options(self, *, source, destination, considered, accepted, returned, ms):
        seq = self._next_seq()
        self._emit(
            "INFO",
            "route_options",
            seq=seq,
            source=source,
            destination=destination,
            considered=considered,
            accepted=accepted,
            returned=returned,
            ms=round(ms, 3),
        )
        self._record(
            RouteOptionsRanked(
                run_id=self.run_id,
                seq=seq,
                name="route_options",
                source=source,
                destination=destination,
                considered=considered,
                accepted=accepted,
                returned=returned,
                ms=ms,
            )
        )
