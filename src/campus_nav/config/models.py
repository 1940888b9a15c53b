from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from campus_nav.io.campus_data import UG_LOCATIONS, UG_PATHS


class LogModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    debug: bool = False  # also log graph mutations


# ----------------- CAMPUS ---------------------


class LocationModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    name: str = Field(min_length=1)
    category: str = "Building"
    x: float  # meters
    y: float


class CampusModel(BaseModel):
    """
    Locations first, then paths between them.
    Paths naming an unknown location are kept here and dropped by the graph.
    """

    model_config = ConfigDict(extra="forbid")
    locations: list[LocationModel] = Field(default_factory=list)
    paths: list[tuple[str, str]] = Field(default_factory=list)

    @classmethod
    def from_tuples(cls, locations, paths) -> "CampusModel":
        return cls(
            locations=[
                LocationModel(name=n, category=c, x=x, y=y) for n, c, x, y in locations
            ],
            paths=list(paths),
        )


def _ug_campus() -> CampusModel:
    return CampusModel.from_tuples(UG_LOCATIONS, UG_PATHS)


# ----------------- ROUTING ---------------------


class RoutingModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    walking_speed_kmh: float = Field(default=5.0, gt=0)
    max_options: int = Field(default=3, ge=1)
    detour_factor: float = Field(default=1.5, ge=1.0)  # alternates within factor x shortest time
    tie_break: Literal["insertion", "name"] = "insertion"

    @field_validator("walking_speed_kmh")
    @classmethod
    def _plausible_speed(cls, v: float) -> float:
        if v > 50:
            raise ValueError(f"walking_speed_kmh={v} is not a walking speed")
        return v


# ------------------------------------------------------------------


class NavigatorModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    name: str = "ug_campus"
    run_id: str = "local"
    log: LogModel = LogModel()
    routing: RoutingModel = RoutingModel()
    campus: CampusModel = Field(default_factory=_ug_campus)
