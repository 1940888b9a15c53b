import math
from dataclasses import dataclass, field


# Core geometry types used by the routing graph
@dataclass(frozen=True)
class Point:
    x: float  # meters on the campus plane
    y: float

    def distance_to(self, other: "Point") -> float:
        return math.hypot(other.x - self.x, other.y - self.y)


@dataclass(frozen=True)
class Location:
    """A named place on campus. Equality and hashing use the name only."""

    name: str
    category: str = field(compare=False)
    position: Point = field(compare=False)

    @classmethod
    def at(cls, name: str, category: str, x: float, y: float) -> "Location":
        return cls(name, category, Point(float(x), float(y)))

    @property
    def x(self) -> float:
        return self.position.x

    @property
    def y(self) -> float:
        return self.position.y

    def distance_to(self, other: "Location") -> float:
        return self.position.distance_to(other.position)

    def __str__(self) -> str:
        return f"{self.name} ({self.category}) at coordinates ({self.x:.2f}, {self.y:.2f})"
