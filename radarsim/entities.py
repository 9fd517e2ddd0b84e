"""Aircraft and control towers of the radar simulation."""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass, field
from itertools import islice

PLANE_SIZE = 20
"""Side length, in pixels, of the square hitbox of a plane."""

PLANE_FIELDS = 6
TOWER_FIELDS = 3

PLANE_SPRITE_SCALE = 0.075
PLANE_SPRITE_ORIGIN = (147.5, 134.0)
TOWER_SPRITE_SCALE = 0.05
TOWER_SPRITE_ORIGIN = (256.0, 256.0)

# Number of movement steps a plane takes to cover its speed in distance.
STEPS_PER_SPEED_UNIT = 20.0


@dataclass(eq=False)
class Plane:
    """A plane flying in a straight line from ``start`` to ``end``."""

    start: tuple[float, float]
    end: tuple[float, float]
    speed: int
    start_time: int
    x: float = field(init=False)
    y: float = field(init=False)
    angle: float = field(init=False)
    dead: bool = field(default=False, init=False)

    def __post_init__(self) -> None:
        self.x, self.y = self.start
        self.angle = math.atan2(
            self.end[1] - self.start[1], self.end[0] - self.start[0]
        )

    def has_taken_off(self, seconds: float) -> bool:
        """Return whether the plane's departure time has been reached."""
        return self.start_time <= seconds

    def advance(self) -> None:
        """Move the plane one step along its heading."""
        step = self.speed / STEPS_PER_SPEED_UNIT
        self.x += math.cos(self.angle) * step
        self.y += math.sin(self.angle) * step

    def check_landing(self) -> bool:
        """Mark the plane dead once it has passed its destination.

        Only planes moving diagonally can land: a plane whose start and end
        share an x or y coordinate keeps flying.
        """
        (sx, sy), (ex, ey) = self.start, self.end
        if ex > sx and ey > sy and self.x >= ex and self.y >= ey:
            self.dead = True
        if ex > sx and ey < sy and self.x >= ex and self.y <= ey:
            self.dead = True
        if ex < sx and ey > sy and self.x <= ex and self.y >= ey:
            self.dead = True
        if ex < sx and ey < sy and self.x <= ex and self.y <= ey:
            self.dead = True
        return self.dead


@dataclass(eq=False)
class Tower:
    """A control tower whose circular area shelters planes from crashes."""

    x: float
    y: float
    radius: int

    def covers(self, x: float, y: float) -> bool:
        """Return whether the point lies inside or on the tower's circle."""
        return (x - self.x) ** 2 + (y - self.y) ** 2 <= self.radius**2


def _take(fields: Iterable[int], count: int, kind: str) -> list[int]:
    values = list(islice(fields, count))
    if len(values) < count:
        raise ValueError(
            f"{kind} needs {count} values, got {len(values)}"
        )
    return values


def make_plane(fields: Iterable[int]) -> Plane:
    """Build a plane from start x, start y, end x, end y, speed and delay."""
    sx, sy, ex, ey, speed, start_time = _take(fields, PLANE_FIELDS, "plane")
    return Plane(
        start=(float(sx), float(sy)),
        end=(float(ex), float(ey)),
        speed=int(speed),
        start_time=int(start_time),
    )


def make_tower(fields: Iterable[int]) -> Tower:
    """Build a tower from x, y and radius."""
    x, y, radius = _take(fields, TOWER_FIELDS, "tower")
    return Tower(x=float(x), y=float(y), radius=int(radius))