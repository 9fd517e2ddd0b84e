"""State of a running radar simulation, advanced frame by frame."""

from __future__ import annotations

from dataclasses import dataclass, field

from radarsim.entities import Plane, Tower
from radarsim.parsing import Scenario
from radarsim.quadtree import handle_collisions

MOVE_INTERVAL = 0.05
"""Seconds that must pass between two movement steps."""


@dataclass
class Simulation:
    """Planes and towers, with display switches; times are seconds from start."""

    planes: list[Plane] = field(default_factory=list)
    towers: list[Tower] = field(default_factory=list)
    show_sprites: bool = True
    show_hitboxes: bool = True
    last_move: float = 0.0

    @classmethod
    def from_scenario(cls, scenario: Scenario) -> Simulation:
        return cls(planes=list(scenario.planes), towers=list(scenario.towers))

    def remove_dead(self) -> int:
        """Drop crashed and landed planes; return how many were removed."""
        before = len(self.planes)
        self.planes = [plane for plane in self.planes if not plane.dead]
        return before - len(self.planes)

    def move_planes(self, now: float) -> int:
        """Step planes forward if enough time has passed; return how many moved.

        Planes are moved in order until the first one still waiting to take off.
        """
        if now - self.last_move <= MOVE_INTERVAL:
            return 0
        moved = 0
        for plane in self.planes:
            if not plane.has_taken_off(now):
                break
            plane.advance()
            plane.check_landing()
            moved += 1
        self.last_move = now
        return moved

    def update(self, now: float) -> bool:
        """Run one frame; return whether any plane is left to simulate."""
        self.remove_dead()
        self.move_planes(now)
        handle_collisions(self.planes, self.towers)
        return bool(self.planes)

    def visible_planes(self, now: float) -> list[Plane]:
        """Return planes that are airborne and still flying."""
        return [p for p in self.planes if p.has_taken_off(now) and not p.dead]

    def toggle_sprites(self) -> bool:
        self.show_sprites = not self.show_sprites
        return self.show_sprites

    def toggle_hitboxes(self) -> bool:
        self.show_hitboxes = not self.show_hitboxes
        return self.show_hitboxes