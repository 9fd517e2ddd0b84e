"""Spatial partitioning of planes and detection of mid-air collisions."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from itertools import combinations

from radarsim.entities import PLANE_SIZE, Plane, Tower

SCREEN_WIDTH = 1920
SCREEN_HEIGHT = 1080
NODE_CAPACITY = 10

# A node only splits when its top edge lies at least this far past its width.
MIN_SPLIT = 25


class QuadTree:
    """A region of the screen holding planes, split into quarters when full."""

    def __init__(
        self,
        left: int,
        top: int,
        width: int,
        height: int,
        capacity: int = NODE_CAPACITY,
    ) -> None:
        self.left = left
        self.top = top
        self.width = width
        self.height = height
        self.capacity = capacity
        self.planes: list[Plane] = []
        self.ne: QuadTree | None = None
        self.nw: QuadTree | None = None
        self.se: QuadTree | None = None
        self.sw: QuadTree | None = None

    @property
    def divided(self) -> bool:
        return self.ne is not None

    def contains(self, plane: Plane) -> bool:
        """Return whether the plane's position lies within this region."""
        return (
            self.left <= plane.x <= self.left + self.width
            and self.top <= plane.y <= self.top + self.height
        )

    def _quarters(self) -> tuple[QuadTree, QuadTree, QuadTree, QuadTree]:
        assert self.ne and self.nw and self.se and self.sw
        return self.ne, self.nw, self.se, self.sw

    def _subdivide(self) -> None:
        half_w = self.width // 2
        half_h = self.height // 2
        self.ne = QuadTree(self.left + half_w, self.top, half_w, half_h, self.capacity)
        self.nw = QuadTree(self.left, self.top, half_w, half_h, self.capacity)
        self.se = QuadTree(
            self.left + half_w, self.top + half_h, half_w, half_h, self.capacity
        )
        self.sw = QuadTree(self.left, self.top + half_h, half_w, half_h, self.capacity)
        held, self.planes = self.planes, []
        for plane in held:
            self.insert(plane)

    def insert(self, plane: Plane) -> None:
        """Store the plane in this region or in every quarter that holds it."""
        if not self.contains(plane):
            return
        if self.top - self.width < MIN_SPLIT:
            self.planes.append(plane)
            return
        if not self.divided:
            if len(self.planes) < self.capacity:
                self.planes.append(plane)
            else:
                self._subdivide()
        if self.divided:
            ne, nw, se, sw = self._quarters()
            for child in (ne, nw, sw, se):
                child.insert(plane)

    def buckets(self) -> Iterator[list[Plane]]:
        """Yield the plane list of every node, quarters before their parent."""
        if self.divided:
            for child in self._quarters():
                yield from child.buckets()
        yield self.planes


def in_any_tower(plane: Plane, towers: Iterable[Tower]) -> bool:
    """Return whether some tower's area covers the plane."""
    return any(tower.covers(plane.x, plane.y) for tower in towers)


def boxes_intersect(first: Plane, second: Plane) -> bool:
    """Return whether the hitboxes of two planes touch or overlap."""
    ax, ay = int(first.x), int(first.y)
    bx, by = int(second.x), int(second.y)
    return (
        ax + PLANE_SIZE >= bx
        and ax <= bx + PLANE_SIZE
        and ay + PLANE_SIZE >= by
        and ay <= by + PLANE_SIZE
    )


def check_collisions(tree: QuadTree, towers: list[Tower]) -> None:
    """Destroy every pair of touching planes sharing a node.

    A crash is averted only when the first plane of the pair is under a
    tower's protection.
    """
    for bucket in tree.buckets():
        for first, second in combinations(bucket, 2):
            if boxes_intersect(first, second) and not in_any_tower(first, towers):
                first.dead = True
                second.dead = True


def handle_collisions(planes: Iterable[Plane], towers: list[Tower]) -> None:
    """Sort all planes into a screen-sized tree and resolve their collisions."""
    tree = QuadTree(0, 0, SCREEN_WIDTH, SCREEN_HEIGHT)
    for plane in planes:
        tree.insert(plane)
    check_collisions(tree, towers)