from radarsim.entities import Plane, Tower
from radarsim.quadtree import (
    QuadTree,
    boxes_intersect,
    check_collisions,
    handle_collisions,
    in_any_tower,
)


def plane_at(x, y, start_time=0):
    return Plane(start=(x, y), end=(x + 100.0, y + 100.0), speed=10, start_time=start_time)


def test_boxes_touching_edges_intersect():
    assert boxes_intersect(plane_at(0.0, 0.0), plane_at(20.0, 0.0))


def test_boxes_apart_do_not_intersect():
    assert not boxes_intersect(plane_at(0.0, 0.0), plane_at(21.0, 0.0))
    assert not boxes_intersect(plane_at(0.0, 0.0), plane_at(0.0, 21.0))


def test_box_positions_are_truncated():
    assert boxes_intersect(plane_at(0.0, 0.0), plane_at(20.9, 0.0))


def test_in_any_tower_boundary():
    towers = [Tower(x=100.0, y=100.0, radius=50)]
    assert in_any_tower(plane_at(150.0, 100.0), towers)
    assert not in_any_tower(plane_at(151.0, 100.0), towers)
    assert not in_any_tower(plane_at(150.0, 100.0), [])


def test_collision_outside_towers_kills_both():
    a, b = plane_at(10.0, 10.0), plane_at(15.0, 15.0)
    handle_collisions([a, b], [])
    assert a.dead and b.dead


def test_collision_in_tower_of_first_plane_is_safe():
    a, b = plane_at(10.0, 10.0), plane_at(15.0, 15.0)
    handle_collisions([a, b], [Tower(x=10.0, y=10.0, radius=3)])
    assert not a.dead and not b.dead


def test_only_first_plane_protection_counts():
    outside, inside = plane_at(10.0, 10.0), plane_at(25.0, 10.0)
    handle_collisions([outside, inside], [Tower(x=25.0, y=10.0, radius=2)])
    assert outside.dead and inside.dead


def test_distant_planes_survive():
    a, b = plane_at(10.0, 10.0), plane_at(500.0, 500.0)
    handle_collisions([a, b], [])
    assert not a.dead and not b.dead


def test_root_never_subdivides():
    tree = QuadTree(0, 0, 1920, 1080)
    planes = [plane_at(float(i * 50), 10.0) for i in range(15)]
    for plane in planes:
        tree.insert(plane)
    assert not tree.divided
    assert list(tree.buckets()) == [planes]


def test_plane_outside_area_is_ignored():
    tree = QuadTree(0, 0, 1920, 1080)
    tree.insert(plane_at(-5.0, 0.0))
    assert list(tree.buckets()) == [[]]


def test_full_node_subdivides_and_moves_planes():
    tree = QuadTree(0, 100, 64, 64, capacity=2)
    planes = [plane_at(10.0, 110.0), plane_at(50.0, 110.0), plane_at(10.0, 150.0)]
    for plane in planes:
        tree.insert(plane)
    assert tree.divided
    assert tree.planes == []
    stored = [p for bucket in tree.buckets() for p in bucket]
    assert len(stored) == len(planes)
    assert set(map(id, stored)) == set(map(id, planes))


def test_plane_on_quarter_border_lands_in_both():
    tree = QuadTree(0, 100, 64, 64, capacity=1)
    tree.insert(plane_at(10.0, 110.0))
    border = plane_at(32.0, 116.0)
    tree.insert(border)
    count = sum(1 for bucket in tree.buckets() for p in bucket if p is border)
    assert count == 2


def test_check_collisions_inside_subdivided_tree():
    tree = QuadTree(0, 100, 64, 64, capacity=1)
    a, b = plane_at(5.0, 105.0), plane_at(8.0, 108.0)
    tree.insert(a)
    tree.insert(b)
    check_collisions(tree, [])
    assert a.dead and b.dead