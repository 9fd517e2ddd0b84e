from radarsim.entities import Plane, Tower
from radarsim.parsing import parse_scenario
from radarsim.simulation import Simulation


def make(start, end, speed=20, start_time=0):
    return Plane(start=start, end=end, speed=speed, start_time=start_time)


def test_no_move_before_interval():
    plane = make((0.0, 0.0), (100.0, 0.0))
    sim = Simulation(planes=[plane])
    assert sim.move_planes(0.04) == 0
    assert plane.x == 0.0


def test_move_along_x_axis():
    plane = make((0.0, 0.0), (100.0, 0.0))
    sim = Simulation(planes=[plane])
    assert sim.move_planes(0.1) == 1
    assert plane.x == 1.0
    assert plane.y == 0.0


def test_moves_are_throttled():
    plane = make((0.0, 0.0), (100.0, 0.0))
    sim = Simulation(planes=[plane])
    sim.move_planes(0.1)
    first = plane.x
    assert sim.move_planes(0.12) == 0
    assert plane.x == first
    sim.move_planes(0.2)
    assert plane.x > first


def test_movement_stops_at_first_waiting_plane():
    a = make((0.0, 0.0), (100.0, 0.0))
    b = make((0.0, 500.0), (100.0, 500.0), start_time=10)
    c = make((0.0, 900.0), (100.0, 900.0))
    sim = Simulation(planes=[a, b, c])
    assert sim.move_planes(1.0) == 1
    assert a.x > 0.0
    assert b.x == 0.0 and c.x == 0.0


def test_landing_then_removal_ends_simulation():
    plane = make((0.0, 0.0), (1.0, 1.0), speed=100)
    sim = Simulation(planes=[plane])
    assert sim.update(0.1) is True
    assert plane.dead
    assert sim.visible_planes(0.1) == []
    assert sim.update(0.2) is False
    assert sim.planes == []


def test_remove_dead_counts():
    a = make((0.0, 0.0), (100.0, 100.0))
    b = make((300.0, 300.0), (400.0, 400.0))
    a.dead = True
    sim = Simulation(planes=[a, b])
    assert sim.remove_dead() == 1
    assert sim.planes == [b]


def test_visible_planes_respect_takeoff():
    early = make((0.0, 0.0), (100.0, 100.0))
    late = make((300.0, 300.0), (400.0, 400.0), start_time=5)
    sim = Simulation(planes=[early, late])
    assert sim.visible_planes(1.0) == [early]
    assert sim.visible_planes(5.0) == [early, late]


def test_collision_during_update():
    a = make((50.0, 50.0), (500.0, 500.0))
    b = make((55.0, 55.0), (900.0, 100.0))
    sim = Simulation(planes=[a, b])
    sim.update(0.1)
    assert a.dead and b.dead
    assert sim.visible_planes(0.1) == []


def test_tower_prevents_collision():
    a = make((50.0, 50.0), (500.0, 500.0))
    b = make((55.0, 55.0), (900.0, 100.0))
    sim = Simulation(planes=[a, b], towers=[Tower(x=50.0, y=50.0, radius=100)])
    assert sim.update(0.1) is True
    assert not a.dead and not b.dead


def test_toggles_flip_back_and_forth():
    sim = Simulation()
    assert sim.toggle_sprites() is False
    assert sim.toggle_sprites() is True
    assert sim.toggle_hitboxes() is False
    assert sim.show_sprites and not sim.show_hitboxes


def test_from_scenario_copies_entities():
    scenario = parse_scenario("A 0 0 100 100 10 0\nT 5 5 20\n")
    sim = Simulation.from_scenario(scenario)
    assert len(sim.planes) == 1
    assert len(sim.towers) == 1
    assert sim.towers[0].radius == 20