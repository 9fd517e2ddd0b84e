# radarsim

A small air traffic radar simulation. Planes fly in straight lines from a
start point towards an end point. Control towers cover circular areas. When
two planes' hitboxes touch, both are destroyed unless the first plane of the
pair is inside a tower's area. A plane that passes its destination lands and
is removed. The simulation stops once no plane is left.

## Installation

```
pip install .
```

## Running

```
radarsim path/to/scenario.rdr
```

`radarsim -h` prints a usage text. Called with no argument or with more than
one, the command does nothing and exits with status 0. If the scenario file
cannot be read, or an entry lacks values, it prints an error and exits with
status 84.

While the window is open:

- `S` shows or hides the plane and tower sprites.
- `L` shows or hides the hitboxes: squares for planes, circles for towers.
- Closing the window ends the simulation.

The window is 1920 by 1080 pixels and draws at up to 60 frames per second.
Images are read from `assets/bg.png`, `assets/plane.png` and
`assets/tower.png`, relative to the working directory; an image that cannot
be loaded is simply not drawn. The package does not ship these images.

## Scenario files

A scenario is a text file of words made of letters and digits, separated by
any other characters. The word `A` starts an aircraft, the word `T` a tower,
each followed by whole numbers:

```
A 100 200 800 600 40 0
A 800 600 100 200 35 3
T 450 400 150
```

- `A start_x start_y end_x end_y speed takeoff_delay` is an aircraft. It takes
  off `takeoff_delay` seconds after the simulation starts.
- `T x y radius` is a control tower.

Numbers are read with `parse_int`: any run of `+` and `-` signs may come
before the digits, and an unreadable or out-of-range value counts as 0. An
entry with too few words after it raises `ValueError`.

## How the simulation behaves

- Once more than 0.05 seconds have passed since the last step, planes are
  moved, in file order, by a twentieth of their speed along their heading.
  Moving stops at the first plane that has not yet taken off.
- Only planes flying diagonally land; a plane whose start and end share an x
  or y coordinate keeps flying past its destination.
- Each frame the planes are sorted into a `QuadTree` covering the screen, and
  only planes sharing a node are checked against each other. Hitboxes are 20
  pixel squares.

## Using it as a library

```python
from radarsim.parsing import load_scenario
from radarsim.simulation import Simulation

scenario = load_scenario("scenario.rdr")
simulation = Simulation.from_scenario(scenario)
simulation.update(now=1.0)
print(len(simulation.visible_planes(now=1.0)))
```

- `radarsim.parsing`: `parse_scenario`, `load_scenario`, `split_words`,
  `parse_int` and the `Scenario` dataclass.
- `radarsim.entities`: `Plane`, `Tower`, `make_plane`, `make_tower`.
- `radarsim.quadtree`: `QuadTree`, `handle_collisions`, `check_collisions`,
  `boxes_intersect`, `in_any_tower`.
- `radarsim.simulation`: `Simulation`, with `update`, `move_planes`,
  `remove_dead`, `visible_planes`, `toggle_sprites` and `toggle_hitboxes`.
  Times passed to these methods are seconds since the simulation started.
- `radarsim.app`: `run_window` opens the window for a `Simulation`; `main`
  is the command line entry point.

## Tests

```
pip install ".[test]"
pytest
```