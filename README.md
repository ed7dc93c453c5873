# orbitsim

A two-dimensional gravitational simulator. You build a small planetary
system in an editor window, save it to a plain-text `.sss` file, and then
watch it evolve under Newtonian gravity. Planets that touch merge into one
body that keeps their total mass and momentum. The simulator tracks
kinetic, potential and total energy, and it counts the energy that
collisions lose.

## Installation

```
pip install .
```

To run the test suite, install the test extra:

```
pip install ".[test]"
pytest
```

## Running

```
orbitsim [CHOICE] [NAME] [--font FONT] [--textures FOLDER]
```

`CHOICE` is `o` (or `open`) to open an existing universe, or `c` (or
`create`) to start a new one. `NAME` is the file name without the `.sss`
extension. Either one that is left out is asked for on the terminal.
Opening a file that does not exist, or creating one that already exists,
is an error.

The font defaults to `Arial.ttf` and the texture folder to `Texture`,
both in the current directory. The folder's `.png` files are the planet
textures. It must also hold `standard.png`, which any planet whose texture
name is not found is switched to.

On an error the program prints `Error: ...` to standard error and exits
with status 1.

### Editor window

- **Save** writes the universe to disk and brings back the **Animation**
  button, which is hidden after any other click.
- **Animation** opens the animation (an empty universe shows the message
  "Add a planet" instead).
- **Add planet** places a planet at the centre of the view and saves the
  file. The first planet gets mass 1000 and radius 100; later ones copy the
  mass and radius of the current planet.
- **Select planet** and **Next planet** pick a planet. While selecting,
  clicking a planet makes it current, and clicking the current one again
  marks it selected.
- Shortcuts while a planet is selected: `M` mass, `P` position,
  `V` velocity, `R` radius, `T` texture, `X` delete. A right click on the
  data button cycles through these actions and a left click on it starts
  the chosen one.
- Mass, radius and texture are typed on the terminal. Position and
  velocity are set by clicking in the window; the velocity is the vector
  from the planet to the click, divided by 500.
- `Space` marks the current planet selected. `W` `A` `S` `D` move the
  camera.
- Closing the window quits the program.

### Animation window

- `Space` pauses or resumes the animation.
- `Up` and `Down` step through the planets. `P` follows the current planet.
- `O` starts building a group of planets. `Left` and `Right` move within
  the group, `Up` and `Down` change the planet at that position, `X`
  removes it from the group, and `Enter` or `C` follows the group's
  centroid.
- `W` `A` `S` `D` move the camera freely and stop following.
- The overlay shows a simulated date, the frame rate, and either the
  followed planet's data or the energies.
- Closing the window reloads the saved file and returns to the editor.

## File format

A `.sss` file holds one planet per line, with seven fields separated by
whitespace: mass, x, y, v_x, v_y, radius and texture name.

```
500 100 200 0.01 0.02 10 earth.png
20 -300 0 0.01 0.02 2 moon.png
```

Lines of spaces only are ignored. Any other malformed line, including one
with anything after the texture name, makes loading fail with
`orbitsim.fileuniverse.UniverseFileError`.

## Library use

```python
from orbitsim.physics import Newton, PlanetState
from orbitsim.universe import Universe

universe = Universe(Newton())
universe.add(PlanetState(m=1e10, x=0, y=0, v_x=0, v_y=0, r=50))
universe.add(PlanetState(m=1, x=100, y=0, v_x=0, v_y=0, r=1))
universe.evolve(0.1)
universe.calculate_energy()
print(universe[1].x, universe.total_energy)
```

- `Newton.force(a, b)` returns the force `b` exerts on `a` as `(f_x, f_y)`.
- `Universe.evolve(delta_t)` merges touching planets and advances the rest;
  it raises `ValueError` on an empty universe.
- `Universe.find_nearest_planet((x, y))` returns an index, or `None` when
  there are no planets.
- `orbitsim.fileuniverse.FileUniverse(newton, name, exists)` is a universe
  kept in `<name>.sss`: `add` appends the planet to the file, `remove` and
  `save` rewrite it.