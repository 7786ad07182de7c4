# raycub

`raycub` checks the map section of `.cub` scene files and draws a first-person
view of a grid map with a DDA ray caster. It is written in pure Python and
needs only the standard library.

## Modules

### `raycub.mapfile`: map checks

- `check_map_path(path)` checks that the file exists, can be read and ends in
  `.cub`. It returns a `pathlib.Path`.
- `check_forbidden(line)` rejects any character other than `0`, `1`, `N`, `S`,
  `W`, `E` and space.
- `scan_map(lines)` takes the lines that follow the element section, with
  their newlines already removed. It returns a `MapLayout` with `width`,
  `height` and `leading_blank`, where `leading_blank` counts the blank lines
  before the grid. A blank line inside the grid is an error, and so is a
  section that has no grid.
- `extract_map(lines, skip, height)` returns the `height` rows that come after
  the first `skip` lines.
- Each problem raises `MapError`, whose `message` attribute holds the text.
  `report_error(message, stream=None)` writes `Error\n<message>\n` to the
  stream, or to standard output when no stream is given, and returns `1`.

### `raycub.raycast`: the DDA step

- `start_direction(heading)` gives `(direction, camera_plane)` for `N`, `S` or
  `W`. Any other heading faces east.
- `ray_direction(direction, camera, column, width)` and
  `delta_distances(ray_dir)` set up a ray.
- `cast_ray(grid, pos, ray_dir)` walks the grid until it enters a `"1"` cell
  and returns a `RayHit` (`map_x`, `map_y`, `side`, `perp_dist`, `ray_dir`).
  It raises `ValueError` if the ray leaves the grid.
- `wall_span(perp_dist, height)`, `texture_index(hit, pos)` (0 is north, 1
  south, 2 west, 3 east) and `texture_x(hit, pos, texture_size)` turn a hit
  into a slice of a column to draw.
- The defaults are `WINDOW_WIDTH = 1920`, `WINDOW_HEIGHT = 1080`,
  `TEXTURE_W_H = 360` and `FOV_FACTOR = 0.66`.

### `raycub.render`: drawing a view

- `Frame(width, height)` is a grid of integer colours. Read a pixel with
  `pixel(x, y)`. `fill_ceiling_floor(ceiling, floor)` paints the top half with
  `ceiling` and the bottom half with `floor`.
- `Player.from_start(grid, (x, y))` puts the viewer in the middle of the start
  cell and faces it the way the cell's letter says.
- `draw_column(frame, column, hit, pos, textures)` draws one textured wall
  slice. `render(frame, grid, player, textures, ceiling, floor)` draws the whole
  view. `textures` holds four square textures in north, south, west, east
  order, each a flat list of colours stored row by row. A colour of `0` is drawn
  as `1`.

### Helpers

- `raycub.strings` has C-style character tests (`is_alpha`, `is_digit`,
  `is_space`, …) and string functions (`atoi`, `itoa`, `split`, `strtrim`,
  `substr`, `strnstr`, `strcmp`, `strncmp`, `strchr`, `strrchr`, `strmapi`,
  `len_compare`). The search functions return an index, or `None` when nothing
  is found.
- `raycub.buffers` offers `memchr`, `memcmp`, `memcpy`, `memmove`, `memset`,
  `bzero`, `calloc`, `strlcpy` and `strlcat` over `bytes` and `bytearray`. A
  request that would reach past the end of a buffer raises `ValueError`.
- `raycub.lines` has `LineReader(stream, buffer_size=10)`, which reads
  `buffer_size` characters at a time. `next_line()` returns a line with its
  newline, or `None` at the end of the input. The reader can also be iterated.
  `read_lines(stream, buffer_size)` yields lines without their newlines, and
  `remove_nl(text)` drops a single trailing newline.
- `raycub.linked` has `LinkedList` with `push_front`, `push_back`, `last`,
  `len()`, iteration, `clear(release)`, `for_each(func)` and
  `map(func, release)`.
- `raycub.printf` has `format_printf(fmt, *args)`, `printf(fmt, *args)`,
  `put_char`, `put_str`, `put_endl` and `put_nbr`. The conversions it supports
  are `%c %s %p %d %i %u %x %X %%`.

## Example

```python
from raycub.render import Frame, Player, render

grid = [
    "11111",
    "10001",
    "10N01",
    "10001",
    "11111",
]
textures = [[1, 2, 3, 4]] * 4          # four 2x2 textures
player = Player.from_start(grid, (2, 2))
frame = render(Frame(64, 48), grid, player, textures, ceiling=0x87CEEB, floor=0x444444)
print(frame.pixel(32, 0), frame.pixel(32, 24))
```

## What it does not do

- It has no window, keyboard or mouse handling, no movement or rotation, and
  no minimap. `render` only fills a `Frame` in memory.
- It does not read the texture (`NO`, `SO`, `WE`, `EA`) or colour (`F`, `C`)
  element lines of a scene file. It does not load texture images.
- It does not check that the map is closed by walls, and it does not find the
  start cell for you. Both the start position and the texture colours are
  inputs you supply.
- It has no command-line program.

## Running the tests

```
pip install -e .[test]
pytest
```