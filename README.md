# yegfinder

An interactive map browser for finding restaurants near a point on a
2048×2048 map of the city, built on pygame.

The map is a raw RGB565 image: two bytes per pixel, row by row, high byte
first. The restaurant file holds 64-byte records, eight to a 512-byte block.
Each record is a little-endian 32-bit latitude and longitude (in 1e-5
degrees), a one-byte rating from 0 to 10 and a 55-byte name padded with zero
bytes.

The package does not ship a map image or a restaurant file; you supply both.

## Installation

```
pip install .
```

## Running

```
yegfinder MAP_IMAGE RESTAURANTS
```

Options:

- `--image-size N`: width and height of the map image in pixels (default 2048).
- `--start-block N`: the 512-byte block of the restaurant file where the
  records begin (default 0).
- `--count N`: the number of restaurants; by default it is worked out from the
  size of the file.

The command prints an error and exits with status 1 if the image file is
missing or the restaurant file cannot be opened.

Controls in the map view:

- Arrow keys: move the cursor. When it reaches an edge of the screen, the view
  jumps one screen towards that edge.
- Enter: open the list of restaurants nearest the cursor, sorted by Manhattan
  distance. The running time of each sort is printed.
- Click the upper button on the right: cycle the minimum star rating 1 to 5.
- Click the lower button: cycle the sort method (QSORT, ISORT, BOTH).
- A click anywhere right of the leftmost 60 columns also draws the restaurants
  on screen that meet the minimum rating.
- Escape or closing the window quits.

In the list, shown 21 rows to a page, Up and Down move the selection and Enter
centres the map on the selected restaurant.

## Using the library

```python
from yegfinder.restaurants import RestaurantStore, distances
from yegfinder.sorting import quick_sort

with RestaurantStore("restaurants.bin") as store:
    nearby = distances(store, 1024, 1024, min_rating=3)
    quick_sort(nearby)  # sorts in place by distance
    for entry in nearby[:5]:
        print(store.get(entry.index).name, entry.dist)
```

Modules:

- `yegfinder.geo`: `arduino_map`, `constrain`, `lon_to_x`, `lat_to_y`.
- `yegfinder.lcd_image`: `LcdImage.read_patch` reads rows of RGB565 pixels;
  `rgb565_to_rgb` expands one pixel.
- `yegfinder.restaurants`: `Restaurant` (`from_bytes`, `to_bytes`), `RestDist`,
  `RestaurantStore` (block-cached reading, `get`, `close`, iteration, context
  manager), `star_rating`, `distances`.
- `yegfinder.sorting`: in-place `quick_sort`, `insertion_sort` and `partition`
  on anything with a `dist` attribute.
- `yegfinder.viewport`: `MapView`, holding the window origin, cursor, rating
  and `SortMethod`; `Direction` for edge scrolling.
- `yegfinder.listing`: `sort_distances` (returns timings in milliseconds) and
  `RestaurantMenu` for paging through the list.
- `yegfinder.app`: `FinderApp` and the `main` entry point.

## Tests

```
pip install .[test]
pytest
```