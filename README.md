# convexhull

Finds the convex hull of a set of points in the plane with the Graham scan.
Two variants are provided, which differ only in how the points are sorted
by polar angle around the reference point:

- `graham_scan_slow` sorts with insertion sort;
- `graham_scan_fast` sorts with merge sort.

The reference point is the point with the lowest `y` coordinate, the one
with the lowest `x` breaking ties. Points around it are ordered by polar
angle, and points at the same angle by their distance from it, closest
first. The scan keeps a point only where the boundary makes a
counter-clockwise turn, so the hull is returned in counter-clockwise order
starting from the reference point.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
convexhull [-a {fast,slow}] [input] [prefix]
```

- `input`: the input data file. If it is left out, the command asks for
  it, and asks again while the file named cannot be found.
- `prefix`: the output filename prefix. If it is left out, the command asks
  for it after the scan.
- `-a`, `--algorithm`: `fast` (merge sort, the default) or `slow`
  (insertion sort).

The command runs the Graham scan on the points, reports how long the scan
took in milliseconds of processor time, and writes the hull to
`<prefix>-fast.txt` or `<prefix>-slow.txt`, after the algorithm chosen.
On an unreadable or malformed file, or too few points, it prints an error
and exits with status 1.

The input file holds the number of points, followed by one `x y` pair per
point, separated by whitespace:

```
5
0 0
4 0
4 4
0 4
2 2
```

The output file has the same form: the number of hull points on the first
line, then each hull point with six decimal places:

```
4
0.000000 0.000000
4.000000 0.000000
4.000000 4.000000
0.000000 4.000000
```

## Library use

```python
from convexhull.geom import Point
from convexhull.scan import graham_scan_fast, graham_scan_slow

points = [Point(0, 0), Point(4, 0), Point(4, 4), Point(0, 4), Point(2, 2)]

for p in graham_scan_fast(points):
    print(p.x, p.y)
```

The scan needs at least three points; with fewer it raises `ValueError`.
The input is not modified: each function returns a new list.

Reading and writing the file format used by the command:

```python
from convexhull.cli import read_points, write_hull
from convexhull.scan import graham_scan_slow

points = read_points("points.txt")
write_hull("hull-slow.txt", graham_scan_slow(points))
```

`read_points` raises `ValueError` for an empty file, a bad count or
coordinate, or a file with fewer points than its count says.

The building blocks are public too:

- `convexhull.geom`: the frozen dataclass `Point`, `angle_orientation`
  (0 collinear, 1 clockwise, -1 counter-clockwise), `compare_polar_order`
  and `euclidean_distance`;
- `convexhull.sorting`: `insertion_sort` and `merge_sort`, which return
  points sorted by polar angle around a reference point;
- `convexhull.scan`: `get_reference_point`, which returns the points with
  the reference point moved to the front, and `graham_scan_convex_hull`,
  which scans points already in that order;
- `convexhull.stack`: a bounded `Stack` of points (32768 by default) that
  raises `StackOverflowError` and `StackUnderflowError`;
- `convexhull.timer`: a `Timer` that measures processor time in
  milliseconds, with `start` and `stop`, and can be used as a context
  manager; the result is in `elapsed_ms`.