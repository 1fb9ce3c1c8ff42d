# quadgrid

A small, generic quadtree for storing values attached to axis-aligned
rectangles and finding them again by area or by distance.

The tree covers a fixed area that starts at `(0, 0)` and is subdivided ahead
of time to a chosen depth. Every rectangle is stored in the deepest node that
fully contains it. A rectangle that does not fit inside the tree's area is
rejected. Any Python object can be stored as a value.

## Installation

```
pip install quadgrid
```

## Usage

```python
from quadgrid.tree import QuadTree

tree = QuadTree(100, 100, 4)   # width, height, depth

tree.add(10, 10, 5, 5, "a")    # x, y, w, h, value -> True if stored
tree.add(40, 10, 4, 4, "b")
tree.add(200, 200, 1, 1, "c")  # outside the area -> False

len(tree)                      # 2 (same as tree.size())

tree.get(9, 9, 11, 11)         # "a": the first item overlapping the region
tree.get(60, 60, 5, 5, None)   # the default when nothing is there

for entry in tree.query(0, 0, 50, 50):
    print(entry.x, entry.y, entry.w, entry.h, entry.value)

tree.move(10, 10, 50, 50)      # move the item covering (10, 10); True on success
tree.delete(40, 10)            # remove one item covering (40, 10); True on success
```

Query regions are clipped to the tree's area before searching. `query` and
`k_nearest` are generators yielding `Entry` objects, frozen dataclasses with
`x`, `y`, `w`, `h` and `value`.

`move` keeps the item's width and height. If the new position lies outside
the tree's area, the item is removed and `move` returns `False`.

### Nearest items

`k_nearest(x, y, distance, k)` yields up to `k` items whose centres lie
within `distance` of the point `(x, y)`:

```python
for entry in tree.k_nearest(3, 3, 5, 3):
    print(entry.value)
```

Items are yielded in the order the tree visits them, not sorted by distance.

### Lower-level pieces

`quadgrid.rect.Rect` is the frozen rectangle type the tree is built from,
given by its corners `x0`, `y0`, `x1`, `y1`. It has the constructor
`Rect.from_size(x, y, w, h)`, the properties `width`, `height` and `center`,
and the methods `pad`, `clip`, `contains_point`, `contains_rect`, `overlaps`
and `split` (upper-left, upper-right, lower-left, lower-right quarters).

`quadgrid.node.Node` is a single tree node, with `grow`, `insert`, `search`
and `walk` (generators of `quadgrid.node.Item`), `size`, and `delete`, which
returns the removed `Item` or `None`.

## Running the tests

```
pip install -e ".[test]"
pytest
```