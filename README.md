# game_algorithms

A small collection of classic algorithms of the kind met early in game
programming. It covers elementary and divide-and-conquer sorts, linear and
binary search, binary trees, emergency-room style ranking, and monsters
walking a fixed path through a maze.

The package has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

### `game_algorithms.sorting`

- `sorted_copy(nums)` returns an ascending list made with the built-in sort.
- `bubble_sort(nums)`, `selection_sort(nums)` and `insertion_sort(nums)`
  each take any iterable and return a new ascending list. Bubble sort stops
  as soon as a pass makes no swap.
- `quick_sort(nums, start=0, end=None)` sorts `nums[start:end + 1]` in
  place. The leftmost element is the pivot.
- `merge_sort(nums, left=0, right=None)` sorts `nums[left:right + 1]` in
  place with a stable top-down merge sort.

For `quick_sort` and `merge_sort` the upper bound is inclusive and defaults
to the last index. A non-empty range that falls outside the sequence raises
`IndexError`.

```python
from game_algorithms.sorting import insertion_sort, quick_sort

insertion_sort([3, 5, 9, 1, 2])   # [1, 2, 3, 5, 9]

data = [1, 5, 9, 3, 2, 4, 6, 8, 7, 0]
quick_sort(data)                  # data is now [0, 1, ..., 9]
```

### `game_algorithms.searching`

- `linear_search(items, target)` returns the index of the first item equal
  to `target`, or `None`.
- `binary_search(items, target)` returns an index of `target` in an
  ascending sequence, or `None`.
- `binary_search_recursive(items, target, left=0, right=None)` is the
  recursive form. It searches `items[left:right + 1]`, where `right` is
  inclusive, and raises `IndexError` for a range outside the sequence.
- `find_nickname(users, user_id)` returns the nickname paired with
  `user_id` in a list of `(id, nickname)` pairs, or `None`.

### `game_algorithms.tree`

- `Node(value, left=None, right=None)` is a tree node.
- `pre_order(root)`, `in_order(root)` and `post_order(root)` return the
  node values as lists in the order of each traversal.
- `BinarySearchTree(values=())` is an unbalanced search tree that ignores
  duplicate values. It has the following members:
  - `insert(value)`
  - `delete(value)`, which replaces a node that has two children by its
    in-order successor
  - `in_order()`
  - iteration in ascending order

```python
from game_algorithms.tree import BinarySearchTree

tree = BinarySearchTree([4, 2, 6, 9, 7, 1])
tree.delete(6)
list(tree)  # [1, 2, 4, 7, 9]
```

### `game_algorithms.triage`

- `emergency_order(people)` gives each patient a 1-based treatment rank.
  The highest severity gets rank 1. Patients with equal severity keep their
  original order.

```python
from game_algorithms.triage import emergency_order

emergency_order([10, 5, 7, 25, 4, 27, 9])  # [3, 5, 4, 2, 7, 1, 6]
```

### `game_algorithms.maze`

- `MAZE` is the sample grid, indexed `MAZE[y][x]`, with `0` for floor and
  `1` for wall.
- `START` is the sample start position.
- `DEFAULT_PATH` is the sample path.
- `Direction` is an `IntEnum` with the values `UP`, `DOWN`, `LEFT` and
  `RIGHT`, and `dx` and `dy` properties.
- `Monster(x, y, path)` follows its path one step at a time through
  `advance()`. It has a `finished()` check and a `position` property.
  Calling `advance()` after the last step raises `RuntimeError`.
- `render_maze(grid)` draws a grid as text, with spaces for floor and `#`
  for walls.
- `simulate_monsters(path, start=START, monster_count=5, interval=2)` yields
  the positions of all spawned monsters after each tick. A new monster
  appears every `interval` ticks until `monster_count` exist.

## Commands

Each module has a command-line entry point.

**Sorting**

```
game-sorting [-a {bubble,builtin,insertion,merge,quick,selection}] [numbers ...]
```

This sorts the given integers. With no numbers, it runs each algorithm on
sample data.

**Searching**

```
game-searching [--binary] [target [numbers ...]]
```

This reports whether `target` is among the numbers. It exits with status 1
when the target is not found. `--binary` sorts the numbers and uses binary
search. With no arguments, it runs the sample searches and the nickname
lookup.

**Trees**

```
game-tree [--delete VALUE] [values ...]
```

This prints the three traversals of a sample tree. It then builds a search
tree from the values, or from a sample list, prints it in order, and
optionally deletes a value.

**Triage**

```
game-triage [severities ...]
```

This prints the treatment ranks for the given severities, or for a sample
list.

**Maze**

```
game-maze [--monsters N] [--interval N] [--delay SECONDS]
```

This draws the maze and animates the monsters with ANSI escape codes.

## Limitations

The maze module does not find a way through the maze. The monsters only
follow the fixed path they are given, and nothing checks that path against
the walls.