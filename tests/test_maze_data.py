import random
from collections import deque

import pytest

from maze_data import Grid, generate_maze


def reachable_from_start(grid):
    seen = {(0, 0)}
    q = deque([(0, 0)])
    while q:
        r, c = q.popleft()
        for side, dr, dc in [("top", -1, 0), ("right", 0, 1), ("bottom", 1, 0), ("left", 0, -1)]:
            if grid.can_move(r, c, side) and (r + dr, c + dc) not in seen:
                seen.add((r + dr, c + dc))
                q.append((r + dr, c + dc))
    return seen


def count_simple_paths(grid, start, goal):
    adjacency = {}
    for a, b in grid.open_edges():
        adjacency.setdefault(a, []).append(b)
        adjacency.setdefault(b, []).append(a)
    count = 0
    stack = [(start, {start})]
    while stack:
        node, path = stack.pop()
        if node == goal:
            count += 1
            continue
        for nxt in adjacency.get(node, []):
            if nxt not in path:
                stack.append((nxt, path | {nxt}))
    return count


def wall_signature(grid):
    return [tuple(cell.walls[s] for s in ("top", "right", "bottom", "left")) for cell in grid]


@pytest.mark.parametrize("size", [1, 2, 3, 7, 15])
def test_every_cell_visited(size):
    grid = generate_maze(size, random.Random(size))
    assert all(cell.visited for cell in grid)


@pytest.mark.parametrize("size", [1, 2, 5, 15, 30])
def test_spanning_tree(size):
    grid = generate_maze(size, random.Random(42))
    assert len(grid.open_edges()) == size * size - 1
    assert len(reachable_from_start(grid)) == size * size


def test_walls_symmetric():
    grid = generate_maze(12, random.Random(7))
    for cell in grid:
        if cell.col + 1 < grid.size:
            right = grid.cell(cell.row, cell.col + 1)
            assert cell.walls["right"] == right.walls["left"]
        if cell.row + 1 < grid.size:
            below = grid.cell(cell.row + 1, cell.col)
            assert cell.walls["bottom"] == below.walls["top"]


def test_outer_border_stays_closed():
    grid = generate_maze(9, random.Random(3))
    for i in range(grid.size):
        assert grid.cell(0, i).walls["top"]
        assert grid.cell(grid.size - 1, i).walls["bottom"]
        assert grid.cell(i, 0).walls["left"]
        assert grid.cell(i, grid.size - 1).walls["right"]


def test_unique_path_between_cells():
    grid = generate_maze(4, random.Random(11))
    cells = [(r, c) for r in range(4) for c in range(4)]
    for a in cells[::3]:
        for b in cells:
            if a != b:
                assert count_simple_paths(grid, a, b) == 1, (a, b)


def test_same_seed_same_maze():
    first = generate_maze(15, random.Random(314159))
    second = generate_maze(15, random.Random(314159))
    assert wall_signature(first) == wall_signature(second)


def test_different_seeds_vary():
    layouts = {tuple(wall_signature(generate_maze(10, random.Random(s)))) for s in range(5)}
    assert len(layouts) > 1


class ScriptedChoice:
    """Selalu ambil kandidat di posisi tetap, dan catat flag visited saat dipanggil."""

    def __init__(self, index):
        self.index = index
        self.calls = []

    def choice(self, seq):
        self.calls.append([c.visited for c in seq])
        return seq[min(self.index, len(seq) - 1)]


def test_single_cell_maze():
    rng = ScriptedChoice(0)
    grid = generate_maze(1, rng)
    cell = grid.cell(0, 0)
    assert cell.visited
    assert cell.open_walls() == []
    assert grid.open_edges() == set()
    assert rng.calls == []


def test_two_by_two_first_choice():
    # Kandidat urut north, east, south, west: selalu ambil yang pertama
    grid = generate_maze(2, ScriptedChoice(0))
    assert grid.open_edges() == {
        ((0, 0), (0, 1)),
        ((0, 1), (1, 1)),
        ((1, 0), (1, 1)),
    }
    assert all(cell.visited for cell in grid)


def test_two_by_two_last_choice():
    grid = generate_maze(2, ScriptedChoice(3))
    assert grid.open_edges() == {
        ((0, 0), (1, 0)),
        ((1, 0), (1, 1)),
        ((0, 1), (1, 1)),
    }


def test_choice_gets_only_unvisited_neighbors():
    rng = ScriptedChoice(1)
    generate_maze(6, rng)
    assert rng.calls
    for flags in rng.calls:
        assert flags
        assert not any(flags)


def test_neighbors_filtered_by_bounds():
    grid = Grid.create(3)
    assert [(n.row, n.col) for n in grid.neighbors_of(grid.cell(0, 0))] == [(0, 1), (1, 0)]
    assert len(grid.neighbors_of(grid.cell(1, 1))) == 4
    grid.cell(0, 1).visited = True
    assert [(n.row, n.col) for n in grid.unvisited_neighbors_of(grid.cell(0, 0))] == [(1, 0)]


def test_new_grid_is_closed():
    grid = Grid(4)
    assert len(list(grid)) == 16
    assert all(not c.visited and c.open_walls() == [] for c in grid)


def test_open_wall_between_clears_both_sides():
    grid = Grid(2)
    a, b = grid.cell(1, 1), grid.cell(0, 1)
    grid.open_wall_between(a, b)
    assert a.open_walls() == ["top"]
    assert b.open_walls() == ["bottom"]


@pytest.mark.parametrize("target", [(0, 0), (1, 1), (0, 2)])
def test_open_wall_between_rejects_non_adjacent(target):
    grid = Grid(3)
    with pytest.raises(ValueError):
        grid.open_wall_between(grid.cell(0, 0), grid.cell(*target))


@pytest.mark.parametrize("size", [0, -3, 2.5, True])
def test_invalid_size(size):
    with pytest.raises(ValueError):
        generate_maze(size)


def test_cell_out_of_bounds():
    with pytest.raises(IndexError):
        Grid(3).cell(3, 0)


def test_can_move_respects_border_and_side():
    grid = Grid(2)
    grid.open_wall_between(grid.cell(0, 0), grid.cell(0, 1))
    assert grid.can_move(0, 0, "right")
    assert not grid.can_move(0, 0, "bottom")
    assert not grid.can_move(0, 0, "top")
    with pytest.raises(ValueError):
        grid.can_move(0, 0, "diagonal")


def test_to_text():
    grid = Grid(2)
    grid.open_wall_between(grid.cell(0, 0), grid.cell(0, 1))
    grid.open_wall_between(grid.cell(0, 1), grid.cell(1, 1))
    assert grid.to_text() == "\n".join([
        "+---+---+",
        "|       |",
        "+---+   +",
        "|   |   |",
        "+---+---+",
    ])
