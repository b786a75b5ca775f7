# maze_data.py
import logging
import random

logger = logging.getLogger(__name__)

# Arah: (nama dinding, dinding lawan, d_row, d_col)
DIRECTIONS = [
    ("top", "bottom", -1, 0),
    ("right", "left", 0, 1),
    ("bottom", "top", 1, 0),
    ("left", "right", 0, -1),
]
WALL_SIDES = tuple(side for side, _, _, _ in DIRECTIONS)


class Cell:
    """Satu sel maze: empat dinding + flag visited."""

    def __init__(self, row, col):
        self.row = row
        self.col = col
        self.walls = {side: True for side in WALL_SIDES}
        self.visited = False

    def has_wall(self, side):
        return self.walls[side]

    def open_walls(self):
        return [side for side in WALL_SIDES if not self.walls[side]]

    def __repr__(self):
        return f"Cell({self.row}, {self.col})"


class Grid:
    """Grid N x N berisi Cell. Index sama dengan (row, col) milik sel itu sendiri."""

    def __init__(self, size):
        if not isinstance(size, int) or isinstance(size, bool) or size <= 0:
            raise ValueError(f"grid size must be a positive integer, got {size!r}")
        self.size = size
        self.cells = [[Cell(r, c) for c in range(size)] for r in range(size)]

    @classmethod
    def create(cls, size):
        return cls(size)

    def cell(self, row, col):
        if not (0 <= row < self.size and 0 <= col < self.size):
            raise IndexError(f"cell ({row}, {col}) out of bounds for size {self.size}")
        return self.cells[row][col]

    def __iter__(self):
        for row in self.cells:
            yield from row

    def neighbors_of(self, cell):
        neighbors = []
        for _, _, dr, dc in DIRECTIONS:
            nr, nc = cell.row + dr, cell.col + dc
            if 0 <= nr < self.size and 0 <= nc < self.size:
                neighbors.append(self.cells[nr][nc])
        return neighbors

    def unvisited_neighbors_of(self, cell):
        return [n for n in self.neighbors_of(cell) if not n.visited]

    def open_wall_between(self, a, b):
        """Buka dinding bersama di kedua sel. b harus tepat satu langkah (atas/kanan/bawah/kiri) dari a."""
        offset = (b.row - a.row, b.col - a.col)
        for side, opposite, dr, dc in DIRECTIONS:
            if offset == (dr, dc):
                a.walls[side] = False
                b.walls[opposite] = False
                return
        raise ValueError(f"{a!r} and {b!r} are not adjacent")

    def can_move(self, row, col, side):
        """True kalau dinding di sisi itu terbuka dan tujuan masih di dalam grid."""
        for name, _, dr, dc in DIRECTIONS:
            if name == side:
                nr, nc = row + dr, col + dc
                if not (0 <= nr < self.size and 0 <= nc < self.size):
                    return False
                return not self.cell(row, col).walls[side]
        raise ValueError(f"unknown wall side: {side!r}")

    def open_edges(self):
        # Cukup cek kanan dan bawah supaya setiap lorong dihitung sekali
        edges = set()
        for cell in self:
            if not cell.walls["right"] and cell.col + 1 < self.size:
                edges.add(((cell.row, cell.col), (cell.row, cell.col + 1)))
            if not cell.walls["bottom"] and cell.row + 1 < self.size:
                edges.add(((cell.row, cell.col), (cell.row + 1, cell.col)))
        return edges

    def to_text(self):
        lines = ["+" + "---+" * self.size]
        for row in self.cells:
            middle = "|"
            bottom = "+"
            for cell in row:
                middle += "   " + ("|" if cell.walls["right"] else " ")
                bottom += ("---" if cell.walls["bottom"] else "   ") + "+"
            lines.append(middle)
            lines.append(bottom)
        return "\n".join(lines)


def generate_maze(size=15, rng=None):
    """
    Generate perfect maze pakai randomized DFS (iterative backtracking).

    rng cukup punya method choice(seq); default modul random.
    Pakai random.Random(seed) kalau butuh maze yang sama setiap kali.
    """
    if rng is None:
        rng = random

    grid = Grid(size)

    # Mulai dari pojok kiri atas
    current = grid.cells[0][0]
    current.visited = True
    stack = []

    while True:
        neighbors = grid.unvisited_neighbors_of(current)
        if neighbors:
            chosen = rng.choice(neighbors)
            stack.append(current)
            grid.open_wall_between(current, chosen)
            chosen.visited = True
            current = chosen
        elif stack:
            # Backtrack
            current = stack.pop()
        else:
            break

    logger.debug("generated %dx%d maze with %d passages", size, size, size * size - 1)
    return grid


# Default ukuran (digunakan di main.py)
MAZE_SIZE = 15
CELL_SIZE = 40
