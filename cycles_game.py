# cycles_game.py
# Board model for the cycles light-cycle game.
# Positions are (x, y): x is horizontal (columns), y is vertical (rows, growing downwards).
# The grid is a matrix indexed [row][col] = [y][x]; 0 marks an empty cell.

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


class SnapshotError(Exception):
    """A snapshot that cannot be used to decide this tick's move."""


class PlayerNotFoundError(SnapshotError):
    def __init__(self, name):
        super().__init__(f"player {name!r} not found in snapshot")
        self.name = name


class GridSizeChangedError(SnapshotError):
    def __init__(self, expected, actual):
        super().__init__(f"grid size changed from {expected} to {actual}")
        self.expected = expected
        self.actual = actual


@dataclass(frozen=True, order=True)
class Cell:
    x: int
    y: int

    def __add__(self, other):
        return Cell(self.x + other.x, self.y + other.y)

    def step(self, direction):
        return self + direction.vector


def manhattan_distance(a: Cell, b: Cell) -> int:
    return abs(a.x - b.x) + abs(a.y - b.y)


class Direction(Enum):
    # Declaration order is the enumeration order used for tie-breaking.
    NORTH = (0, 0, -1)
    EAST = (1, 1, 0)
    SOUTH = (2, 0, 1)
    WEST = (3, -1, 0)

    def __init__(self, code, dx, dy):
        self.code = code
        self.vector = Cell(dx, dy)


@dataclass(frozen=True)
class Grid:
    rows: Tuple[Tuple[int, ...], ...]

    @classmethod
    def from_rows(cls, rows):
        rows = tuple(tuple(int(v) for v in row) for row in rows)
        if rows and any(len(row) != len(rows[0]) for row in rows):
            raise ValueError("grid rows must all have the same width")
        return cls(rows)

    @property
    def width(self):
        return len(self.rows[0]) if self.rows else 0

    @property
    def height(self):
        return len(self.rows)

    @property
    def size(self):
        return self.width, self.height

    def is_inside_grid(self, cell: Cell) -> bool:
        return 0 <= cell.x < self.width and 0 <= cell.y < self.height

    def occupancy_at(self, cell: Cell) -> int:
        """Marker at ``cell``; callers check ``is_inside_grid`` first."""
        return self.rows[cell.y][cell.x]

    def is_passable(self, cell: Cell) -> bool:
        return self.is_inside_grid(cell) and self.occupancy_at(cell) == 0


@dataclass(frozen=True)
class Player:
    name: str
    position: Cell
    color: Optional[str] = None


@dataclass(frozen=True)
class GameState:
    """One tick's snapshot: the grid plus every player, in server order."""

    grid: Grid
    players: Tuple[Player, ...] = ()
    frame: int = 0

    @classmethod
    def from_dict(cls, data):
        """
        Parse the JSON snapshot:
        {"grid": [[0, 1, ...], ...], "players": [{"name": "a", "position": [x, y]}], "frame": 3}
        """
        if not isinstance(data, dict):
            raise ValueError(f"snapshot must be a JSON object, got {type(data).__name__}")
        players = []
        for p in data.get("players", []) or []:
            x, y = p["position"]
            players.append(Player(str(p["name"]), Cell(int(x), int(y)), p.get("color")))
        return cls(
            grid=Grid.from_rows(data["grid"]),
            players=tuple(players),
            frame=int(data.get("frame", 0)),
        )

    def find_player(self, name) -> Player:
        for player in self.players:
            if player.name == name:
                return player
        raise PlayerNotFoundError(name)
