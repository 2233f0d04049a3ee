import pytest

from cycles_game import Cell, GameState, Grid, Player


def parse_rows(text):
    """Rows of digits, one row per line; '.' is an empty cell."""
    rows = []
    for line in text.strip().splitlines():
        line = line.strip()
        rows.append([0 if ch == "." else int(ch) for ch in line])
    return rows


@pytest.fixture
def make_state():
    def _make(text, players=(), frame=0):
        grid = Grid.from_rows(parse_rows(text))
        roster = tuple(Player(name, Cell(*pos)) for name, pos in players)
        return GameState(grid, roster, frame)

    return _make


@pytest.fixture
def make_grid():
    """Empty width x height grid with the given cells set to their markers."""
    def _make(width, height, occupied=None):
        rows = [[0] * width for _ in range(height)]
        for (x, y), marker in (occupied or {}).items():
            rows[y][x] = marker
        return Grid.from_rows(rows)

    return _make
