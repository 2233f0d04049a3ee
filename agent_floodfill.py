# agent_floodfill.py
# Flood-fill agent: scores each legal move by the empty area reachable from the
# resulting cell, and when an opponent is on the board pulls toward the cell the
# nearest opponent is most likely to move into.

import logging
from collections import deque
from dataclasses import dataclass

from cycles_game import Direction, manhattan_distance

logger = logging.getLogger(__name__)

DIR_ORDER = list(Direction)  # N, E, S, W; used for tie-breakers
FALLBACK_DIRECTION = Direction.NORTH


@dataclass(frozen=True)
class MoveCandidate:
    direction: Direction
    score: int


# -------------- Territory -----------------

def reachable_area(grid, start):
    """Count empty cells reachable from start using BFS (including start if empty).

    Cells are filtered when dequeued, so the queue may briefly hold duplicates or
    cells outside the grid; each cell is still expanded at most once.
    """
    visited = set()
    q = deque([start])
    area = 0
    while q:
        cur = q.popleft()
        if cur in visited or not grid.is_passable(cur):
            continue
        visited.add(cur)
        area += 1
        for d in DIR_ORDER:
            q.append(cur.step(d))
    return area


# -------------- Opponents -----------------

def find_nearest_opponent_head(state, me):
    """Head of the opponent closest to me (Manhattan), or None if I'm alone.

    Equal distances keep the first player in roster order.
    """
    nearest, best_dist = None, None
    for player in state.players:
        if player.name == me.name:
            continue
        dist = manhattan_distance(me.position, player.position)
        if best_dist is None or dist < best_dist:
            nearest, best_dist = player.position, dist
    return nearest


def predict_opponent_move(grid, head):
    """Most probable next cell for an opponent at head: the neighbour with the largest area."""
    best, best_area = head, 0
    for d in DIR_ORDER:
        nxt = head.step(d)
        if not grid.is_passable(nxt):
            continue
        area = reachable_area(grid, nxt)
        if area > best_area:
            best, best_area = nxt, area
    return best


# -------------- Scoring -----------------

def legal_moves(grid, head):
    return [d for d in DIR_ORDER if grid.is_passable(head.step(d))]


def score_safe_moves(grid, head):
    return [MoveCandidate(d, reachable_area(grid, head.step(d))) for d in legal_moves(grid, head)]


def score_aggressive_moves(grid, head, predicted):
    moves = []
    for d in legal_moves(grid, head):
        nxt = head.step(d)
        moves.append(MoveCandidate(d, reachable_area(grid, nxt) - manhattan_distance(nxt, predicted)))
    return moves


def find_best_move(moves):
    """Highest scoring direction; NORTH when boxed in.

    sorted() is stable, so equal scores keep N, E, S, W order.
    """
    if not moves:
        return FALLBACK_DIRECTION
    ranked = sorted(moves, key=lambda m: m.score, reverse=True)
    return ranked[0].direction


class FloodFillAgent:
    """
    Defensive flood-fill agent with a light aggressive bias.
    - No opponent: maximise reachable area.
    - Opponent present: reachable area minus distance to the opponent's predicted cell.
    """

    def choose_direction(self, state, me):
        grid = state.grid
        opp_head = find_nearest_opponent_head(state, me)
        if opp_head is None:
            moves = score_safe_moves(grid, me.position)
            logger.debug("safety mode at %s: %s", me.position, moves)
        else:
            predicted = predict_opponent_move(grid, opp_head)
            moves = score_aggressive_moves(grid, me.position, predicted)
            logger.debug(
                "aggression mode at %s, opponent %s -> %s: %s",
                me.position, opp_head, predicted, moves,
            )
        if not moves:
            logger.info("%s is boxed in at %s, falling back to %s", me.name, me.position, FALLBACK_DIRECTION.name)
        return find_best_move(moves)
