import logging
from collections import deque

from .board import DIRECTIONS, get_new_head_position, in_bounds

logger = logging.getLogger(__name__)


def occupied_cells(board):
    """
    Every body segment of every snake, heads and tails included.

    No tail is treated as vacating here; the legality check is the only place
    that looks ahead to a tail moving out of the way.
    """
    return {segment for snake in board.snakes for segment in snake.body}


def flood_fill_count(board, start, blocked):
    """
    Count cells reachable from start without crossing blocked cells or walls
    """
    if not in_bounds(start, board) or start in blocked:
        return 0

    visited = {start}
    queue = deque([start])

    while queue:
        cell = queue.popleft()

        # Fixed neighbour order keeps traversal reproducible
        for direction in DIRECTIONS:
            neighbor = get_new_head_position(cell, direction)
            if neighbor in visited or neighbor in blocked:
                continue
            if not in_bounds(neighbor, board):
                continue
            visited.add(neighbor)
            queue.append(neighbor)

    return len(visited)


def calculate_open_space(state):
    """
    Open space behind each of the four moves from our head.

    Never raises: a fault degrades to 1 in every direction so the policy still
    has something to rank.
    """
    try:
        board = state.board
        head = state.you.body[0]
        blocked = occupied_cells(board)

        space = {}
        for direction in DIRECTIONS:
            candidate = get_new_head_position(head, direction)
            if not in_bounds(candidate, board):
                space[direction] = 0
                continue
            space[direction] = flood_fill_count(board, candidate, blocked)
        return space
    except Exception:
        logger.exception("Error calculating open space")
        return {direction: 1 for direction in DIRECTIONS}
