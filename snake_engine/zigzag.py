import logging

from .board import (
    DIRECTIONS,
    HORIZONTAL,
    VERTICAL,
    get_direction,
    get_new_head_position,
    in_bounds,
)
from .flood_fill import occupied_cells

logger = logging.getLogger(__name__)

ESCAPE_CHECK_LENGTH = 8
ESCAPE_SPREAD = 5


def zigzag_movement(state, is_move_safe, open_space):
    """
    Zigzag perpendicular to our last move so a long body doesn't box itself in.

    Long snakes first look for a clearly better escape route.
    """
    me = state.you
    if not me.body:
        return None
    my_length = me.length

    last_direction = None
    if my_length >= 2:
        last_direction = get_direction(me.body[1], me.head)

    if my_length >= ESCAPE_CHECK_LENGTH:
        escape = find_best_escape_move(state, is_move_safe, open_space)
        if escape:
            logger.info("🚪 Escape route: %s", escape)
            return escape

    if last_direction:
        if last_direction in HORIZONTAL:
            primary, secondary = VERTICAL, HORIZONTAL
        else:
            primary, secondary = HORIZONTAL, VERTICAL
    elif (state.turn // 2) % 2 == 0:
        primary, secondary = HORIZONTAL, VERTICAL
    else:
        primary, secondary = VERTICAL, HORIZONTAL

    best_move = None
    max_open_space = 0
    for direction in primary + secondary:
        if is_move_safe[direction] and open_space[direction] > max_open_space:
            best_move = direction
            max_open_space = open_space[direction]

    min_required_space = min(5, my_length // 3)
    if best_move and max_open_space > min_required_space:
        return best_move
    return None


def find_best_escape_move(state, is_move_safe, open_space):
    """
    Best move by escape routes, only when options differ significantly
    """
    my_head = state.you.head
    blocked = occupied_cells(state.board)

    escape_scores = {}
    for direction in DIRECTIONS:
        if not is_move_safe[direction]:
            continue
        new_pos = get_new_head_position(my_head, direction)
        routes = count_escape_routes(new_pos, state.board, blocked)
        escape_scores[direction] = routes * 2 + open_space[direction]

    if len(escape_scores) < 2:
        return None

    best_score = max(escape_scores.values())
    if best_score - min(escape_scores.values()) <= ESCAPE_SPREAD:
        return None

    for direction in DIRECTIONS:
        if escape_scores.get(direction) == best_score:
            return direction
    return None


def count_escape_routes(pos, board, blocked):
    count = 0
    for direction in DIRECTIONS:
        next_pos = get_new_head_position(pos, direction)
        if in_bounds(next_pos, board) and next_pos not in blocked:
            count += 1
    return count
