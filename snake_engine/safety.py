import logging

from .board import DIRECTIONS, get_distance, get_new_head_position, in_bounds

logger = logging.getLogger(__name__)


def is_about_to_eat(head, food):
    """
    True when some food sits next to the head, so the tail stays put next turn
    """
    return any(get_distance(head, f) == 1 for f in food)


def hits_own_body(new_head, my_body, eating):
    """
    Self-collision check: the tail is safe to enter unless we are about to eat
    """
    last = len(my_body) - 1
    for i, segment in enumerate(my_body):
        if segment != new_head:
            continue
        # A stacked tail (just ate) repeats the last cell, so the duplicate
        # at last - 1 still counts as a collision
        if i == last and not eating:
            continue
        return True
    return False


def check_opponent_bodies(new_head, opponents):
    """
    Check if move hits any opponent body.

    Opponent tails are assumed to move away, even when that opponent is next
    to food and might grow instead.
    """
    for opponent in opponents:
        for segment in opponent.body[:-1]:
            if segment == new_head:
                return True
    return False


def loses_head_to_head(new_head, my_length, opponents):
    """
    True when an equal or larger opponent head could also step onto new_head
    """
    for opponent in opponents:
        if not opponent.body or opponent.length < my_length:
            continue
        if get_distance(opponent.head, new_head) == 1:
            return True
    return False


def get_safe_moves(state):
    """
    Immediate legality of each move.

    Every check runs for every direction; an empty set of legal moves is a
    valid answer and is left to the decision policy.
    """
    my_body = state.you.body
    if not my_body:
        logger.warning("Snake %s has no body, no move is legal", state.you.id)
        return {direction: False for direction in DIRECTIONS}

    board = state.board
    my_head = my_body[0]
    my_length = len(my_body)
    opponents = state.opponents
    eating = is_about_to_eat(my_head, board.food)

    is_move_safe = {}
    for direction in DIRECTIONS:
        new_head = get_new_head_position(my_head, direction)
        safe = True

        if not in_bounds(new_head, board):
            safe = False
        if hits_own_body(new_head, my_body, eating):
            safe = False
        if check_opponent_bodies(new_head, opponents):
            safe = False
        if loses_head_to_head(new_head, my_length, opponents):
            safe = False

        is_move_safe[direction] = safe

    return is_move_safe
