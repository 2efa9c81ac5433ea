"""
Per-turn decision policy.

Strategies are tried in a fixed priority order over one snapshot of the
legality and open-space maps; the first legal answer wins. The only state kept
between turns lives in a per-game Session.
"""
import logging
import random
from dataclasses import dataclass, field
from typing import Optional

from .board import DIRECTIONS, get_distance, get_new_head_position
from .flood_fill import calculate_open_space
from .food import seek_food
from .hunting import hunt_smaller_snake
from .safety import get_safe_moves
from .visualization import render_board
from .zigzag import zigzag_movement

logger = logging.getLogger(__name__)

DEFAULT_MOVE = "down"

# Movement patterns for fallback behavior
PATTERNS = {
    "spiral": ["right", "down", "left", "left", "up", "up", "right", "right", "right"],
    "perimeter": [
        "right", "right", "right",
        "down", "down", "down",
        "left", "left", "left",
        "up", "up", "up",
    ],
}
PERIMETER_LENGTH = 15


@dataclass
class Session:
    """Memory carried from one turn to the next for a single game."""

    last_direction: Optional[str] = None
    pattern_index: int = 0
    rng: random.Random = field(default_factory=random.Random, repr=False)


def choose_move(state, session):
    """
    Pick this turn's move and record it in the session.

    Never raises; any fault falls back to DEFAULT_MOVE.
    """
    try:
        logger.info("Turn %d | Health: %d", state.turn, state.you.health)

        is_move_safe = get_safe_moves(state)
        open_space = calculate_open_space(state)

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Board:\n%s", render_board(state))
            logger.debug("Safe moves: %s", is_move_safe)
            logger.debug("Open space: %s", open_space)

        next_move = decide(state, session, is_move_safe, open_space)
    except Exception:
        logger.exception("Error choosing move, falling back to %s", DEFAULT_MOVE)
        return DEFAULT_MOVE

    if next_move is None:
        logger.warning("⚠️ No safe moves! Moving %s as a last resort", DEFAULT_MOVE)
        return DEFAULT_MOVE

    session.last_direction = next_move
    logger.info("Selected move: %s", next_move)
    return next_move


def decide(state, session, is_move_safe, open_space):
    """
    Run the strategy cascade; None means no direction is legal
    """
    me = state.you
    snake_length = me.length

    def accept(direction):
        return direction if direction and is_move_safe.get(direction) else None

    next_move = None

    # 1. Hunt smaller snakes when we're big enough
    if snake_length > 5:
        next_move = accept(hunt_smaller_snake(state, is_move_safe, open_space))

    # 2. Zigzag to avoid boxing ourselves in
    if not next_move and snake_length > 4:
        next_move = accept(zigzag_movement(state, is_move_safe, open_space))

    # 3. Eat when hungry or still growing
    if not next_move and (me.health < 70 or snake_length < 15):
        next_move = accept(seek_food(state, is_move_safe, open_space))

    if not next_move:
        next_move = follow_pattern(session, snake_length, is_move_safe, open_space)

    if not next_move:
        next_move = chase_tail(me, is_move_safe, open_space)

    if not next_move:
        last = session.last_direction
        if last and is_move_safe.get(last) and open_space[last] > 3:
            next_move = last

    if not next_move:
        next_move = most_open_space(is_move_safe, open_space)

    if not next_move:
        next_move = random_safe_move(session, is_move_safe)

    return next_move


def follow_pattern(session, snake_length, is_move_safe, open_space):
    """
    Next roomy step of the fixed movement pattern, advancing the cursor past it
    """
    name = "perimeter" if snake_length > PERIMETER_LENGTH else "spiral"
    pattern = PATTERNS[name]

    for i in range(len(pattern)):
        index = (session.pattern_index + i) % len(pattern)
        pattern_move = pattern[index]
        if is_move_safe[pattern_move] and open_space[pattern_move] > 5:
            session.pattern_index = (index + 1) % len(pattern)
            return pattern_move
    return None


def chase_tail(me, is_move_safe, open_space):
    """
    Roomiest legal move that gets us closer to our own tail
    """
    if me.length < 2:
        return None

    head, tail = me.head, me.tail
    current = get_distance(head, tail)

    best_move = None
    for direction in DIRECTIONS:
        if not is_move_safe[direction]:
            continue
        if get_distance(get_new_head_position(head, direction), tail) >= current:
            continue
        if best_move is None or open_space[direction] > open_space[best_move]:
            best_move = direction
    return best_move


def most_open_space(is_move_safe, open_space):
    """
    Legal move with the most room, first in direction order on ties
    """
    best_move = None
    max_space = -1
    for direction in DIRECTIONS:
        if is_move_safe[direction] and open_space[direction] > max_space:
            max_space = open_space[direction]
            best_move = direction
    return best_move


def random_safe_move(session, is_move_safe):
    """
    Any legal move, drawn from the session's random source
    """
    safe_moves = [d for d in DIRECTIONS if is_move_safe[d]]
    if not safe_moves:
        return None
    move = session.rng.choice(safe_moves)
    logger.info("🎲 Random safe move: %s", move)
    return move
