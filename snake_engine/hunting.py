"""
Predation: chase down smaller or starving snakes.

Every function here takes the turn's legality and space maps as read-only
inputs and answers with a direction or None.
"""
import logging

from .board import (
    DIRECTIONS,
    direction_toward,
    find_nearest_food,
    get_direction,
    get_distance,
    get_new_head_position,
)

logger = logging.getLogger(__name__)

LOW_HEALTH = 20
MIN_HUNTING_LENGTH = 5
VULNERABLE_HEALTH = 30
MAX_PURSUIT_DISTANCE = 8
AMBUSH_HEALTH = 40
AMBUSH_RANGE = 3
HEAD_TO_HEAD_MARGIN = 2


def hunt_smaller_snake(state, is_move_safe, open_space):
    """
    Hunt the most vulnerable opponent in range, or None when not worth it
    """
    me = state.you
    if not me.body:
        return None
    if me.health < LOW_HEALTH or me.length < MIN_HUNTING_LENGTH:
        return None

    opponents = [s for s in state.opponents if s.body]
    if not opponents:
        return None

    # Much bigger than everyone: a diagonal neighbour is a free kill
    biggest = max(s.length for s in opponents)
    if me.length > biggest + HEAD_TO_HEAD_MARGIN:
        for snake in opponents:
            if snake.length < me.length:
                move = find_head_to_head(snake, me.head, is_move_safe, open_space)
                if move:
                    logger.info("⚔️ Head-to-head on %s: %s", snake.id, move)
                    return move

    targets = find_targets(state, opponents)
    if not targets:
        return None

    target, distance = targets[0]

    if target.health < AMBUSH_HEALTH:
        move = setup_ambush(target, state, is_move_safe, open_space)
        if move:
            logger.info("🪤 Ambushing %s at food: %s", target.id, move)
            return move

    move = pursue_snake(target, distance, state, is_move_safe, open_space)
    if move:
        logger.info("🎯 Hunting %s (length %d): %s", target.id, target.length, move)
    return move


def find_targets(state, opponents):
    """
    Huntable opponents as (snake, distance), most attractive first.

    Smaller or low-health snakes within pursuit range qualify; score favours
    big size gaps and low health, ties go to the nearer snake.
    """
    me = state.you
    targets = []
    for snake in opponents:
        distance = get_distance(me.head, snake.head)
        if distance > MAX_PURSUIT_DISTANCE:
            continue
        if snake.length >= me.length and snake.health >= VULNERABLE_HEALTH:
            continue
        score = (me.length - snake.length) * 2 + (100 - snake.health) / 10
        targets.append((score, distance, snake))

    targets.sort(key=lambda t: (-t[0], t[1]))
    return [(snake, distance) for _, distance, snake in targets]


def setup_ambush(target, state, is_move_safe, open_space):
    """
    Try to ambush a hungry snake at food
    """
    my_head = state.you.head
    enemy_head = target.head

    nearest_food = find_nearest_food(enemy_head, state.board.food)
    if nearest_food is None:
        return None

    enemy_dist = get_distance(enemy_head, nearest_food)
    my_dist = get_distance(my_head, nearest_food)

    # Only intercept when the enemy is close to it and we can get next to it in time
    if enemy_dist > AMBUSH_RANGE or my_dist > enemy_dist + 1:
        return None

    best_move = None
    best_score = None
    for direction in DIRECTIONS:
        if not is_move_safe[direction]:
            continue
        new_pos = get_new_head_position(my_head, direction)
        intercept = get_distance(new_pos, nearest_food)
        if intercept > 1:
            continue
        # Landing on the food always wins
        bonus = float("inf") if intercept == 0 else 5 / intercept
        score = open_space[direction] + bonus
        if best_score is None or score > best_score:
            best_move = direction
            best_score = score

    return best_move


def predict_next_head(target, food):
    """
    Where the target's head will probably be next turn
    """
    head = target.head

    if target.health < VULNERABLE_HEALTH:
        nearest = find_nearest_food(head, food)
        if nearest is not None:
            direction = direction_toward(head, nearest)
            if direction:
                return get_new_head_position(head, direction)
        return head

    if target.length >= 2:
        direction = get_direction(target.body[1], head)
        if direction:
            return get_new_head_position(head, direction)

    return head


def pursue_snake(target, distance, state, is_move_safe, open_space):
    """
    Close in on the target's predicted next head position
    """
    my_head = state.you.head
    predicted = predict_next_head(target, state.board.food)

    # Need less room when we're already on top of it
    min_space = 2 if distance <= 2 else 3

    best_move = None
    best_distance = None
    for direction in DIRECTIONS:
        if not is_move_safe[direction] or open_space[direction] <= min_space:
            continue
        new_distance = get_distance(get_new_head_position(my_head, direction), predicted)
        if best_distance is None or new_distance < best_distance:
            best_move = direction
            best_distance = new_distance

    return best_move


def find_head_to_head(snake, my_head, is_move_safe, open_space):
    """
    Step into the cell shared with a diagonally adjacent head
    """
    head = snake.head
    dx = head.x - my_head.x
    dy = head.y - my_head.y

    if abs(dx) + abs(dy) != 2 or dx == 0 or dy == 0:
        return None

    candidates = ["right" if dx > 0 else "left", "up" if dy > 0 else "down"]
    for direction in candidates:
        if is_move_safe[direction] and open_space[direction] > 1:
            return direction
    return None
