import logging

from .board import get_distance

logger = logging.getLogger(__name__)

EMERGENCY_HEALTH = 20
HUNGRY_HEALTH = 50
SAFE_SPACE_CAP = 10


def seek_food(state, is_move_safe, open_space):
    """
    Strategically evaluate food with a focus on growth advantage.

    Lower score is better. The best food is only taken when the move toward
    it leaves enough room, unless health is critical.
    """
    food = state.board.food
    if not food:
        return None

    me = state.you
    my_head = me.head
    health = me.health
    is_emergency = health < EMERGENCY_HEALTH

    # Longer snakes need more space after eating
    min_safe_space = min(me.length // 2, SAFE_SPACE_CAP)

    best = None
    for f in sorted(food):
        distance = get_distance(my_head, f)

        # Unreachable before starving
        if is_emergency and distance > health - 10:
            continue

        move_direction = food_direction(my_head, f, is_move_safe)
        if move_direction is None:
            continue

        available_space = open_space[move_direction]
        score = distance

        if available_space < min_safe_space:
            score += (min_safe_space - available_space) * 20

        score -= calculate_competitive_advantage(state, f) * 5

        if health < HUNGRY_HEALTH:
            score -= (HUNGRY_HEALTH - health) * 0.5

        if best is None or score < best[0]:
            best = (score, move_direction, distance, available_space)

    if best is None:
        return None

    score, move_direction, distance, available_space = best
    if available_space >= min_safe_space or is_emergency:
        logger.info(
            "🍎 Moving %s toward food (score: %.1f, distance: %d)",
            move_direction, score, distance,
        )
        return move_direction

    logger.info("Avoiding risky food in direction %s", move_direction)
    return None


def food_direction(my_head, target, is_move_safe):
    """
    First legal step toward target, horizontal before vertical
    """
    if target.x < my_head.x and is_move_safe["left"]:
        return "left"
    if target.x > my_head.x and is_move_safe["right"]:
        return "right"
    if target.y < my_head.y and is_move_safe["down"]:
        return "down"
    if target.y > my_head.y and is_move_safe["up"]:
        return "up"
    return None


def calculate_competitive_advantage(state, food_pos):
    """
    Positive when racing opponents to this food looks good for us
    """
    me = state.you
    my_distance = get_distance(me.head, food_pos)

    advantage = 0
    for opponent in state.opponents:
        if not opponent.body:
            continue
        opponent_distance = get_distance(opponent.head, food_pos)
        size_diff = me.length - opponent.length

        if my_distance < opponent_distance:
            advantage += 3
            # Catching up on a bigger snake
            if size_diff < 0:
                advantage += 2
        elif my_distance == opponent_distance:
            advantage += 1 if size_diff > 0 else -1
        else:
            advantage -= 2

    return advantage
