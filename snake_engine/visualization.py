FOOD = "🍎"
EMPTY = "⬜"
MY_HEAD = "👑"
MY_BODY = "🟩"
ENEMY_HEAD = "💀"
ENEMY_BODY = "🟥"


def render_board(state):
    """
    Text picture of the board, top row first, for debug logs
    """
    board = state.board
    cells = {f: FOOD for f in board.food}

    for snake in board.snakes:
        mine = snake.id == state.you.id
        # Paint tail to head so the head wins on stacked cells
        for i in reversed(range(len(snake.body))):
            if i == 0:
                cells[snake.body[i]] = MY_HEAD if mine else ENEMY_HEAD
            else:
                cells[snake.body[i]] = MY_BODY if mine else ENEMY_BODY

    rows = []
    for y in range(board.height - 1, -1, -1):
        rows.append(" ".join(cells.get((x, y), EMPTY) for x in range(board.width)))
    return "\n".join(rows)
