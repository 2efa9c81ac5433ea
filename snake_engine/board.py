from dataclasses import dataclass, field
from typing import List, NamedTuple, Optional, Set

# All possible moves, in the order every module scans them
DIRECTIONS = ("up", "down", "left", "right")

DELTAS = {
    "up": (0, 1),
    "down": (0, -1),
    "left": (-1, 0),
    "right": (1, 0),
}

HORIZONTAL = ("left", "right")
VERTICAL = ("up", "down")


class Cell(NamedTuple):
    x: int
    y: int


@dataclass
class Agent:
    id: str
    body: List[Cell]
    health: int = 100

    @property
    def head(self) -> Optional[Cell]:
        return self.body[0] if self.body else None

    @property
    def tail(self) -> Optional[Cell]:
        return self.body[-1] if self.body else None

    @property
    def length(self) -> int:
        return len(self.body)


@dataclass
class Board:
    width: int
    height: int
    food: Set[Cell] = field(default_factory=set)
    snakes: List[Agent] = field(default_factory=list)


@dataclass
class TurnState:
    turn: int
    board: Board
    you: Agent
    game_id: str = ""

    @property
    def opponents(self) -> List[Agent]:
        # Filter out ourselves from opponents using ID for safety
        return [s for s in self.board.snakes if s.id != self.you.id]


def _parse_cell(point):
    return Cell(int(point["x"]), int(point["y"]))


def _parse_agent(data):
    return Agent(
        id=str(data["id"]),
        body=[_parse_cell(segment) for segment in data.get("body", [])],
        health=int(data.get("health", 100)),
    )


def parse_game_id(payload):
    """
    Game id from a request body, "" when absent or unreadable
    """
    game = payload.get("game") if isinstance(payload, dict) else None
    if not isinstance(game, dict):
        return ""
    game_id = game.get("id")
    return "" if game_id is None else str(game_id)


def parse_game_state(payload):
    """
    Build a TurnState from a Battlesnake /move (or /start) request body.

    Optional fields fall back to neutral defaults; a payload without a board
    or without ``you``, or with fields of the wrong type, raises ValueError.
    """
    if not isinstance(payload, dict):
        raise ValueError("game state must be a JSON object")

    try:
        board_data = payload["board"]
        you = _parse_agent(payload["you"])
        board = Board(
            width=int(board_data["width"]),
            height=int(board_data["height"]),
            food={_parse_cell(f) for f in board_data.get("food", [])},
            snakes=[_parse_agent(s) for s in board_data.get("snakes", [])],
        )
        turn = int(payload.get("turn", 0))
    except (KeyError, TypeError, AttributeError, ValueError) as exc:
        raise ValueError(f"malformed game state: {exc!r}") from exc

    if board.width <= 0 or board.height <= 0:
        raise ValueError(f"invalid board size {board.width}x{board.height}")

    # Prefer our entry in the snake list so both views share one Agent
    for snake in board.snakes:
        if snake.id == you.id:
            you = snake
            break

    return TurnState(turn=turn, board=board, you=you, game_id=parse_game_id(payload))


def get_new_head_position(head, move):
    """
    Calculate new head position after a move
    """
    dx, dy = DELTAS[move]
    return Cell(head.x + dx, head.y + dy)


def in_bounds(cell, board):
    return 0 <= cell.x < board.width and 0 <= cell.y < board.height


def get_distance(point1, point2):
    """
    Calculate Manhattan distance between two points
    """
    return abs(point1.x - point2.x) + abs(point1.y - point2.y)


def get_direction(neck, head):
    """
    Direction of travel implied by the two most recent head cells
    """
    if head.x > neck.x:
        return "right"
    if head.x < neck.x:
        return "left"
    if head.y > neck.y:
        return "up"
    if head.y < neck.y:
        return "down"
    return None


def direction_toward(start, target):
    """
    Single step from start toward target along the dominant axis (vertical on ties)
    """
    dx = target.x - start.x
    dy = target.y - start.y
    if abs(dx) > abs(dy):
        return "right" if dx > 0 else "left"
    if dy == 0:
        return None
    return "up" if dy > 0 else "down"


def find_nearest_food(cell, food):
    """
    Nearest food to a cell, or None on an empty board
    """
    if not food:
        return None
    # Sorted first so equal distances resolve the same way every turn
    return min(sorted(food), key=lambda f: get_distance(cell, f))
