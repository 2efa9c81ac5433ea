from .board import DIRECTIONS, Agent, Board, Cell, TurnState, parse_game_state
from .movement import DEFAULT_MOVE, Session, choose_move

__all__ = [
    "DIRECTIONS",
    "DEFAULT_MOVE",
    "Agent",
    "Board",
    "Cell",
    "Session",
    "TurnState",
    "choose_move",
    "parse_game_state",
]
