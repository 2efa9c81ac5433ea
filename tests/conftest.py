import pytest

from snake_engine.board import Agent, Board, Cell, TurnState

ALL_SAFE = {"up": True, "down": True, "left": True, "right": True}


def _cells(points):
    return [Cell(x, y) for x, y in points]


@pytest.fixture
def make_state():
    """Factory for TurnStates; opponents are (id, body, health) tuples."""

    def factory(body, health=100, opponents=(), food=(), width=11, height=11, turn=0):
        you = Agent(id="you", body=_cells(body), health=health)
        snakes = [you] + [
            Agent(id=snake_id, body=_cells(snake_body), health=snake_health)
            for snake_id, snake_body, snake_health in opponents
        ]
        board = Board(width=width, height=height, food=set(_cells(food)), snakes=snakes)
        return TurnState(turn=turn, board=board, you=you, game_id="game")

    return factory


@pytest.fixture
def all_safe():
    return dict(ALL_SAFE)


def space_map(up=10, down=10, left=10, right=10):
    return {"up": up, "down": down, "left": left, "right": right}


@pytest.fixture
def space():
    return space_map
