import logging
import threading
from collections import OrderedDict

from flask import Flask, request, jsonify

from snake_engine import DEFAULT_MOVE, Session, choose_move, parse_game_state
from snake_engine.board import parse_game_id
from snake_engine.config import SERVER_HEADER, SNAKE_INFO, Settings, configure_logging

settings = Settings.from_env()
configure_logging(settings)

logger = logging.getLogger(__name__)

app = Flask(__name__)

# Games that never send /end are evicted oldest-first past this many
MAX_SESSIONS = 256

# One session per running game so concurrent games never share a cursor
_sessions = OrderedDict()
_sessions_lock = threading.Lock()


def get_session(game_id):
    """
    Session for a game, most recently used last; an unnamed game gets a
    throwaway session so it can't share memory with another one
    """
    if not game_id:
        return Session()

    with _sessions_lock:
        session = _sessions.get(game_id)
        if session is None:
            session = _sessions[game_id] = Session()
            while len(_sessions) > MAX_SESSIONS:
                evicted, _ = _sessions.popitem(last=False)
                logger.info("Evicted stale session for game %s", evicted)
        else:
            _sessions.move_to_end(game_id)
        return session


def drop_session(game_id):
    with _sessions_lock:
        _sessions.pop(game_id, None)


@app.after_request
def identify_server(response):
    response.headers.set("server", SERVER_HEADER)
    return response


@app.route("/")
def index():
    """
    Root endpoint - returns Battlesnake metadata
    """
    return jsonify(SNAKE_INFO)


@app.route("/start", methods=["POST"])
def start():
    """
    Called at the start of each game
    """
    game_id = parse_game_id(request.get_json(silent=True))
    get_session(game_id)
    logger.info("GAME START: %s", game_id)
    return "ok"


@app.route("/move", methods=["POST"])
def move():
    """
    Called every turn - always answers with a move, even for a bad request
    """
    game_data = request.get_json(silent=True)

    try:
        state = parse_game_state(game_data)
    except ValueError as exc:
        logger.warning("⚠️ Unreadable game state (%s), moving %s", exc, DEFAULT_MOVE)
        return jsonify({"move": DEFAULT_MOVE})

    chosen_move = choose_move(state, get_session(state.game_id))
    return jsonify({"move": chosen_move})


@app.route("/end", methods=["POST"])
def end():
    """
    Called when the game ends
    """
    game_id = parse_game_id(request.get_json(silent=True))
    drop_session(game_id)
    logger.info("GAME OVER: %s", game_id)
    return "ok"


if __name__ == "__main__":
    app.run(host=settings.host, port=settings.port, debug=settings.debug)
