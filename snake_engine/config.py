import logging
import os
from dataclasses import dataclass

SNAKE_INFO = {
    "apiversion": "1",
    "author": "ZigzagSnake",
    "color": "#D2042D",
    "head": "silly",
    "tail": "bolt",
}

SERVER_HEADER = "battlesnake/github/zigzag-snake-python"

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _env_flag(value):
    return str(value).strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Settings:
    host: str = "0.0.0.0"
    port: int = 8000
    debug: bool = False

    @classmethod
    def from_env(cls, environ=None):
        environ = os.environ if environ is None else environ
        return cls(
            host=environ.get("HOST", cls.host),
            port=int(environ.get("PORT", cls.port)),
            debug=_env_flag(environ.get("DEBUG", "false")),
        )


def configure_logging(settings):
    """
    Verbose per-turn diagnostics (legality, space, board) only when DEBUG is on
    """
    level = logging.DEBUG if settings.debug else logging.INFO
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger().setLevel(level)
