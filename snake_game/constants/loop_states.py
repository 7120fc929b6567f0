from enum import Enum


class LoopState(Enum):
    RUNNING = "running"
    PAUSED = "paused"
    GAME_OVER = "game_over"
