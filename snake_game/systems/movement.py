import logging

import numpy as np

from snake_game.components.grid import Grid
from snake_game.config import GameConfig
from snake_game.errors import GridFullError
from snake_game.schemas.state import Cell, GameState
from snake_game.systems.food import FoodPlacer
from snake_game.systems.system import System

logger = logging.getLogger(__name__)


class MovementSystem(System):
    """
    Advances a game by one cell per tick.

    `tick` never mutates the state it receives; it returns the next state,
    or the same object when the game already ended.
    """

    def __init__(self, grid: Grid, food_placer: FoodPlacer, config: GameConfig):
        self.grid = grid
        self.food_placer = food_placer
        self.config = config

    def setup(self):
        pass

    def run(self, state: GameState) -> GameState:
        return self.tick(state)

    def new_game(self) -> GameState:
        snake = (self.config.start_cell,)
        try:
            food = self.food_placer.place(snake)
            won = False
        except GridFullError:
            # A single cell grid is already full once the snake spawns
            food = None
            won = True

        return GameState(
            snake=snake,
            food=food,
            heading=self.config.start_heading,
            last_heading=self.config.start_heading,
            tick_interval_ms=self.config.initial_interval_ms,
            won=won,
        )

    def tick(self, state: GameState) -> GameState:
        if state.is_terminal:
            return state

        heading = state.heading
        new_head = self._next_head(state.head, heading.offset)
        grows = new_head == state.food

        # The tail leaves its cell this tick unless the snake is growing
        blocking = state.snake if grows else state.snake[:-1]

        if not self.grid.is_in_bounds(new_head):
            return self._kill(state, "wall")
        if new_head in blocking:
            return self._kill(state, "self")

        snake = (new_head,) + state.snake
        update = {
            "last_heading": heading,
            "ticks": state.ticks + 1,
        }

        if grows:
            score = state.score + 1
            update["score"] = score
            update["tick_interval_ms"] = self.config.interval_for_score(score)
            try:
                update["food"] = self.food_placer.place(snake)
            except GridFullError:
                logger.info("Grid is full, game won with a score of %d", score)
                update["food"] = None
                update["won"] = True
            logger.debug(
                "Ate food at %s, score %d, interval %d ms",
                new_head,
                score,
                update["tick_interval_ms"],
            )
        else:
            snake = snake[:-1]

        update["snake"] = snake
        return state.model_copy(update=update)

    def _next_head(self, head: Cell, offset: tuple[int, int]) -> Cell:
        np_head = np.array(head).astype(int)
        new_head = np.add(np_head, np.array(offset).astype(int))
        return (int(new_head[0]), int(new_head[1]))

    def _kill(self, state: GameState, reason: str) -> GameState:
        logger.info(
            "Snake hit %s at %s, final score %d",
            "a wall" if reason == "wall" else "itself",
            state.head,
            state.score,
        )
        return state.model_copy(update={"alive": False, "death_reason": reason})
