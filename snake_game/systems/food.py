import logging
from typing import Iterable, Optional

import numpy as np

from snake_game.components.grid import Grid
from snake_game.errors import GridFullError
from snake_game.schemas.state import Cell

logger = logging.getLogger(__name__)


class FoodPlacer:
    def __init__(self, grid: Grid, seed: Optional[int] = None):
        self.grid = grid
        self._rng = np.random.default_rng(seed)

    def place(self, occupied: Iterable[Cell]) -> Cell:
        # Sample from the free cells directly instead of retrying random
        # positions, so a nearly full grid still resolves in one draw
        free_cells = self.grid.free_cells(occupied)
        if len(free_cells) == 0:
            raise GridFullError(self.grid.capacity)

        x, y = free_cells[self._rng.integers(len(free_cells))]
        food = (int(x), int(y))
        logger.debug("Placed food at %s (%d free cells)", food, len(free_cells))
        return food
