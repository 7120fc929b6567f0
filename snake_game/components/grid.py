from typing import Iterable, Iterator, Optional

import numpy as np

from snake_game.schemas.state import Cell


class Grid:
    def __init__(self, columns: int, rows: Optional[int] = None):
        if rows is None:
            rows = columns
        if columns <= 0 or rows <= 0:
            raise ValueError(f"Grid dimensions must be positive, got {columns}x{rows}")
        self.columns = columns
        self.rows = rows

    @property
    def capacity(self) -> int:
        return self.columns * self.rows

    def is_in_bounds(self, cell: Cell) -> bool:
        x, y = cell
        return 0 <= x < self.columns and 0 <= y < self.rows

    def cells(self) -> Iterator[Cell]:
        for x in range(self.columns):
            for y in range(self.rows):
                yield (x, y)

    def free_cells(self, occupied: Iterable[Cell]) -> np.ndarray:
        """
        Returns an (n, 2) array with the (x, y) of every cell not in occupied,
        ordered by x then y.
        """
        free = np.ones((self.columns, self.rows), dtype=bool)
        for cell in occupied:
            # Cells outside the grid never block anything
            if self.is_in_bounds(cell):
                free[cell[0], cell[1]] = False
        return np.argwhere(free)

    def __repr__(self):
        return f"<Grid {self.columns}x{self.rows}>"
