class SnakeGameError(Exception):
    """Base class for errors raised by the game."""


class GridFullError(SnakeGameError):
    """Raised when there is no free cell left to place food on."""

    def __init__(self, capacity: int):
        super().__init__(f"No free cell left on a grid of {capacity} cells")
        self.capacity = capacity
