from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from snake_game.constants.headings import Heading

GRID_SIZE = 25
CELL_SIZE = 20
INITIAL_INTERVAL_MS = 100
MIN_INTERVAL_MS = 50
SPEED_STEP_MS = 2
START_CELL = (10, 10)


class GameConfig(BaseModel):
    """
    Start-up settings for a game. Values are fixed once the game is created.
    """

    model_config = ConfigDict(frozen=True)

    grid_size: int = Field(default=GRID_SIZE, gt=0)
    cell_size: int = Field(default=CELL_SIZE, gt=0)
    initial_interval_ms: int = Field(default=INITIAL_INTERVAL_MS, gt=0)
    min_interval_ms: int = Field(default=MIN_INTERVAL_MS, gt=0)
    speed_step_ms: int = Field(default=SPEED_STEP_MS, ge=0)
    start_cell: tuple[int, int] = START_CELL
    start_heading: Heading = Heading.RIGHT
    tap_threshold: float = Field(default=10.0, ge=0)
    frame_rate: int = Field(default=60, gt=0)
    seed: Optional[int] = None

    @model_validator(mode="after")
    def _check_consistency(self):
        if self.min_interval_ms > self.initial_interval_ms:
            raise ValueError(
                f"min_interval_ms ({self.min_interval_ms}) cannot be greater "
                f"than initial_interval_ms ({self.initial_interval_ms})"
            )
        x, y = self.start_cell
        if not (0 <= x < self.grid_size and 0 <= y < self.grid_size):
            raise ValueError(
                f"start_cell {self.start_cell} is outside a "
                f"{self.grid_size}x{self.grid_size} grid"
            )
        return self

    def interval_for_score(self, score: int) -> int:
        return max(self.min_interval_ms, self.initial_interval_ms - self.speed_step_ms * score)
