from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from snake_game.constants.headings import Heading

Cell = tuple[int, int]
DeathReason = Literal["wall", "self"]


class GameState(BaseModel):
    """
    Snapshot of a single game between two ticks.

    Attributes:
        snake: cells from head (index 0) to tail
        food: cell holding the food, None once the grid is full
        heading: heading applied on the next tick
        last_heading: heading used by the most recent tick, reversals are
            checked against it
        score: food eaten since the last reset
        tick_interval_ms: minimum wall-clock time between two ticks
        alive: False after a wall or self collision
        paused: ticks are suppressed while set
        won: the snake filled the grid and no food can be placed
        death_reason: 'wall' or 'self' once the snake died
        ticks: ticks applied since the last reset
    """

    model_config = ConfigDict(frozen=True)

    snake: tuple[Cell, ...] = Field(min_length=1)
    food: Optional[Cell]
    heading: Heading
    last_heading: Heading
    score: int = Field(default=0, ge=0)
    tick_interval_ms: int = Field(gt=0)
    alive: bool = True
    paused: bool = False
    won: bool = False
    death_reason: Optional[DeathReason] = None
    ticks: int = Field(default=0, ge=0)

    @field_validator("snake")
    @classmethod
    def _no_overlapping_segments(cls, snake: tuple[Cell, ...]) -> tuple[Cell, ...]:
        if len(set(snake)) != len(snake):
            raise ValueError("Snake segments cannot overlap")
        return snake

    @model_validator(mode="after")
    def _food_off_snake(self):
        if self.food is not None and self.food in self.snake:
            raise ValueError(f"Food {self.food} cannot be placed on the snake")
        return self

    @property
    def head(self) -> Cell:
        return self.snake[0]

    @property
    def tail(self) -> Cell:
        return self.snake[-1]

    @property
    def length(self) -> int:
        return len(self.snake)

    @property
    def occupied(self) -> frozenset[Cell]:
        return frozenset(self.snake)

    @property
    def is_terminal(self) -> bool:
        return not self.alive or self.won


class GameSnapshot(BaseModel):
    """Read-only view of the game handed to the renderer."""

    model_config = ConfigDict(frozen=True)

    snake: tuple[Cell, ...]
    food: Optional[Cell]
    score: int
    tick_interval_ms: int
    alive: bool
    paused: bool
    won: bool
    death_reason: Optional[DeathReason]
    status: str
