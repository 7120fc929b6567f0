from typing import Union

from pydantic import BaseModel, ConfigDict

from snake_game.constants.input_types import InputType


class Position(BaseModel):
    model_config = ConfigDict(frozen=True)

    x: float
    y: float


class KeyPress(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: str = InputType.KEY_PRESS.value
    key: str


class Swipe(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: str = InputType.SWIPE.value
    start: Position
    end: Position

    @property
    def dx(self) -> float:
        return self.end.x - self.start.x

    @property
    def dy(self) -> float:
        return self.end.y - self.start.y


RawInput = Union[KeyPress, Swipe]
