from .inputs import KeyPress, Position, RawInput, Swipe
from .state import Cell, GameSnapshot, GameState
