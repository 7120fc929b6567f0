from enum import Enum


class InputType(Enum):
    KEY_PRESS = "key_press"
    SWIPE = "swipe"
