from snake_game.constants.headings import Heading

# Two aliases per heading
DIRECTION_KEYS = {
    "ArrowUp": Heading.UP,
    "w": Heading.UP,
    "ArrowDown": Heading.DOWN,
    "s": Heading.DOWN,
    "ArrowLeft": Heading.LEFT,
    "a": Heading.LEFT,
    "ArrowRight": Heading.RIGHT,
    "d": Heading.RIGHT,
}

TOGGLE_PAUSE_KEYS = {" "}
RESTART_KEYS = {"r", "Enter"}
QUIT_KEYS = {"Escape"}
