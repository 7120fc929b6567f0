import logging
from typing import Iterable, Optional

import pygame

from snake_game.constants.headings import Heading
from snake_game.constants.keys import (
    DIRECTION_KEYS,
    QUIT_KEYS,
    RESTART_KEYS,
    TOGGLE_PAUSE_KEYS,
)
from snake_game.schemas.inputs import KeyPress, Position, RawInput, Swipe
from snake_game.systems.system import System

logger = logging.getLogger(__name__)

PYGAME_KEYS = {
    pygame.K_UP: "ArrowUp",
    pygame.K_DOWN: "ArrowDown",
    pygame.K_LEFT: "ArrowLeft",
    pygame.K_RIGHT: "ArrowRight",
    pygame.K_w: "w",
    pygame.K_s: "s",
    pygame.K_a: "a",
    pygame.K_d: "d",
    pygame.K_SPACE: " ",
    pygame.K_r: "r",
    pygame.K_RETURN: "Enter",
    pygame.K_ESCAPE: "Escape",
}


class InputTranslator:
    """
    Maps raw key presses and swipes to headings.

    A swipe shorter than `tap_threshold` pixels on both axes is a tap, which
    toggles pause instead of steering.
    """

    def __init__(self, tap_threshold: float = 10.0):
        if tap_threshold < 0:
            raise ValueError("Tap threshold cannot be negative")
        self.tap_threshold = tap_threshold

    def on_directional_input(self, raw_input: RawInput, current: Heading) -> Optional[Heading]:
        heading = self._to_heading(raw_input)
        if heading is None:
            return None

        if current.is_opposite(heading):
            logger.debug("Ignoring %s, it would reverse %s", heading.name, current.name)
            return None
        return heading

    def is_toggle(self, raw_input: RawInput) -> bool:
        if isinstance(raw_input, KeyPress):
            return raw_input.key in TOGGLE_PAUSE_KEYS
        if isinstance(raw_input, Swipe):
            return self._is_tap(raw_input)
        return False

    def is_restart(self, raw_input: RawInput) -> bool:
        return isinstance(raw_input, KeyPress) and raw_input.key in RESTART_KEYS

    def _to_heading(self, raw_input: RawInput) -> Optional[Heading]:
        if isinstance(raw_input, KeyPress):
            return DIRECTION_KEYS.get(raw_input.key)
        if isinstance(raw_input, Swipe):
            if self._is_tap(raw_input):
                return None
            return self._swipe_heading(raw_input)
        return None

    def _swipe_heading(self, swipe: Swipe) -> Optional[Heading]:
        dx, dy = swipe.dx, swipe.dy

        # The axis with the larger displacement wins, ties go to the vertical axis
        if abs(dx) > abs(dy):
            return Heading.RIGHT if dx > 0 else Heading.LEFT
        if dy > 0:
            return Heading.DOWN
        if dy < 0:
            return Heading.UP
        return None

    def _is_tap(self, swipe: Swipe) -> bool:
        return abs(swipe.dx) < self.tap_threshold and abs(swipe.dy) < self.tap_threshold


class InputSystem(System):
    def __init__(self, window_size: tuple[int, int]):
        self.window_size = window_size
        self._swipe_start: Optional[Position] = None

    def setup(self):
        self._swipe_start = None

    def run(self) -> tuple[list[RawInput], bool]:
        return self.translate_events(pygame.event.get())

    def translate_events(self, events: Iterable[pygame.event.Event]) -> tuple[list[RawInput], bool]:
        raw_inputs: list[RawInput] = []
        quit_game = False

        for event in events:
            if event.type == pygame.QUIT:
                quit_game = True
            elif event.type == pygame.KEYDOWN:
                key = PYGAME_KEYS.get(event.key)
                if key in QUIT_KEYS:
                    quit_game = True
                elif key is not None:
                    raw_inputs.append(KeyPress(key=key))
            elif event.type == pygame.MOUSEBUTTONDOWN and self._is_primary_click(event):
                self._swipe_start = Position(x=event.pos[0], y=event.pos[1])
            elif event.type == pygame.MOUSEBUTTONUP and self._is_primary_click(event):
                swipe = self._finish_swipe(Position(x=event.pos[0], y=event.pos[1]))
                if swipe is not None:
                    raw_inputs.append(swipe)
            elif event.type == pygame.FINGERDOWN:
                self._swipe_start = self._finger_position(event)
            elif event.type == pygame.FINGERUP:
                swipe = self._finish_swipe(self._finger_position(event))
                if swipe is not None:
                    raw_inputs.append(swipe)

        return raw_inputs, quit_game

    def _finish_swipe(self, end: Position) -> Optional[Swipe]:
        start = self._swipe_start
        self._swipe_start = None
        if start is None:
            return None
        return Swipe(start=start, end=end)

    def _finger_position(self, event: pygame.event.Event) -> Position:
        # Finger coordinates are normalized to the window size
        width, height = self.window_size
        return Position(x=event.x * width, y=event.y * height)

    def _is_primary_click(self, event: pygame.event.Event) -> bool:
        # SDL mirrors touches as mouse events, those are handled as fingers
        return event.button == 1 and not getattr(event, "touch", False)
