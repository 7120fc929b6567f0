import logging
from typing import Optional

from snake_game.components.grid import Grid
from snake_game.config import GameConfig
from snake_game.constants.headings import Heading
from snake_game.constants.loop_states import LoopState
from snake_game.schemas.inputs import RawInput
from snake_game.schemas.state import GameSnapshot, GameState
from snake_game.systems.food import FoodPlacer
from snake_game.systems.movement import MovementSystem
from snake_game.systems.player_input import InputTranslator
from snake_game.utils.scheduler import FrameScheduler

logger = logging.getLogger(__name__)


class GameLoop:
    """
    Owns the game state and decides when the movement system ticks.

    All mutations go through `tick`, `pause`, `resume`, `toggle_pause`,
    `reset` and `set_heading`. Everyone else reads `snapshot()`.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        food_placer: Optional[FoodPlacer] = None,
    ):
        self.config = config or GameConfig()
        self.grid = Grid(self.config.grid_size)
        self.food_placer = food_placer or FoodPlacer(self.grid, seed=self.config.seed)
        self.movement_system = MovementSystem(self.grid, self.food_placer, self.config)
        self.input_translator = InputTranslator(self.config.tap_threshold)

        self._scheduler: Optional[FrameScheduler] = None
        self._frame_handle: Optional[int] = None
        self._last_tick_ms = 0.0

        self.state = self.movement_system.new_game()
        logger.info("New game on %r, food at %s", self.grid, self.state.food)

    @property
    def loop_state(self) -> LoopState:
        if self.state.is_terminal:
            return LoopState.GAME_OVER
        if self.state.paused:
            return LoopState.PAUSED
        return LoopState.RUNNING

    def snapshot(self) -> GameSnapshot:
        state = self.state
        return GameSnapshot(
            snake=state.snake,
            food=state.food,
            score=state.score,
            tick_interval_ms=state.tick_interval_ms,
            alive=state.alive,
            paused=state.paused,
            won=state.won,
            death_reason=state.death_reason,
            status=self.loop_state.value,
        )

    def tick(self) -> GameState:
        if self.loop_state != LoopState.RUNNING:
            return self.state

        self.state = self.movement_system.tick(self.state)
        if self.state.is_terminal:
            logger.info(
                "Game over after %d ticks, score %d%s",
                self.state.ticks,
                self.state.score,
                " (grid full)" if self.state.won else "",
            )
        return self.state

    def on_frame(self, timestamp_ms: float) -> bool:
        """
        Ticks at most once per call, when at least one tick interval passed
        since the previous tick. Returns whether a tick happened.
        """
        if self.loop_state != LoopState.RUNNING:
            return False

        if timestamp_ms - self._last_tick_ms < self.state.tick_interval_ms:
            return False

        self.tick()
        # Late frames are not caught up on, the next tick waits a full interval
        self._last_tick_ms = timestamp_ms
        return True

    def start(self, scheduler: FrameScheduler):
        if self._scheduler is not None:
            raise ValueError("Game loop is already started")
        self._scheduler = scheduler
        self._frame_handle = scheduler.request_frame(self._on_animation_frame)

    def stop(self):
        if self._scheduler is not None and self._frame_handle is not None:
            self._scheduler.cancel_frame(self._frame_handle)
        self._scheduler = None
        self._frame_handle = None

    @property
    def is_started(self) -> bool:
        return self._scheduler is not None

    def _on_animation_frame(self, timestamp_ms: float):
        self._frame_handle = None
        self.on_frame(timestamp_ms)
        if self._scheduler is not None:
            self._frame_handle = self._scheduler.request_frame(self._on_animation_frame)

    def pause(self) -> bool:
        if self.loop_state != LoopState.RUNNING:
            return False
        self.state = self.state.model_copy(update={"paused": True})
        logger.debug("Game paused")
        return True

    def resume(self) -> bool:
        if self.loop_state != LoopState.PAUSED:
            return False
        self.state = self.state.model_copy(update={"paused": False})
        logger.debug("Game resumed")
        return True

    def toggle_pause(self) -> bool:
        if self.loop_state == LoopState.PAUSED:
            return self.resume()
        return self.pause()

    def reset(self):
        self.state = self.movement_system.new_game()
        logger.info("Game reset, food at %s", self.state.food)

    def set_heading(self, heading: Heading) -> bool:
        if self.loop_state == LoopState.GAME_OVER:
            return False
        if self.state.last_heading.is_opposite(heading):
            return False
        if heading is not self.state.heading:
            self.state = self.state.model_copy(update={"heading": heading})
        return True

    def handle_input(self, raw_input: RawInput):
        translator = self.input_translator
        if translator.is_restart(raw_input):
            self.reset()
        elif translator.is_toggle(raw_input):
            self.toggle_pause()
        else:
            heading = translator.on_directional_input(raw_input, self.state.last_heading)
            if heading is not None:
                self.set_heading(heading)
