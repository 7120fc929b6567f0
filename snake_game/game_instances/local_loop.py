import logging
import os
from typing import Optional

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "hide")
import pygame  # noqa: E402

from snake_game.config import GameConfig  # noqa: E402
from snake_game.game_instances.game_loop import GameLoop  # noqa: E402
from snake_game.systems.player_input import InputSystem  # noqa: E402
from snake_game.systems.render import RenderSystem  # noqa: E402
from snake_game.utils.scheduler import FrameScheduler  # noqa: E402
from snake_game.utils.timer import Timer  # noqa: E402

logger = logging.getLogger(__name__)


class LocalLoop:
    def __init__(self, config: Optional[GameConfig] = None):
        self.config = config or GameConfig()

        self.rendering_system = RenderSystem(self.config.grid_size, self.config.cell_size)
        self.input_system = InputSystem(self.rendering_system.window_size)
        self.scheduler = FrameScheduler()
        self.game_loop = GameLoop(self.config)

        self._clock = None
        self._timer = Timer()
        self._running = False

    def setup(self):
        pygame.init()

        self.input_system.setup()
        self.rendering_system.setup()

        self._clock = pygame.time.Clock()
        self._timer.reset()
        self.game_loop.start(self.scheduler)
        self._running = True

    @property
    def running(self) -> bool:
        return self._running

    def close(self):
        self.game_loop.stop()
        pygame.quit()

    def run_frame(self):
        raw_inputs, quit_game = self.input_system.run()
        if quit_game:
            self._running = False
            return

        for raw_input in raw_inputs:
            self.game_loop.handle_input(raw_input)

        self.scheduler.run_frame(self._timer.elapsed_ms())

        self.rendering_system.run(self.game_loop.snapshot())

    def run(self):
        self.setup()
        logger.info("Starting game window %sx%s", *self.rendering_system.window_size)
        try:
            while self._running:
                self.run_frame()
                self._clock.tick(self.config.frame_rate)
        except KeyboardInterrupt:
            pass
        finally:
            self.close()
        logger.info("Game window closed")
