import pygame

from snake_game.constants import colors
from snake_game.constants.loop_states import LoopState
from snake_game.schemas.state import Cell, GameSnapshot
from snake_game.systems.system import System
from snake_game.utils.timer import log_func_time

HUD_HEIGHT = 32


class RenderSystem(System):
    def __init__(self, grid_size: int, cell_size: int):
        self.grid_size = grid_size
        self.cell_size = cell_size

        # Set the screen size, the HUD sits on top of the grid
        self.board_size = self.cell_size * grid_size
        self.window_size = (self.board_size, self.board_size + HUD_HEIGHT)
        self.window = None
        self._font = None
        self._banner_font = None

    def setup(self):
        self.window = pygame.display.set_mode(self.window_size)
        pygame.display.set_caption("Snake Game")
        self._font = pygame.font.Font(None, 24)
        self._banner_font = pygame.font.Font(None, 36)

        self.window.fill(colors.BACKGROUND)
        pygame.display.flip()

    def cell_rect(self, cell: Cell) -> pygame.Rect:
        return pygame.Rect(
            cell[0] * self.cell_size,
            cell[1] * self.cell_size + HUD_HEIGHT,
            self.cell_size,
            self.cell_size,
        )

    @log_func_time
    def run(self, snapshot: GameSnapshot):
        self.window.fill(colors.BACKGROUND)
        pygame.draw.rect(
            self.window,
            colors.GRID_BACKGROUND,
            (0, HUD_HEIGHT, self.board_size, self.board_size),
        )

        if snapshot.food is not None:
            pygame.draw.ellipse(self.window, colors.FOOD, self.cell_rect(snapshot.food))

        # Draw the tail first so the head stays on top
        for index in range(len(snapshot.snake) - 1, -1, -1):
            rect = self.cell_rect(snapshot.snake[index])
            color = colors.SNAKE_HEAD if index == 0 else colors.SNAKE_BODY
            radius = self.cell_size * 3 // 10 if index == 0 else self.cell_size * 3 // 20
            pygame.draw.rect(self.window, color, rect, border_radius=radius)
            pygame.draw.rect(self.window, colors.SNAKE_OUTLINE, rect, width=1, border_radius=radius)

        self._draw_hud(snapshot)

        if snapshot.status == LoopState.PAUSED.value:
            self._draw_banner(["Paused", "Space or tap to resume"])
        elif snapshot.status == LoopState.GAME_OVER.value:
            if snapshot.won:
                title = f"You win! Final Score: {snapshot.score}"
            else:
                title = f"Game Over! Final Score: {snapshot.score}"
            self._draw_banner([title, "Press R to play again"])

        pygame.display.flip()

    def _draw_hud(self, snapshot: GameSnapshot):
        score = self._font.render(f"Score: {snapshot.score}", True, colors.HUD_TEXT)
        self.window.blit(score, (8, (HUD_HEIGHT - score.get_height()) // 2))

        controls = self._font.render("WASD/Arrows | Space: pause | R: restart", True, colors.HUD_TEXT)
        if controls.get_width() + score.get_width() + 24 <= self.board_size:
            self.window.blit(
                controls,
                (self.board_size - controls.get_width() - 8, (HUD_HEIGHT - controls.get_height()) // 2),
            )

    def _draw_banner(self, lines: list[str]):
        overlay = pygame.Surface((self.board_size, self.board_size), pygame.SRCALPHA)
        overlay.fill(colors.OVERLAY)
        self.window.blit(overlay, (0, HUD_HEIGHT))

        rendered = [self._banner_font.render(lines[0], True, colors.HUD_TEXT)]
        rendered += [self._font.render(line, True, colors.HUD_TEXT) for line in lines[1:]]

        total_height = sum(surface.get_height() + 6 for surface in rendered)
        y = HUD_HEIGHT + (self.board_size - total_height) // 2
        for surface in rendered:
            self.window.blit(surface, ((self.board_size - surface.get_width()) // 2, y))
            y += surface.get_height() + 6
