from unittest.mock import Mock

import pytest
from pydantic import ValidationError

from snake_game.config import GameConfig
from snake_game.constants.headings import Heading
from snake_game.game_instances.game_loop import GameLoop, LoopState
from snake_game.schemas.inputs import KeyPress, Position, Swipe
from snake_game.systems.food import FoodPlacer
from snake_game.utils.scheduler import FrameScheduler


@pytest.fixture
def game_loop(config):
    return GameLoop(config)


@pytest.fixture
def fixed_food_loop(config):
    """Game loop whose food always lands on (5, 5) unless told otherwise."""
    placer = Mock(spec=FoodPlacer)
    placer.place.return_value = (5, 5)
    return GameLoop(config, food_placer=placer)


class TestGameLoopSetup:
    """Tests for the initial loop state."""

    def test_starts_running(self, game_loop):
        assert game_loop.loop_state is LoopState.RUNNING
        assert game_loop.state.snake == ((10, 10),)
        assert game_loop.state.food not in game_loop.state.snake
        assert game_loop.state.score == 0
        assert game_loop.state.tick_interval_ms == 100

    def test_default_config(self):
        assert GameLoop().config == GameConfig()


class TestGameLoopTicks:
    """Tests for ticking through the loop."""

    def test_first_tick_scenario(self, fixed_food_loop):
        fixed_food_loop.tick()

        state = fixed_food_loop.state
        assert state.snake == ((11, 10),)
        assert state.food == (5, 5)
        assert state.score == 0
        assert state.alive is True

    def test_eating_food(self, fixed_food_loop):
        loop = fixed_food_loop
        loop.state = loop.state.model_copy(update={"food": (11, 10)})
        loop.food_placer.place.return_value = (3, 3)

        loop.tick()

        assert loop.state.score == 1
        assert loop.state.length == 2
        assert loop.state.food == (3, 3)
        assert loop.state.tick_interval_ms == 98

    def test_wall_collision_ends_game(self, fixed_food_loop):
        loop = fixed_food_loop
        loop.set_heading(Heading.UP)
        for _ in range(10):
            loop.tick()
        assert loop.state.head == (10, 0)
        assert loop.loop_state is LoopState.RUNNING

        loop.tick()

        assert loop.loop_state is LoopState.GAME_OVER
        assert loop.state.alive is False
        assert loop.state.snake == ((10, 0),)

    def test_ticks_are_noops_after_game_over(self, fixed_food_loop):
        loop = fixed_food_loop
        loop.state = loop.state.model_copy(update={"snake": ((0, 10),), "heading": Heading.LEFT})
        loop.tick()
        game_over = loop.state

        loop.tick()
        loop.tick()

        assert loop.state is game_over

    def test_ticks_suppressed_while_paused(self, game_loop):
        game_loop.pause()
        before = game_loop.state
        game_loop.tick()
        assert game_loop.state is before


class TestGameLoopControls:
    """Tests for pause, resume, reset and heading changes."""

    def test_pause_then_resume_only_flips_paused(self, game_loop):
        before = game_loop.state

        assert game_loop.pause() is True
        paused = game_loop.state
        assert game_loop.loop_state is LoopState.PAUSED
        assert paused.paused is True
        assert paused.model_copy(update={"paused": False}) == before

        assert game_loop.resume() is True
        assert game_loop.loop_state is LoopState.RUNNING
        assert game_loop.state == before

    def test_resume_when_running_does_nothing(self, game_loop):
        assert game_loop.resume() is False
        assert game_loop.loop_state is LoopState.RUNNING

    def test_toggle_pause(self, game_loop):
        game_loop.toggle_pause()
        assert game_loop.loop_state is LoopState.PAUSED
        game_loop.toggle_pause()
        assert game_loop.loop_state is LoopState.RUNNING

    def test_pause_ignored_after_game_over(self, fixed_food_loop):
        loop = fixed_food_loop
        loop.state = loop.state.model_copy(update={"alive": False})
        assert loop.pause() is False
        assert loop.toggle_pause() is False
        assert loop.loop_state is LoopState.GAME_OVER

    def test_reset_after_game_over(self, fixed_food_loop):
        loop = fixed_food_loop
        loop.state = loop.state.model_copy(
            update={
                "snake": ((0, 3), (1, 3), (2, 3)),
                "heading": Heading.LEFT,
                "last_heading": Heading.LEFT,
                "score": 7,
                "tick_interval_ms": 86,
            }
        )
        loop.tick()
        assert loop.loop_state is LoopState.GAME_OVER

        loop.reset()

        state = loop.state
        assert loop.loop_state is LoopState.RUNNING
        assert state.score == 0
        assert state.tick_interval_ms == 100
        assert state.snake == ((10, 10),)
        assert state.alive is True
        assert state.paused is False
        assert state.heading is Heading.RIGHT
        assert state.ticks == 0

    def test_reset_while_paused_clears_pause(self, game_loop):
        game_loop.pause()
        game_loop.reset()
        assert game_loop.loop_state is LoopState.RUNNING

    def test_set_heading(self, game_loop):
        assert game_loop.set_heading(Heading.UP) is True
        assert game_loop.state.heading is Heading.UP

    def test_set_heading_rejects_reversal(self, game_loop):
        assert game_loop.set_heading(Heading.LEFT) is False
        assert game_loop.state.heading is Heading.RIGHT

    def test_two_turns_between_ticks_cannot_reverse(self, fixed_food_loop):
        loop = fixed_food_loop
        loop.state = loop.state.model_copy(update={"snake": ((10, 10), (9, 10), (8, 10))})

        assert loop.set_heading(Heading.UP) is True
        # Still moving right until the next tick, so left is a reversal
        assert loop.set_heading(Heading.LEFT) is False
        loop.tick()

        assert loop.state.alive is True
        assert loop.state.head == (10, 9)

    def test_set_heading_ignored_after_game_over(self, fixed_food_loop):
        loop = fixed_food_loop
        loop.state = loop.state.model_copy(update={"alive": False})
        assert loop.set_heading(Heading.UP) is False


class TestGameLoopInput:
    """Tests for raw input dispatch."""

    def test_key_changes_heading(self, game_loop):
        game_loop.handle_input(KeyPress(key="w"))
        assert game_loop.state.heading is Heading.UP

    def test_reverse_key_is_ignored(self, game_loop):
        game_loop.handle_input(KeyPress(key="ArrowLeft"))
        assert game_loop.state.heading is Heading.RIGHT

    def test_space_toggles_pause(self, game_loop):
        game_loop.handle_input(KeyPress(key=" "))
        assert game_loop.loop_state is LoopState.PAUSED
        assert game_loop.state.heading is Heading.RIGHT
        game_loop.handle_input(KeyPress(key=" "))
        assert game_loop.loop_state is LoopState.RUNNING

    def test_tap_toggles_pause(self, game_loop):
        tap = Swipe(start=Position(x=50, y=50), end=Position(x=52, y=51))
        game_loop.handle_input(tap)
        assert game_loop.loop_state is LoopState.PAUSED

    def test_swipe_changes_heading(self, game_loop):
        game_loop.handle_input(Swipe(start=Position(x=50, y=50), end=Position(x=60, y=150)))
        assert game_loop.state.heading is Heading.DOWN

    def test_restart_key_resets(self, fixed_food_loop):
        loop = fixed_food_loop
        loop.tick()
        loop.handle_input(KeyPress(key="r"))
        assert loop.state.snake == ((10, 10),)
        assert loop.state.ticks == 0


class TestGameLoopScheduling:
    """Tests for frame driven ticking."""

    @pytest.fixture
    def game_loop(self, fixed_food_loop):
        return fixed_food_loop

    def test_ticks_once_interval_elapsed(self, game_loop):
        assert game_loop.on_frame(50) is False
        assert game_loop.on_frame(99.9) is False
        assert game_loop.on_frame(100) is True
        assert game_loop.state.ticks == 1

    def test_at_most_one_tick_per_frame(self, game_loop):
        assert game_loop.on_frame(1000) is True
        assert game_loop.state.ticks == 1

    def test_drift_is_absorbed(self, game_loop):
        game_loop.on_frame(350)
        # Next tick waits a full interval from the late frame
        assert game_loop.on_frame(400) is False
        assert game_loop.on_frame(449) is False
        assert game_loop.on_frame(450) is True
        assert game_loop.state.ticks == 2

    def test_no_ticks_while_paused(self, game_loop):
        game_loop.pause()
        assert game_loop.on_frame(1000) is False
        assert game_loop.state.ticks == 0

    def test_tick_right_after_resume_when_interval_passed(self, game_loop):
        game_loop.pause()
        game_loop.on_frame(500)
        game_loop.resume()
        assert game_loop.on_frame(600) is True

    def test_no_ticks_after_game_over(self, fixed_food_loop):
        loop = fixed_food_loop
        loop.state = loop.state.model_copy(update={"alive": False})
        assert loop.on_frame(1000) is False

    def test_uses_current_interval(self, fixed_food_loop):
        loop = fixed_food_loop
        loop.state = loop.state.model_copy(update={"tick_interval_ms": 60})
        assert loop.on_frame(60) is True


class TestGameLoopLifecycle:
    """Tests for starting and stopping the loop on a scheduler."""

    @pytest.fixture
    def game_loop(self, fixed_food_loop):
        return fixed_food_loop

    def test_start_registers_frame_callback(self, game_loop):
        scheduler = FrameScheduler()
        game_loop.start(scheduler)
        assert game_loop.is_started
        assert scheduler.pending == 1

    def test_loop_keeps_ticking_across_frames(self, game_loop):
        scheduler = FrameScheduler()
        game_loop.start(scheduler)

        for timestamp in range(0, 501, 50):
            scheduler.run_frame(timestamp)

        assert game_loop.state.ticks == 5
        assert scheduler.pending == 1

    def test_loop_keeps_polling_while_paused(self, game_loop):
        scheduler = FrameScheduler()
        game_loop.start(scheduler)
        game_loop.pause()

        scheduler.run_frame(200)
        game_loop.resume()
        scheduler.run_frame(300)

        assert game_loop.state.ticks == 1

    def test_stop_cancels_pending_frame(self, game_loop):
        scheduler = FrameScheduler()
        game_loop.start(scheduler)

        game_loop.stop()
        scheduler.run_frame(1000)

        assert scheduler.pending == 0
        assert game_loop.state.ticks == 0
        assert not game_loop.is_started

    def test_cannot_start_twice(self, game_loop):
        scheduler = FrameScheduler()
        game_loop.start(scheduler)
        with pytest.raises(ValueError):
            game_loop.start(scheduler)

    def test_stop_without_start(self, game_loop):
        game_loop.stop()
        assert not game_loop.is_started


class TestSnapshot:
    """Tests for the renderer snapshot."""

    def test_snapshot_mirrors_state(self, game_loop):
        snapshot = game_loop.snapshot()
        assert snapshot.snake == game_loop.state.snake
        assert snapshot.food == game_loop.state.food
        assert snapshot.score == 0
        assert snapshot.status == LoopState.RUNNING.value

    def test_snapshot_is_read_only(self, game_loop):
        snapshot = game_loop.snapshot()
        with pytest.raises(ValidationError):
            snapshot.score = 10

    def test_snapshot_status_follows_loop(self, game_loop):
        game_loop.pause()
        assert game_loop.snapshot().status == "paused"
