"""
Tests for OrbCatchMode: the phase machine wrapped around the simulation.
"""

import random
from unittest.mock import Mock

import pytest
from pydantic import ValidationError

from catcher.events import PhaseChange, PhaseReason
from catcher.games.game_state import GameState
from catcher.games.input import InputAction, InputEvent
from catcher.logging import LogSink, close_all_sinks, register_sink
from games.OrbCatch.game_mode import OrbCatchMode
from games.OrbCatch.orb import Orb, OrbKind, radius_for


class RecordingSink(LogSink):
    """Keeps emitted records in memory."""

    def __init__(self):
        self.records = []
        self.closed = False

    def emit(self, module, record):
        self.records.append((module, record))

    def close(self):
        self.closed = True


@pytest.fixture
def game():
    return OrbCatchMode(difficulty='normal', rng=random.Random(42))


@pytest.fixture
def runs_sink():
    sink = RecordingSink()
    register_sink('runs', sink)
    yield sink
    close_all_sinks()


def press(action, value=None, pressed=True):
    return InputEvent(action=action, timestamp=0.0, pressed=pressed, value=value)


def lose_last_life(game):
    """Drop a bad orb onto the paddle of a one-life run and step once."""
    game.run.lives = 1
    game.run.orbs.append(Orb(x=400.0, y=555.0, radius=radius_for(OrbKind.BAD),
                             fall_speed=0.0, kind=OrbKind.BAD))
    game.update(0.016)


# ============================================================================
# Metadata
# ============================================================================


class TestMetadata:

    def test_info(self):
        info = OrbCatchMode.get_info()
        assert info['name'] == "Orb Catcher"
        assert info['version'] == "1.0.0"

    def test_arguments(self):
        names = [a['name'] for a in OrbCatchMode.get_arguments()]
        assert names == ['--difficulty', '--seed', '--max-frame-dt']

    def test_difficulty_choices(self):
        difficulty = OrbCatchMode.get_arguments()[0]
        assert difficulty['choices'] == ['easy', 'normal', 'hard']

    def test_unknown_options_ignored(self):
        game = OrbCatchMode(fullscreen=True)
        assert game.state == GameState.MENU


# ============================================================================
# Phases
# ============================================================================


class TestPhases:
    """MENU -> PLAYING -> GAME_OVER -> PLAYING."""

    def test_starts_in_menu(self, game):
        assert game.state == GameState.MENU
        assert game.snapshot.phase == GameState.MENU
        assert game.get_score() == 0

    def test_update_in_menu_does_nothing(self, game):
        game.update(1.0)
        assert game.state == GameState.MENU
        assert game.run.time_left == 60.0

    def test_start(self, game):
        assert game.start() is True
        assert game.state == GameState.PLAYING
        assert game.run.lives == 3
        assert game.run.time_left == 60.0

    def test_start_ignored_while_playing(self, game):
        game.start()
        run = game.run
        game.update(0.05)

        assert game.start() is False
        assert game.run is run
        assert game.state == GameState.PLAYING

    def test_time_up(self):
        game = OrbCatchMode(max_frame_dt=0, rng=random.Random(1))
        game.start()
        game.update(61.0)

        assert game.state == GameState.GAME_OVER
        assert game.snapshot.time_left_ceil == 0

    def test_lives_depleted(self, game):
        game.start()
        lose_last_life(game)

        assert game.state == GameState.GAME_OVER
        assert game.snapshot.lives == 0

    def test_update_after_game_over_does_nothing(self, game):
        game.start()
        lose_last_life(game)
        time_left = game.run.time_left

        game.update(1.0)
        assert game.run.time_left == time_left

    def test_start_from_game_over(self, game):
        game.start()
        game.run.score = 70
        lose_last_life(game)

        assert game.start() is True
        assert game.state == GameState.PLAYING
        assert game.get_score() == 0
        assert game.run.lives == 3

    def test_restart_mid_run(self, game):
        game.start()
        game.run.score = 40
        game.run.lives = 1
        game.run.orbs.append(Orb(x=100.0, y=100.0, radius=12.0, fall_speed=50.0,
                                 kind=OrbKind.GOOD))

        game.restart()
        assert game.state == GameState.PLAYING
        assert game.get_score() == 0
        assert game.run.lives == 3
        assert game.run.orbs == []

    def test_restart_from_menu(self, game):
        game.restart()
        assert game.state == GameState.PLAYING

    def test_reset_returns_to_menu(self, game):
        game.start()
        game.run.score = 30
        game.reset()

        assert game.state == GameState.MENU
        assert game.get_score() == 0


# ============================================================================
# Phase listeners
# ============================================================================


class TestPhaseListeners:

    def test_start_notifies(self, game):
        listener = Mock()
        game.on_phase_change(listener)
        game.start()

        listener.assert_called_once()
        event = listener.call_args[0][0]
        assert isinstance(event, PhaseChange)
        assert event.previous == GameState.MENU
        assert event.current == GameState.PLAYING
        assert event.reason == PhaseReason.START
        assert event.difficulty == 'normal'
        assert not event.is_game_over

    def test_game_over_notifies_with_final_score(self, game):
        listener = Mock()
        game.start()
        game.run.score = 120
        game.on_phase_change(listener)

        lose_last_life(game)

        event = listener.call_args[0][0]
        assert event.is_game_over
        assert event.previous == GameState.PLAYING
        assert event.reason == PhaseReason.LIVES_DEPLETED
        assert event.score == 120
        assert event.message == "Final Score: 120"

    def test_restart_reason(self, game):
        listener = Mock()
        game.start()
        game.on_phase_change(listener)
        game.restart()

        event = listener.call_args[0][0]
        assert event.previous == GameState.PLAYING
        assert event.reason == PhaseReason.RESTART

    def test_reset_notifies(self, game):
        """Going back to the menu is a phase change like any other."""
        listener = Mock()
        game.start()
        game.run.score = 30
        game.on_phase_change(listener)
        game.reset()

        listener.assert_called_once()
        event = listener.call_args[0][0]
        assert event.previous == GameState.PLAYING
        assert event.current == GameState.MENU
        assert event.reason == PhaseReason.RESET
        assert event.score == 0
        assert not event.is_game_over

    def test_ignored_start_does_not_notify(self, game):
        listener = Mock()
        game.start()
        game.on_phase_change(listener)
        game.start()
        listener.assert_not_called()

    def test_remove_listener(self, game):
        listener = Mock()
        game.on_phase_change(listener)
        game.remove_phase_listener(listener)
        game.start()
        listener.assert_not_called()

    def test_listener_sees_new_phase(self, game):
        """Listeners run after the transition has been applied."""
        seen = []
        game.on_phase_change(lambda event: seen.append(game.state))
        game.start()
        assert seen == [GameState.PLAYING]


# ============================================================================
# Difficulty
# ============================================================================


class TestDifficulty:

    def test_default_is_normal(self):
        assert OrbCatchMode().difficulty == 'normal'

    def test_unknown_difficulty_falls_back(self, capsys):
        game = OrbCatchMode(difficulty='nightmare')
        assert game.difficulty == 'normal'
        assert "unknown difficulty" in capsys.readouterr().out

    def test_set_difficulty_returns_selection(self, game):
        assert game.set_difficulty('HARD') == 'hard'
        assert game.set_difficulty('bogus') == 'normal'

    def test_applies_at_next_start(self, game):
        game.start()
        game.set_difficulty('easy')
        assert game.run.config.name == 'normal'

        game.restart()
        assert game.run.config.name == 'easy'
        assert game.run.lives == 4
        assert game.run.time_left == 70.0

    def test_menu_snapshot_shows_pending_choice(self, game):
        game.handle_input([press(InputAction.SELECT_DIFFICULTY, 'hard')])
        assert game.snapshot.difficulty == 'hard'

    def test_playing_snapshot_shows_current_run(self, game):
        game.start()
        game.handle_input([press(InputAction.SELECT_DIFFICULTY, 'hard')])
        game.update(0.016)
        assert game.snapshot.difficulty == 'normal'
        assert game.difficulty == 'hard'


# ============================================================================
# Frame time
# ============================================================================


class TestFrameTime:

    def test_default_cap(self, game):
        assert game.max_frame_dt == 0.1

    def test_long_frame_is_capped(self, game):
        game.start()
        game.update(5.0)
        assert game.run.time_left == pytest.approx(59.9)

    def test_negative_dt_treated_as_zero(self, game):
        game.start()
        game.update(-1.0)
        assert game.run.time_left == 60.0

    def test_zero_disables_cap(self):
        game = OrbCatchMode(max_frame_dt=0, rng=random.Random(3))
        game.start()
        game.update(5.0)
        assert game.run.time_left == pytest.approx(55.0)


# ============================================================================
# Input
# ============================================================================


class TestHandleInput:

    def test_move_press_and_release(self, game):
        game.start()
        game.handle_input([press(InputAction.MOVE_LEFT)])
        assert game.run.player.moving_left

        game.handle_input([press(InputAction.MOVE_LEFT, pressed=False)])
        assert not game.run.player.moving_left

    def test_moving_right_moves_paddle(self, game):
        game.start()
        game.handle_input([press(InputAction.MOVE_RIGHT)])
        game.update(0.1)
        assert game.run.player.x == pytest.approx(355.0 + 38.0)

    def test_start_action(self, game):
        game.handle_input([press(InputAction.START)])
        assert game.state == GameState.PLAYING

    def test_restart_action(self, game):
        game.start()
        game.run.score = 50
        game.handle_input([press(InputAction.RESTART)])
        assert game.get_score() == 0

    def test_held_keys_survive_restart(self, game):
        game.handle_input([press(InputAction.MOVE_LEFT)])
        game.start()
        assert game.run.player.moving_left

        game.restart()
        assert game.run.player.moving_left
        assert game.run.player.x == 355.0


# ============================================================================
# Snapshot and session
# ============================================================================


class TestSnapshotAndSession:

    def test_snapshot_tracks_run(self, game):
        game.start()
        game.run.orbs.append(Orb(x=100.0, y=100.0, radius=12.0, fall_speed=0.0,
                                 kind=OrbKind.POWER_SLOW))
        game.update(0.5)

        snapshot = game.snapshot
        assert snapshot.phase == GameState.PLAYING
        assert snapshot.time_left_ceil == 60
        assert len(snapshot.orbs) == 1
        assert snapshot.orbs[0].kind == OrbKind.POWER_SLOW
        assert snapshot.player.x == 355.0

    def test_snapshot_is_frozen(self, game):
        with pytest.raises(ValidationError):
            game.snapshot.score = 10

    def test_session_best(self, game):
        game.start()
        game.run.score = 50
        lose_last_life(game)
        assert game.session_best == 50
        assert game.runs_played == 1

        game.start()
        game.run.score = 30
        lose_last_life(game)
        assert game.session_best == 50
        assert game.runs_played == 2
        assert game.snapshot.session_best == 50

    def test_run_summary_record(self, game, runs_sink):
        game.start()
        game.run.score = 80
        lose_last_life(game)

        assert len(runs_sink.records) == 1
        module, record = runs_sink.records[0]
        assert module == 'runs'
        assert record['type'] == 'run_summary'
        assert record['reason'] == PhaseReason.LIVES_DEPLETED
        assert record['score'] == 80
        assert record['difficulty'] == 'normal'
        assert record['bad_caught'] == 1
        assert record['new_best'] is True

    def test_no_record_without_game_over(self, game, runs_sink):
        game.start()
        game.restart()
        assert runs_sink.records == []
