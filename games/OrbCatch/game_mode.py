"""
OrbCatch Game Mode

Catch falling orbs with a paddle before the clock runs out. Good orbs
score, bad orbs cost a life, green orbs slow everything down and gold orbs
give double points for a few seconds.
"""
import random
import time
from typing import List, Optional

import pygame

from catcher.events import PhaseChange, PhaseReason
from catcher.games.base_game import BaseGame
from catcher.games.game_state import GameState
from catcher.games.input import InputAction, InputEvent
from catcher.games.presets import get_preset_names, is_known_preset
from catcher.logging import emit_record, get_logger
from models import Resolution
from games.OrbCatch import config
from games.OrbCatch.run_state import RunState
from games.OrbCatch.simulation import advance
from games.OrbCatch.snapshot import GameSnapshot
from games.OrbCatch.spawner import OrbSpawner

log = get_logger('orbcatch')


class OrbCatchMode(BaseGame):
    """OrbCatch game mode - phase machine around the simulation step.

    Phases:
    - MENU: initial, waiting for start
    - PLAYING: update() advances the run
    - GAME_OVER: time ran out or lives depleted; start/restart begins a new run

    The selected difficulty is read once per run, when the run starts.
    """

    NAME = "Orb Catcher"
    DESCRIPTION = "Catch good orbs, dodge bad ones, grab power-ups before time runs out."
    VERSION = "1.0.0"
    AUTHOR = "Orb Catcher Team"

    ARGUMENTS = [
        {
            'name': '--difficulty',
            'type': str,
            'default': config.DEFAULT_DIFFICULTY,
            'choices': get_preset_names(config.DIFFICULTY_PRESETS),
            'help': 'Difficulty tier (easy, normal, hard)'
        },
    ]

    def __init__(
        self,
        difficulty: str = config.DEFAULT_DIFFICULTY,
        width: int = config.SCREEN_WIDTH,
        height: int = config.SCREEN_HEIGHT,
        max_frame_dt: Optional[float] = None,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
        **kwargs,
    ):
        """Initialize OrbCatch.

        Args:
            difficulty: Difficulty tier for the first run
            width: Playfield width in pixels
            height: Playfield height in pixels
            max_frame_dt: Cap on dt per update (None = config.MAX_FRAME_DT, 0 = uncapped)
            seed: Seed for the orb spawner
            rng: Random source for the orb spawner (overrides seed)
        """
        super().__init__(**kwargs)

        self._playfield = Resolution(width=width, height=height)
        self._max_frame_dt = config.MAX_FRAME_DT if max_frame_dt is None else max_frame_dt
        self._spawner = OrbSpawner(rng=rng or random.Random(seed))

        self._difficulty = config.FALLBACK_DIFFICULTY
        self.set_difficulty(difficulty)

        self._state = GameState.MENU
        self._run = RunState.fresh(config.get_difficulty(self._difficulty), self._playfield)

        # Session tracking
        self._session_best = 0
        self._runs_played = 0

        self._renderer = None  # created on first render
        self._snapshot = self._build_snapshot()

    # =========================================================================
    # Read-only interface
    # =========================================================================

    def _get_internal_state(self) -> GameState:
        return self._state

    def get_score(self) -> int:
        return self._run.score

    @property
    def difficulty(self) -> str:
        """Difficulty that the next start/restart will use."""
        return self._difficulty

    @property
    def run(self) -> RunState:
        """The live run. Presentation code should read snapshot instead."""
        return self._run

    @property
    def snapshot(self) -> GameSnapshot:
        return self._snapshot

    @property
    def session_best(self) -> int:
        return self._session_best

    @property
    def runs_played(self) -> int:
        return self._runs_played

    @property
    def max_frame_dt(self) -> float:
        return self._max_frame_dt

    # =========================================================================
    # Inbound interface
    # =========================================================================

    def set_difficulty(self, name: str) -> str:
        """Select the difficulty for the next run.

        Unknown names fall back to normal. Returns the name actually selected.
        """
        if not is_known_preset(config.DIFFICULTY_PRESETS, name):
            log.warning("unknown difficulty %r, using %s", name, config.FALLBACK_DIFFICULTY)
        self._difficulty = config.get_difficulty(name).name
        return self._difficulty

    def set_moving_left(self, moving: bool) -> None:
        self._run.player.moving_left = moving

    def set_moving_right(self, moving: bool) -> None:
        self._run.player.moving_right = moving

    def start(self) -> bool:
        """Start a run from MENU or GAME_OVER. Ignored while PLAYING.

        Returns:
            True if a new run started
        """
        if self._state == GameState.PLAYING:
            log.debug("start ignored, run in progress")
            return False
        self._begin_run(PhaseReason.START)
        return True

    def restart(self) -> None:
        """Abandon whatever is happening and start a fresh run."""
        self._begin_run(PhaseReason.RESTART)

    def reset(self) -> None:
        """Back to the menu with an untouched run."""
        previous = self._state
        self._state = GameState.MENU
        self._run = RunState.fresh(config.get_difficulty(self._difficulty), self._playfield)
        self._snapshot = self._build_snapshot()
        log.info("reset to menu from %s", previous.value)
        self._emit_phase_change(PhaseChange(
            previous=previous,
            current=GameState.MENU,
            reason=PhaseReason.RESET,
            difficulty=self._difficulty,
            score=0,
            timestamp=time.monotonic(),
        ))

    def handle_input(self, events: List[InputEvent]) -> None:
        """Map input events onto the inbound interface."""
        for event in events:
            if event.action == InputAction.MOVE_LEFT:
                self.set_moving_left(event.pressed)
            elif event.action == InputAction.MOVE_RIGHT:
                self.set_moving_right(event.pressed)
            elif event.action == InputAction.START:
                self.start()
            elif event.action == InputAction.RESTART:
                self.restart()
            elif event.action == InputAction.SELECT_DIFFICULTY:
                self.set_difficulty(event.value)
                if self._state != GameState.PLAYING:
                    # Menu and game-over screens show the pending choice
                    self._snapshot = self._build_snapshot()

    def update(self, dt: float) -> None:
        """Advance the run by one frame."""
        if self._state != GameState.PLAYING:
            return

        dt = max(0.0, dt)
        if self._max_frame_dt > 0:
            dt = min(dt, self._max_frame_dt)

        reason = advance(self._run, dt, self._spawner)
        if reason is not None:
            self._end_run(reason)
        self._snapshot = self._build_snapshot()

    def render(self, screen: pygame.Surface) -> None:
        """Draw the latest snapshot."""
        if self._renderer is None:
            from games.OrbCatch.renderer import OrbCatchRenderer
            self._renderer = OrbCatchRenderer()
        self._renderer.draw(screen, self._snapshot)

    # =========================================================================
    # Transitions
    # =========================================================================

    def _begin_run(self, reason: str) -> None:
        previous = self._state
        difficulty = config.get_difficulty(self._difficulty)

        # Keep held keys held across the reset
        moving_left = self._run.player.moving_left
        moving_right = self._run.player.moving_right

        self._run = RunState.fresh(difficulty, self._playfield)
        self._run.player.moving_left = moving_left
        self._run.player.moving_right = moving_right
        self._state = GameState.PLAYING
        self._snapshot = self._build_snapshot()

        log.info("%s: %s run (%d lives, %.0fs)",
                 reason, difficulty.name, difficulty.lives, difficulty.duration)
        self._emit_phase_change(PhaseChange(
            previous=previous,
            current=GameState.PLAYING,
            reason=reason,
            difficulty=difficulty.name,
            score=0,
            timestamp=time.monotonic(),
        ))

    def _end_run(self, reason: str) -> None:
        self._state = GameState.GAME_OVER
        self._runs_played += 1
        new_best = self._run.score > self._session_best
        if new_best:
            self._session_best = self._run.score
        self._snapshot = self._build_snapshot()

        summary = self._run.summary()
        log.info("game over (%s): score %d", reason, self._run.score)
        emit_record('runs', {'type': 'run_summary', 'reason': reason,
                             'new_best': new_best, **summary})

        self._emit_phase_change(PhaseChange(
            previous=GameState.PLAYING,
            current=GameState.GAME_OVER,
            reason=reason,
            difficulty=self._run.config.name,
            score=max(0, self._run.score),
            timestamp=time.monotonic(),
            message=f"Final Score: {self._run.score}",
        ))

    def _build_snapshot(self) -> GameSnapshot:
        snapshot = GameSnapshot.of_run(self._state, self._run, self._session_best)
        if self._state != GameState.PLAYING and snapshot.difficulty != self._difficulty:
            snapshot = snapshot.model_copy(update={'difficulty': self._difficulty})
        return snapshot
