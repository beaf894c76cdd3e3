"""
OrbCatch - Per-frame simulation step.

advance() is the only code that mutates a RunState during play. It is a
plain function over the state so it can be driven by the game mode, by a
headless loop, or directly by tests.

Step order:
    1. player movement (clamped to the playfield)
    2. power-up timers
    3. spawn accounting
    4. orb fall, catch and miss resolution
    5. countdown clock and game-over check
"""
from typing import Optional

from catcher.events import PhaseReason
from catcher.logging import get_logger
from games.OrbCatch import config
from games.OrbCatch.orb import Orb, OrbKind, Player
from games.OrbCatch.run_state import RunState
from games.OrbCatch.spawner import OrbSpawner

log = get_logger('orbcatch.simulation')


def orb_hits_paddle(orb: Orb, player: Player) -> bool:
    """Centre strictly inside the paddle's x span, vertical extents overlapping."""
    hit_x = player.left < orb.x < player.right
    hit_y = orb.bottom > player.top and orb.top < player.bottom
    return hit_x and hit_y


def apply_collision(state: RunState, orb: Orb) -> None:
    """Apply the effect of catching an orb."""
    if orb.kind == OrbKind.GOOD:
        state.streak += 1
        state.good_caught += 1

        if (not state.gold_active
                and state.streak >= config.STREAK_FOR_MULTIPLIER
                and state.score_multiplier < config.MAX_SCORE_MULTIPLIER):
            state.score_multiplier += 1
            state.streak = 0
            log.debug("multiplier up to x%d", state.score_multiplier)

        state.score += config.POINTS_PER_GOOD_ORB * state.score_multiplier

    elif orb.kind == OrbKind.BAD:
        state.lives -= 1
        state.bad_caught += 1
        state.streak = 0
        if not state.gold_active:
            state.score_multiplier = 1
        log.debug("bad orb caught, %d lives left", state.lives)

    elif orb.kind == OrbKind.POWER_SLOW:
        state.slow_timer = config.SLOW_DURATION
        state.speed_factor = config.SLOW_SPEED_FACTOR
        state.power_ups_caught += 1
        log.debug("slow motion for %.1fs", config.SLOW_DURATION)

    elif orb.kind == OrbKind.POWER_DOUBLE:
        state.gold_active = True
        state.double_timer = config.DOUBLE_DURATION
        # Overrides any streak-earned multiplier while active
        state.score_multiplier = config.DOUBLE_MULTIPLIER
        state.power_ups_caught += 1
        log.debug("double points for %.1fs", config.DOUBLE_DURATION)

    state.best_multiplier = max(state.best_multiplier, state.score_multiplier)


def _tick_power_ups(state: RunState, dt: float) -> None:
    if state.slow_timer > 0:
        state.slow_timer -= dt
        if state.slow_timer <= 0:
            state.slow_timer = 0.0
            state.speed_factor = 1.0
            log.debug("slow motion ended")

    if state.double_timer > 0:
        state.double_timer -= dt
        if state.double_timer <= 0:
            state.double_timer = 0.0
            state.gold_active = False
            # Drops a streak-earned x3 back to x1 as well
            state.score_multiplier = 1
            log.debug("double points ended")


def _tick_spawner(state: RunState, dt: float, spawner: OrbSpawner) -> None:
    state.spawn_accumulator += dt
    if state.spawn_accumulator >= state.config.spawn_interval:
        state.orbs.append(spawner.spawn(state.config, state.playfield.width))
        # Full reset: a long frame never queues more than one spawn
        state.spawn_accumulator = 0.0


def _resolve_orbs(state: RunState, dt: float) -> None:
    # Reverse so deleting the current entry never skips the next one
    for i in range(len(state.orbs) - 1, -1, -1):
        orb = state.orbs[i]
        orb.fall(dt, state.speed_factor)

        if orb_hits_paddle(orb, state.player):
            apply_collision(state, orb)
            del state.orbs[i]
            continue

        if orb.is_off_screen(state.playfield.height):
            if orb.kind == OrbKind.GOOD and not state.gold_active:
                state.streak = 0
                state.score_multiplier = 1
                state.good_missed += 1
                log.debug("good orb missed, streak reset")
            del state.orbs[i]


def advance(state: RunState, dt: float, spawner: OrbSpawner) -> Optional[str]:
    """Advance a run by dt seconds.

    dt is applied as given; callers that want a cap must clamp it first.

    Args:
        state: The run to mutate
        dt: Elapsed time in seconds
        spawner: Source of new orbs

    Returns:
        PhaseReason.LIVES_DEPLETED or PhaseReason.TIME_UP if the run ended
        during this step, otherwise None
    """
    state.player.move(dt, state.playfield.width)
    _tick_power_ups(state, dt)
    _tick_spawner(state, dt, spawner)
    _resolve_orbs(state, dt)

    state.time_left -= dt
    if state.lives <= 0:
        return PhaseReason.LIVES_DEPLETED
    if state.time_left <= 0:
        return PhaseReason.TIME_UP
    return None
