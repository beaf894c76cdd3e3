"""Tests for the OrbCatch difficulty table and config helpers."""

import dataclasses

import pytest

from games.OrbCatch import config
from games.OrbCatch.config import DIFFICULTY_PRESETS, DifficultyConfig, get_difficulty


class TestDifficultyTable:
    """The three tiers carry the documented values."""

    @pytest.mark.parametrize("name,lives,duration,interval,min_speed,max_speed", [
        ('easy', 4, 70.0, 1.0, 100.0, 200.0),
        ('normal', 3, 60.0, 0.8, 140.0, 230.0),
        ('hard', 3, 50.0, 0.6, 180.0, 260.0),
    ])
    def test_tier_values(self, name, lives, duration, interval, min_speed, max_speed):
        tier = DIFFICULTY_PRESETS[name]
        assert tier.name == name
        assert tier.lives == lives
        assert tier.duration == duration
        assert tier.spawn_interval == interval
        assert tier.min_speed == min_speed
        assert tier.max_speed == max_speed

    def test_tiers_are_immutable(self):
        """DifficultyConfig is frozen."""
        with pytest.raises(dataclasses.FrozenInstanceError):
            DIFFICULTY_PRESETS['easy'].lives = 99


class TestGetDifficulty:
    """Lookup with fallback to normal."""

    def test_known_name(self):
        assert get_difficulty('hard') is DIFFICULTY_PRESETS['hard']

    def test_case_and_whitespace_insensitive(self):
        assert get_difficulty(' Easy ') is DIFFICULTY_PRESETS['easy']

    @pytest.mark.parametrize("name", ['nightmare', '', None])
    def test_unknown_falls_back_to_normal(self, name):
        assert get_difficulty(name) is DIFFICULTY_PRESETS['normal']


class TestDifficultyValidation:
    """Invalid tiers are rejected at construction."""

    def _make(self, **overrides):
        values = dict(name='t', lives=3, duration=60.0, spawn_interval=0.8,
                      min_speed=100.0, max_speed=200.0)
        values.update(overrides)
        return DifficultyConfig(**values)

    def test_valid(self):
        assert self._make().lives == 3

    def test_equal_speeds_allowed(self):
        assert self._make(min_speed=150.0, max_speed=150.0).max_speed == 150.0

    @pytest.mark.parametrize("overrides", [
        {'lives': 0},
        {'duration': 0.0},
        {'spawn_interval': -1.0},
        {'min_speed': 300.0, 'max_speed': 200.0},
    ])
    def test_invalid(self, overrides):
        with pytest.raises(ValueError):
            self._make(**overrides)


class TestGameplayConstants:

    def test_orb_radii(self):
        assert config.GOOD_ORB_RADIUS == 12.0
        assert config.BAD_ORB_RADIUS == 15.0

    def test_power_up_constants(self):
        assert config.SLOW_DURATION == 5.0
        assert config.SLOW_SPEED_FACTOR == 0.4
        assert config.DOUBLE_DURATION == 6.0
        assert config.DOUBLE_MULTIPLIER == 2
