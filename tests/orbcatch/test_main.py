"""Tests for the OrbCatch command line."""

import pytest

from games.OrbCatch import game_info
from games.OrbCatch.game_mode import OrbCatchMode
from games.OrbCatch.main import build_parser, game_kwargs_from_args


class TestParser:

    def test_defaults(self):
        args = build_parser().parse_args([])
        assert args.resolution == '800x600'
        assert args.fullscreen is False
        assert args.difficulty == 'normal'
        assert args.seed is None
        assert args.max_frame_dt is None

    def test_game_options(self):
        args = build_parser().parse_args(['--difficulty', 'hard', '--seed', '7',
                                          '--max-frame-dt', '0.05', '-r', '1024x768'])
        assert args.difficulty == 'hard'
        assert args.seed == 7
        assert args.max_frame_dt == 0.05
        assert args.resolution == '1024x768'

    def test_rejects_unknown_difficulty(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(['--difficulty', 'nightmare'])

    def test_game_kwargs_skip_launcher_options(self):
        args = build_parser().parse_args(['--seed', '3', '--fullscreen'])
        assert game_kwargs_from_args(args) == {'difficulty': 'normal', 'seed': 3}


class TestGameInfo:

    def test_factory(self):
        game = game_info.get_game_mode(difficulty='easy', seed=1)
        assert isinstance(game, OrbCatchMode)
        assert game.difficulty == 'easy'

    def test_arguments_match_game(self):
        assert game_info.get_arguments() == OrbCatchMode.get_arguments()
        assert game_info.NAME == OrbCatchMode.NAME
