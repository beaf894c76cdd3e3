#!/usr/bin/env python3
"""OrbCatch - Standalone entry point.

Usage:
    python -m games.OrbCatch.main
    python -m games.OrbCatch.main --difficulty hard --resolution 1280x720
    python -m games.OrbCatch.main --seed 42

Controls:
    Left/A, Right/D   move the paddle
    SPACE/ENTER       start (menu or game over)
    R                 restart at any time
    1/2/3             select easy/normal/hard for the next run
    ESC               quit
"""

import argparse
import sys
from typing import Any, Dict, List, Optional

import pygame

from catcher.events import PhaseChange
from catcher.games.input import InputManager
from catcher.games.input.sources import KeyboardInputSource
from catcher.logging import close_all_sinks, create_sink_for_module, get_logger, register_sink
from models import Resolution
from games.OrbCatch import config
from games.OrbCatch.game_mode import OrbCatchMode

log = get_logger('orbcatch.main')


def build_parser() -> argparse.ArgumentParser:
    """Launcher options plus every argument the game declares."""
    parser = argparse.ArgumentParser(
        description=f'{OrbCatchMode.NAME} - {OrbCatchMode.DESCRIPTION}',
    )
    parser.add_argument(
        '--resolution', '-r',
        type=str,
        default=f'{config.SCREEN_WIDTH}x{config.SCREEN_HEIGHT}',
        help='Window resolution as WIDTHxHEIGHT'
    )
    parser.add_argument(
        '--fullscreen', '-f',
        action='store_true',
        help='Run in fullscreen mode'
    )

    for arg_def in OrbCatchMode.get_arguments():
        kwargs = {k: v for k, v in arg_def.items() if k in ('type', 'default', 'help', 'action', 'choices')}
        if 'action' in kwargs:
            kwargs.pop('type', None)  # action and type are mutually exclusive
        parser.add_argument(arg_def['name'], **kwargs)

    return parser


def game_kwargs_from_args(args: argparse.Namespace) -> Dict[str, Any]:
    """Collect game constructor kwargs, skipping launcher-only options."""
    skip_args = {'resolution', 'fullscreen'}
    return {
        k: v for k, v in vars(args).items()
        if k not in skip_args and v is not None
    }


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        resolution = Resolution.parse(args.resolution)
    except ValueError as e:
        print(e)
        return 1

    pygame.init()
    if args.fullscreen:
        screen = pygame.display.set_mode((0, 0), pygame.FULLSCREEN)
        resolution = Resolution(width=screen.get_width(), height=screen.get_height())
    else:
        screen = pygame.display.set_mode((resolution.width, resolution.height))
    pygame.display.set_caption(OrbCatchMode.NAME)

    register_sink('runs', create_sink_for_module('runs'))

    game = OrbCatchMode(width=resolution.width, height=resolution.height,
                        **game_kwargs_from_args(args))

    def on_phase_change(event: PhaseChange) -> None:
        if event.is_game_over:
            pygame.display.set_caption(f"{OrbCatchMode.NAME} - {event.message}")
        else:
            pygame.display.set_caption(f"{OrbCatchMode.NAME} - {event.difficulty}")

    game.on_phase_change(on_phase_change)

    input_manager = InputManager(KeyboardInputSource())
    clock = pygame.time.Clock()

    log.info("%s at %s, difficulty %s", OrbCatchMode.NAME, resolution, game.difficulty)

    running = True
    try:
        while running:
            dt = clock.tick(config.FPS) / 1000.0
            input_manager.update(dt)

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False

            game.handle_input(input_manager.get_events())
            game.update(dt)
            game.render(screen)
            pygame.display.flip()
    finally:
        close_all_sinks()
        pygame.quit()

    return 0


if __name__ == "__main__":
    sys.exit(main())
