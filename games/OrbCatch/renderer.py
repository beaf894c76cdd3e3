"""
OrbCatch - pygame renderer.

Draws a GameSnapshot. Holds fonts and nothing else; it never sees the
RunState.
"""
from typing import Dict, Optional, Tuple

import pygame

from catcher.games.game_state import GameState
from games.OrbCatch import config
from games.OrbCatch.orb import OrbKind
from games.OrbCatch.snapshot import GameSnapshot

ORB_COLORS: Dict[OrbKind, Tuple[int, int, int]] = {
    OrbKind.GOOD: config.GOOD_ORB_COLOR,
    OrbKind.BAD: config.BAD_ORB_COLOR,
    OrbKind.POWER_SLOW: config.SLOW_ORB_COLOR,
    OrbKind.POWER_DOUBLE: config.DOUBLE_ORB_COLOR,
}


class OrbCatchRenderer:
    """Renders the playfield, HUD and phase overlays."""

    def __init__(self):
        self._font_small: Optional[pygame.font.Font] = None
        self._font_medium: Optional[pygame.font.Font] = None
        self._font_large: Optional[pygame.font.Font] = None

    def _ensure_fonts(self) -> None:
        """Create fonts lazily (pygame.font must be initialized)."""
        if self._font_large is None:
            if not pygame.font.get_init():
                pygame.font.init()
            self._font_small = pygame.font.Font(None, 24)
            self._font_medium = pygame.font.Font(None, 32)
            self._font_large = pygame.font.Font(None, 48)

    def draw(self, screen: pygame.Surface, snapshot: GameSnapshot) -> None:
        """Render one frame."""
        self._ensure_fonts()
        screen.fill(config.BACKGROUND_COLOR)

        if snapshot.player is not None:
            pygame.draw.rect(screen, config.PADDLE_COLOR,
                             pygame.Rect(*snapshot.player.as_tuple()))

        for orb in snapshot.orbs:
            pygame.draw.circle(screen, ORB_COLORS[orb.kind],
                               (int(orb.x), int(orb.y)), int(orb.radius))

        self._draw_hud(screen, snapshot)

        if snapshot.phase == GameState.MENU:
            self._draw_menu(screen, snapshot)
        elif snapshot.phase == GameState.GAME_OVER:
            self._draw_game_over(screen, snapshot)

    def _draw_hud(self, screen: pygame.Surface, snapshot: GameSnapshot) -> None:
        x = 16
        for line in snapshot.hud_lines:
            text = self._font_medium.render(line, True, config.TEXT_COLOR)
            screen.blit(text, (x, 12))
            x += text.get_width() + 28

        # Active power-ups, top right
        flags = []
        if snapshot.slow_active:
            flags.append(("SLOW", config.SLOW_ORB_COLOR))
        if snapshot.gold_active:
            flags.append(("DOUBLE", config.DOUBLE_ORB_COLOR))
        right = screen.get_width() - 16
        for label, color in reversed(flags):
            text = self._font_small.render(label, True, color)
            right -= text.get_width()
            screen.blit(text, (right, 16))
            right -= 12

    def _draw_overlay(self, screen: pygame.Surface) -> None:
        overlay = pygame.Surface(screen.get_size(), pygame.SRCALPHA)
        overlay.fill(config.OVERLAY_COLOR)
        screen.blit(overlay, (0, 0))

    def _blit_centered(self, screen: pygame.Surface, font: pygame.font.Font,
                       text: str, y: int, color=config.TEXT_COLOR) -> None:
        surface = font.render(text, True, color)
        screen.blit(surface, (screen.get_width() // 2 - surface.get_width() // 2, y))

    def _draw_menu(self, screen: pygame.Surface, snapshot: GameSnapshot) -> None:
        self._draw_overlay(screen)
        self._blit_centered(screen, self._font_large, "Press SPACE to begin", 200)
        self._blit_centered(screen, self._font_small,
                            f"Difficulty: {snapshot.difficulty}  (1 easy / 2 normal / 3 hard)",
                            250, config.DIM_TEXT_COLOR)

    def _draw_game_over(self, screen: pygame.Surface, snapshot: GameSnapshot) -> None:
        self._draw_overlay(screen)
        self._blit_centered(screen, self._font_large, "GAME OVER", 200)
        self._blit_centered(screen, self._font_medium, f"Final Score: {snapshot.score}", 250)
        if snapshot.session_best > 0:
            self._blit_centered(screen, self._font_small,
                                f"Best this session: {snapshot.session_best}",
                                290, config.DIM_TEXT_COLOR)
        self._blit_centered(screen, self._font_small,
                            f"SPACE to play again ({snapshot.difficulty})",
                            320, config.DIM_TEXT_COLOR)
