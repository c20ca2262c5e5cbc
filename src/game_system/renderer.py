"""
Renderer - draws the current game phase with pygame

Reads GameManager and GameSession state only; never mutates it.
"""

from typing import Dict, Tuple, TYPE_CHECKING

import pygame

from .game_session import GuessState, VirtualKey
from .states import GamePhase

if TYPE_CHECKING:
    from game_system.game_manager import GameManager

Color = Tuple[int, int, int]

BG_TOP: Color = (20, 25, 40)
BG_BOTTOM: Color = (40, 45, 70)
ACCENT_COLOR: Color = (100, 200, 255)
HINT_COLOR: Color = (255, 200, 100)
BTN_NORMAL: Color = (60, 70, 90)
BTN_HOVER: Color = (80, 90, 120)
BTN_WRONG: Color = (200, 60, 60)
BTN_CORRECT: Color = (60, 200, 100)
TEXT_COLOR: Color = (245, 245, 245)
DIM_COLOR: Color = (130, 130, 130)
LIGHT_GRAY: Color = (200, 200, 200)
LIVES_OK: Color = (0, 228, 48)
LIVES_LOW: Color = (230, 41, 55)
GOLD: Color = (255, 203, 0)
OUTLINE: Color = (0, 0, 0)

KEY_COLORS: Dict[GuessState, Color] = {
    GuessState.CORRECT: BTN_CORRECT,
    GuessState.WRONG: BTN_WRONG,
}

GALLOWS_BASE = (200, 350)


class HangmanRenderer:
    """
    Draws every phase of the game onto a surface.

    When the surface is the display surface, render() also flips the display.
    """

    def __init__(self, screen: pygame.Surface):
        self.screen = screen
        self._fonts: Dict[int, pygame.font.Font] = {}
        self._background = self._build_gradient(screen.get_size())

    def render(self, game_manager: 'GameManager') -> None:
        self.screen.blit(self._background, (0, 0))

        phase = game_manager.phase
        if phase is GamePhase.MENU:
            self._draw_menu()
        elif phase is GamePhase.PLAYING:
            self._draw_playing(game_manager)
        elif phase is GamePhase.GAME_OVER:
            self._draw_game_over(game_manager)
        elif phase is GamePhase.VICTORY:
            self._draw_victory(game_manager)
        elif phase is GamePhase.GAME_COMPLETE:
            self._draw_game_complete()

        if self.screen is pygame.display.get_surface():
            pygame.display.flip()

    # ── Screens ──────────────────────────────────────────────────────────

    def _draw_menu(self) -> None:
        self._draw_centered("ULTIMATE HANGMAN", 200, 60, ACCENT_COLOR)
        self._draw_centered("Press ENTER to Start Career", 400, 20, TEXT_COLOR)

    def _draw_playing(self, game_manager: 'GameManager') -> None:
        session = game_manager.session
        tier = game_manager.current_tier

        self._draw_text(f"LEVEL {tier + 1} / {game_manager.tier_count}", (20, 20), 20, ACCENT_COLOR)
        self._draw_text(game_manager.catalog.tier_name(tier), (20, 50), 20, LIGHT_GRAY)

        self._draw_centered(" ".join(session.reveal_mask), 150, 50, TEXT_COLOR)
        self._draw_centered(f"HINT: {session.target_hint}", 220, 20, HINT_COLOR)

        lives_color = LIVES_LOW if session.lives < 3 else LIVES_OK
        self._draw_text(f"LIVES: {session.lives}", (self.screen.get_width() - 120, 20), 20, lives_color)

        self._draw_gallows(session.mistakes)

        for key in session.keyboard:
            self._draw_key(key)

    def _draw_game_over(self, game_manager: 'GameManager') -> None:
        self._draw_centered("LEVEL Failed!", 200, 60, LIVES_LOW)
        self._draw_centered(f"Word was: {game_manager.session.target_word}", 300, 30, TEXT_COLOR)
        self._draw_centered("Press ENTER to Retry Level", 500, 20, DIM_COLOR)
        self._draw_gallows(game_manager.session.max_lives)

    def _draw_victory(self, game_manager: 'GameManager') -> None:
        self._draw_centered("LEVEL Complete", 200, 60, LIVES_OK)
        self._draw_centered(f"Word: {game_manager.session.target_word}", 300, 30, TEXT_COLOR)
        self._draw_centered("Press ENTER for Next Level", 500, 20, TEXT_COLOR)
        self._draw_gallows(0)

    def _draw_game_complete(self) -> None:
        self._draw_centered("CHAMPION!", 200, 80, GOLD)
        self._draw_centered("You beat all levels!", 350, 30, TEXT_COLOR)
        self._draw_centered("Press ENTER to Play Again", 500, 20, DIM_COLOR)

    # ── Pieces ───────────────────────────────────────────────────────────

    def _draw_gallows(self, mistakes: int) -> None:
        """Gallows frame plus one body part per mistake (six in total)"""
        x, y = GALLOWS_BASE
        draw_line = pygame.draw.line

        draw_line(self.screen, ACCENT_COLOR, (x - 50, y), (x + 50, y), 5)
        draw_line(self.screen, ACCENT_COLOR, (x, y), (x, y - 250), 5)
        draw_line(self.screen, ACCENT_COLOR, (x, y - 250), (x + 100, y - 250), 5)
        draw_line(self.screen, ACCENT_COLOR, (x + 100, y - 250), (x + 100, y - 200), 3)

        neck = (x + 100, y - 160)
        shoulders = (x + 100, y - 140)
        hips = (x + 100, y - 100)
        body_parts = [
            lambda: pygame.draw.circle(self.screen, TEXT_COLOR, (x + 100, y - 180), 20, 2),
            lambda: draw_line(self.screen, TEXT_COLOR, neck, hips, 3),
            lambda: draw_line(self.screen, TEXT_COLOR, shoulders, (x + 70, y - 120), 3),
            lambda: draw_line(self.screen, TEXT_COLOR, shoulders, (x + 130, y - 120), 3),
            lambda: draw_line(self.screen, TEXT_COLOR, hips, (x + 80, y - 50), 3),
            lambda: draw_line(self.screen, TEXT_COLOR, hips, (x + 120, y - 50), 3),
        ]
        for draw_part in body_parts[:mistakes]:
            draw_part()

    def _draw_key(self, key: VirtualKey) -> None:
        color = KEY_COLORS.get(key.guess_state)
        if color is None:
            color = BTN_HOVER if key.hover else BTN_NORMAL

        radius = int(key.rect.width * 0.3)
        pygame.draw.rect(self.screen, color, key.rect, border_radius=radius)
        pygame.draw.rect(self.screen, OUTLINE, key.rect, width=1, border_radius=radius)

        label = self._font(30).render(key.letter, True, TEXT_COLOR)
        self.screen.blit(label, label.get_rect(center=key.rect.center))

    def _draw_text(self, text: str, pos: Tuple[int, int], size: int, color: Color) -> None:
        self.screen.blit(self._font(size).render(text, True, color), pos)

    def _draw_centered(self, text: str, y: int, size: int, color: Color) -> None:
        surface = self._font(size).render(text, True, color)
        x = self.screen.get_width() // 2 - surface.get_width() // 2
        self.screen.blit(surface, (x, y))

    def _font(self, size: int) -> pygame.font.Font:
        if size not in self._fonts:
            if not pygame.font.get_init():
                pygame.font.init()
            self._fonts[size] = pygame.font.Font(None, size)
        return self._fonts[size]

    @staticmethod
    def _build_gradient(size: Tuple[int, int]) -> pygame.Surface:
        """Vertical BG_TOP → BG_BOTTOM gradient, built once"""
        width, height = size
        surface = pygame.Surface(size)
        for row in range(height):
            ratio = row / max(height - 1, 1)
            color = tuple(int(top + (bottom - top) * ratio) for top, bottom in zip(BG_TOP, BG_BOTTOM))
            pygame.draw.line(surface, color, (0, row), (width, row))
        return surface
