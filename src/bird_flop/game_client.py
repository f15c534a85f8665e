"""
game_client.py

Interactive pygame host: window, input wiring, score HUD and overlays.
The game itself lives in SessionController; this module only forwards
input to it and paints text over whatever the renderer drew.
"""

import logging
import random
from typing import Optional

import pygame

from .colors import adjust_brightness, hex_to_rgb
from .constants import (
    BUTTON_COLOR, GAME_TITLE, RENDER_FPS, SCREEN_HEIGHT, SCREEN_WIDTH,
    TAP_INSTRUCTION
)
from .data_models import GameState
from .renderer import Renderer
from .session import SessionController

logger = logging.getLogger(__name__)

FLAP_KEYS = (pygame.K_SPACE, pygame.K_UP, pygame.K_w)
WHITE = (255, 255, 255)
SHADOW = (0, 0, 0)


class GameClient:
    def __init__(self, width: int = SCREEN_WIDTH, height: int = SCREEN_HEIGHT,
                 fps: int = RENDER_FPS, seed: Optional[int] = None):
        pygame.init()
        self.fps = fps
        self.screen = pygame.display.set_mode((width, height), pygame.RESIZABLE)
        pygame.display.set_caption(GAME_TITLE)

        self.controller = SessionController(
            width, height,
            rng=random.Random(seed),
            surface=self.screen,
            renderer=Renderer(),
        )
        self.controller.add_game_over_listener(
            lambda session: logger.info("Final score %d (best %d)",
                                        session.final_score, session.highest_score))

        self.clock = pygame.time.Clock()
        self.large_font = pygame.font.Font(None, 64)
        self.font = pygame.font.Font(None, 32)
        self.button_rect = pygame.Rect(0, 0, 180, 56)

    def run(self):
        """The main client execution loop."""
        logger.info("Window opened at %dx%d, %d fps", *self.screen.get_size(), self.fps)
        self.controller.render()

        running = True
        while running:
            now_ms = pygame.time.get_ticks()
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    running = self._handle_key(event.key)
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    self._handle_click(event.pos)
                elif event.type == pygame.VIDEORESIZE:
                    self._handle_resize(event.w, event.h)

            if self.controller.running:
                self.controller.tick(now_ms)
            self._draw_overlay()
            pygame.display.flip()
            self.clock.tick(self.fps)

        pygame.quit()

    # ---------- Input ----------

    def _handle_key(self, key: int) -> bool:
        if key == pygame.K_ESCAPE:
            return False
        if key in FLAP_KEYS:
            self.controller.flap()
        elif key == pygame.K_RETURN and self.controller.state is GameState.NOT_STARTED:
            self.controller.start()
        elif key == pygame.K_r and self.controller.state is GameState.OVER:
            self.controller.reset()
        return True

    def _handle_click(self, pos):
        state = self.controller.state
        on_button = self.button_rect.collidepoint(pos)
        if state is GameState.NOT_STARTED and on_button:
            self.controller.start()
        elif state is GameState.OVER:
            if on_button:
                self.controller.reset()
        else:
            self.controller.flap()

    def _handle_resize(self, width: int, height: int):
        self.screen = pygame.display.set_mode((width, height), pygame.RESIZABLE)
        self.controller.surface = self.screen
        self.controller.resize(width, height)
        if not self.controller.running:
            self.controller.render()

    # ---------- HUD / overlays ----------

    def _blit_centered(self, font: pygame.font.Font, text: str, y: int, color=WHITE):
        width = self.screen.get_width()
        shadow = font.render(text, True, SHADOW)
        surf = font.render(text, True, color)
        self.screen.blit(shadow, (width // 2 - surf.get_width() // 2 + 2, y + 2))
        self.screen.blit(surf, (width // 2 - surf.get_width() // 2, y))

    def _draw_button(self, label: str, y: int):
        width = self.screen.get_width()
        self.button_rect.center = (width // 2, y)
        pygame.draw.rect(self.screen, hex_to_rgb(adjust_brightness(BUTTON_COLOR, -40)),
                         self.button_rect.move(0, 4), border_radius=12)
        pygame.draw.rect(self.screen, hex_to_rgb(BUTTON_COLOR), self.button_rect, border_radius=12)
        text = self.font.render(label, True, WHITE)
        self.screen.blit(text, text.get_rect(center=self.button_rect.center))

    def _dim(self):
        veil = pygame.Surface(self.screen.get_size(), pygame.SRCALPHA)
        veil.fill((0, 0, 0, 110))
        self.screen.blit(veil, (0, 0))

    def _draw_overlay(self):
        height = self.screen.get_height()
        state = self.controller.state

        if state is GameState.NOT_STARTED:
            self.controller.render()
            self._dim()
            self._blit_centered(self.large_font, GAME_TITLE, height // 3)
            self._blit_centered(self.font, TAP_INSTRUCTION, height // 3 + 70)
            self._draw_button("Start", height // 2 + 40)
        elif state is GameState.OVER:
            self.controller.render()
            self._dim()
            self._blit_centered(self.large_font, "Game Over", height // 3)
            self._blit_centered(self.font, f"Score: {self.controller.final_score}", height // 3 + 70)
            self._blit_centered(self.font, f"Best: {self.controller.highest_score}", height // 3 + 105)
            self._draw_button("Restart", height // 2 + 80)
        else:
            self._blit_centered(self.large_font, str(self.controller.score), 30)
