"""
renderer.py: Paints the world onto a pygame Surface, back to front.

Nothing here mutates the simulation. Sizes are read from the surface on
every frame so a resized window needs no extra bookkeeping.
"""

import math
import random
from typing import Optional, Sequence, Tuple

import pygame

from .colors import RGB, adjust_brightness, hex_to_rgb, lerp_color, lerp_rgb
from .constants import (
    BEAK_COLOR, BIRD_COLOR, BIRD_TILT, GROUND_COLOR, PIPE_CAP_HEIGHT,
    PIPE_CAP_OVERHANG, PIPE_COLOR, SKY_COLORS, STAR_COUNT, SUN_RADIUS
)
from .data_models import Bird, Pipe, TimeOfDay
from .physics_engine import GameEngine

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)


def _vertical_gradient(surface: pygame.Surface, rect: pygame.Rect, top: RGB, bottom: RGB):
    span = max(1, rect.height - 1)
    for i in range(rect.height):
        color = lerp_rgb(top, bottom, i / span)
        pygame.draw.line(surface, color, (rect.left, rect.top + i), (rect.right - 1, rect.top + i))


def _horizontal_gradient(surface: pygame.Surface, rect: pygame.Rect, stops: Sequence[RGB]):
    """Evenly spaced color stops across the rect's width."""
    if rect.width <= 0 or rect.height <= 0:
        return
    segments = len(stops) - 1
    span = max(1, rect.width - 1)
    for i in range(rect.width):
        pos = i / span * segments
        index = min(int(pos), segments - 1)
        color = lerp_rgb(stops[index], stops[index + 1], pos - index)
        pygame.draw.line(surface, color, (rect.left + i, rect.top), (rect.left + i, rect.bottom - 1))


def _blend_alpha(surface: pygame.Surface, color: RGB, alpha: int, rect: pygame.Rect):
    if rect.width <= 0 or rect.height <= 0:
        return
    overlay = pygame.Surface(rect.size, pygame.SRCALPHA)
    overlay.fill((*color, alpha))
    surface.blit(overlay, rect.topleft)


class Renderer:
    """Draws sky, pipes, ground and bird for one frame."""

    def __init__(self, rng: Optional[random.Random] = None,
                 bird_color: str = BIRD_COLOR,
                 pipe_color: str = PIPE_COLOR,
                 ground_color: str = GROUND_COLOR):
        # Only used for star twinkle, never for anything the simulation sees.
        self.rng = rng or random.Random()
        self.bird_color = bird_color
        self.pipe_color = pipe_color
        self.ground_color = ground_color

    def draw(self, surface: pygame.Surface, engine: GameEngine,
             time_of_day: TimeOfDay, now_ms: float):
        ground_y = surface.get_height() - engine.ground_height
        self.draw_sky(surface, time_of_day)
        for pipe in engine.pipes:
            self.draw_pipe(surface, pipe, ground_y)
        self.draw_ground(surface, ground_y, engine.ground_height)
        self.draw_bird(surface, engine.bird, now_ms)

    def draw_idle(self, surface: pygame.Surface, engine: GameEngine,
                  time_of_day: TimeOfDay, now_ms: float):
        """The still frame shown behind the start screen."""
        self.draw_sky(surface, time_of_day)
        self.draw_ground(surface, surface.get_height() - engine.ground_height, engine.ground_height)
        self.draw_bird(surface, engine.bird, now_ms)

    # ---------- Sky ----------

    def sky_palette(self, time_of_day: TimeOfDay) -> Tuple[str, str, str]:
        current = SKY_COLORS[time_of_day.current_phase]
        upcoming = SKY_COLORS[time_of_day.next_phase]
        t = time_of_day.transition_progress
        return (lerp_color(current["top"], upcoming["top"], t),
                lerp_color(current["bottom"], upcoming["bottom"], t),
                lerp_color(current["sun"], upcoming["sun"], t))

    def draw_sky(self, surface: pygame.Surface, time_of_day: TimeOfDay):
        width, height = surface.get_size()
        top, bottom, sun = self.sky_palette(time_of_day)
        _vertical_gradient(surface, pygame.Rect(0, 0, width, height),
                           hex_to_rgb(top), hex_to_rgb(bottom))

        sun_pos = (width * 0.8, height * 0.2)
        self._draw_glow(surface, sun_pos, hex_to_rgb(sun))
        pygame.draw.circle(surface, hex_to_rgb(sun), sun_pos, SUN_RADIUS)

        if time_of_day.current_phase == "night":
            self._draw_stars(surface)
        else:
            self._draw_clouds(surface)

    def _draw_glow(self, surface: pygame.Surface, center: Tuple[float, float], color: RGB):
        outer = SUN_RADIUS * 2
        inner = SUN_RADIUS * 0.5
        glow = pygame.Surface((outer * 2, outer * 2), pygame.SRCALPHA)
        # Alpha rises from 0 at the outer radius to 0xAA at the inner one.
        steps = 24
        for i in range(steps + 1):
            radius = outer - (outer - inner) * i / steps
            alpha = int(0xAA * i / steps)
            pygame.draw.circle(glow, (*color, alpha), (outer, outer), radius)
        surface.blit(glow, (int(center[0] - outer), int(center[1] - outer)))

    def _draw_stars(self, surface: pygame.Surface):
        width, height = surface.get_size()
        for i in range(STAR_COUNT):
            x = (i * 137.5) % width
            y = (i * 73.3) % (height * 0.6)
            pygame.draw.circle(surface, WHITE, (x, y), 1 + self.rng.random())

    def _draw_clouds(self, surface: pygame.Surface):
        width, height = surface.get_size()
        layer = pygame.Surface((width, height), pygame.SRCALPHA)
        color = (255, 255, 255, 153)
        for fx, fy, size in ((0.2, 0.15, 60), (0.6, 0.25, 50), (0.4, 0.35, 55)):
            x, y = width * fx, height * fy
            pygame.draw.circle(layer, color, (x, y), size * 0.5)
            pygame.draw.circle(layer, color, (x + size * 0.4, y), size * 0.6)
            pygame.draw.circle(layer, color, (x + size * 0.8, y), size * 0.5)
            pygame.draw.circle(layer, color, (x + size * 0.4, y - size * 0.3), size * 0.5)
        surface.blit(layer, (0, 0))

    # ---------- Pipes ----------

    def draw_pipe(self, surface: pygame.Surface, pipe: Pipe, ground_y: float):
        x = int(pipe.x)
        width = int(pipe.width)
        top_height = int(pipe.top_height)
        gap_bottom = int(pipe.gap_bottom)
        bottom_height = int(ground_y) - gap_bottom

        base = hex_to_rgb(self.pipe_color)
        stops = (base, hex_to_rgb(adjust_brightness(self.pipe_color, 20)), base)
        _horizontal_gradient(surface, pygame.Rect(x, 0, width, top_height), stops)
        _horizontal_gradient(surface, pygame.Rect(x, gap_bottom, width, bottom_height), stops)

        cap_color = hex_to_rgb(adjust_brightness(self.pipe_color, -30))
        cap_width = width + PIPE_CAP_OVERHANG * 2
        pygame.draw.rect(surface, cap_color,
                         (x - PIPE_CAP_OVERHANG, top_height - PIPE_CAP_HEIGHT, cap_width, PIPE_CAP_HEIGHT))
        pygame.draw.rect(surface, cap_color,
                         (x - PIPE_CAP_OVERHANG, gap_bottom, cap_width, PIPE_CAP_HEIGHT))

        _blend_alpha(surface, WHITE, 51, pygame.Rect(x + 5, 0, 8, top_height))
        _blend_alpha(surface, WHITE, 51, pygame.Rect(x + 5, gap_bottom, 8, bottom_height))

    # ---------- Ground ----------

    def draw_ground(self, surface: pygame.Surface, ground_y: float, ground_height: float):
        width = surface.get_width()
        gy = int(ground_y)
        depth = int(ground_height)
        _vertical_gradient(surface, pygame.Rect(0, gy, width, depth),
                           hex_to_rgb(adjust_brightness(self.ground_color, 30)),
                           hex_to_rgb(adjust_brightness(self.ground_color, -20)))

        grass = hex_to_rgb(adjust_brightness(self.ground_color, 40))
        for i in range(0, width, 15):
            blade = int(10 + math.sin(i * 0.1) * 5)
            pygame.draw.rect(surface, grass, (i, gy - blade, 8, blade))

        pattern = hex_to_rgb(adjust_brightness(self.ground_color, -30))
        for i in range(0, width, 40):
            pygame.draw.rect(surface, pattern, (i, gy + 10, 2, depth - 10))
        for y in range(gy + 20, gy + depth, 20):
            for x in range(0, width, 40):
                pygame.draw.rect(surface, pattern, (x + 10, y, 20, 2))

    # ---------- Bird ----------

    def bird_sprite(self, bird: Bird, now_ms: float) -> pygame.Surface:
        """Unrotated bird, centered in a square transparent surface."""
        r = int(bird.radius)
        half = r + 16
        c = half
        sprite = pygame.Surface((half * 2, half * 2), pygame.SRCALPHA)
        body_h = int(r * 1.6)
        base = hex_to_rgb(self.bird_color)

        pygame.draw.ellipse(sprite, (0, 0, 0, 51), (c + 2 - r, c + 3 - body_h // 2, r * 2, body_h))

        # Radial shading: lighter toward the upper-left.
        light = hex_to_rgb(adjust_brightness(self.bird_color, 40))
        rings = 8
        for i in range(rings):
            t = i / rings
            scale = 1 - t * 0.85
            w, h = r * 2 * scale, body_h * scale
            cx, cy = c - 5 * t, c - 5 * t
            pygame.draw.ellipse(sprite, lerp_rgb(base, light, t),
                                (int(cx - w / 2), int(cy - h / 2), int(w), int(h)))
        pygame.draw.ellipse(sprite, (0, 0, 0, 77), (c - r, c - body_h // 2, r * 2, body_h), 2)

        wing_angle = math.sin(now_ms / 100) * 0.5
        wing = pygame.Surface((24, 16), pygame.SRCALPHA)
        pygame.draw.ellipse(wing, hex_to_rgb(adjust_brightness(self.bird_color, -30)), (0, 0, 24, 16))
        pygame.draw.ellipse(wing, (0, 0, 0, 77), (0, 0, 24, 16), 1)
        wing = pygame.transform.rotate(wing, -math.degrees(wing_angle))
        sprite.blit(wing, wing.get_rect(center=(c - 5, c + 5)))

        pygame.draw.circle(sprite, WHITE, (c + 8, c - 5), 7)
        pygame.draw.circle(sprite, BLACK, (c + 10, c - 5), 4)
        pygame.draw.circle(sprite, WHITE, (c + 11, c - 6), 2)

        pygame.draw.polygon(sprite, hex_to_rgb(BEAK_COLOR),
                            [(c + 15, c - 2), (c + 28, c), (c + 15, c + 2)])
        pygame.draw.polygon(sprite, base, [
            (c - r, c - 5), (c - r - 10, c - 8), (c - r - 8, c),
            (c - r - 10, c + 8), (c - r, c + 5),
        ])
        return sprite

    def draw_bird(self, surface: pygame.Surface, bird: Bird, now_ms: float):
        sprite = self.bird_sprite(bird, now_ms)
        # Screen y points down, so a positive (falling) velocity tilts the beak down.
        angle = bird.velocity * BIRD_TILT
        rotated = pygame.transform.rotate(sprite, -math.degrees(angle))
        surface.blit(rotated, rotated.get_rect(center=(int(bird.x), int(bird.y))))
