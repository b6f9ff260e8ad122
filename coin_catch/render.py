import math
import os

import pygame
import pygame.gfxdraw

from coin_catch.session import Phase

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")


class Renderer:
    """Paints a session onto a pygame surface. Never mutates the session."""

    # Colors
    COLOR_BG_TOP = (255, 248, 225)
    COLOR_BG_BOTTOM = (200, 230, 201)
    COLOR_COIN_STOPS = (
        (0.0, (255, 241, 118)),  # bright gold
        (0.7, (255, 214, 0)),
        (1.0, (245, 127, 23)),  # dark gold
    )
    COLOR_COIN_RIM = (249, 168, 37)
    COLOR_COIN_TEXT = (230, 81, 0)
    COLOR_BASKET = (255, 255, 255)
    COLOR_BASKET_RIM = (46, 125, 50)
    COLOR_WEAVE = (213, 229, 214)
    COLOR_TEXT = (33, 33, 33)
    COLOR_TEXT_SHADOW = (255, 255, 255)
    COLOR_MISS = (198, 40, 40)
    COLOR_OVERLAY = (0, 0, 0, 150)

    def __init__(self, surface):
        pygame.font.init()
        self.surface = surface
        self.font_coin = pygame.font.SysFont("Arial", 24, bold=True)
        self.font_ui = pygame.font.SysFont("Arial", 20, bold=True)
        self.font_msg = pygame.font.SysFont("Arial", 44, bold=True)
        self._background = None

    def draw(self, session):
        state = session.snapshot()
        self._render_background()
        self._render_basket(session.basket)
        for coin in session.coins:
            self._render_coin(coin)
        self._render_ui(state)

    def _render_background(self):
        size = self.surface.get_size()
        if self._background is None or self._background.get_size() != size:
            width, height = size
            self._background = pygame.Surface(size)
            for y in range(height):
                interp = y / max(1, height)
                color = tuple(
                    int(top * (1 - interp) + bottom * interp)
                    for top, bottom in zip(self.COLOR_BG_TOP, self.COLOR_BG_BOTTOM)
                )
                pygame.draw.line(self._background, color, (0, y), (width, y))
        self.surface.blit(self._background, (0, 0))

    def _coin_color(self, t):
        for (t0, c0), (t1, c1) in zip(self.COLOR_COIN_STOPS, self.COLOR_COIN_STOPS[1:]):
            if t <= t1:
                f = (t - t0) / (t1 - t0)
                return tuple(int(a + (b - a) * f) for a, b in zip(c0, c1))
        return self.COLOR_COIN_STOPS[-1][1]

    def _render_coin(self, coin):
        cx, cy, r = int(coin.x), int(coin.y), int(coin.radius)
        if r <= 0:
            return
        # Radial gradient, outside in
        for ring in range(r, 0, -1):
            pygame.gfxdraw.filled_circle(self.surface, cx, cy, ring, self._coin_color(ring / r))
        pygame.gfxdraw.aacircle(self.surface, cx, cy, r, self.COLOR_COIN_RIM)
        pygame.draw.circle(self.surface, self.COLOR_COIN_RIM, (cx, cy), r, width=2)

        label = self.font_coin.render("M", True, self.COLOR_COIN_TEXT)
        self.surface.blit(label, label.get_rect(center=(cx, cy + 2)))

    def _render_basket(self, basket):
        rect = pygame.Rect(int(basket.x), int(basket.y), int(basket.width), int(basket.height))
        pygame.draw.rect(self.surface, self.COLOR_BASKET, rect, border_radius=10)

        # Weave
        for i in range(15, rect.width, 15):
            pygame.draw.line(self.surface, self.COLOR_WEAVE,
                             (rect.x + i, rect.y + 5), (rect.x + i, rect.bottom - 5), 2)
        for i in range(15, rect.height, 15):
            pygame.draw.line(self.surface, self.COLOR_WEAVE,
                             (rect.x + 5, rect.y + i), (rect.right - 5, rect.y + i), 2)

        pygame.draw.rect(self.surface, self.COLOR_BASKET_RIM, rect, width=3, border_radius=10)

        # Handle: upper half circle centred on the top edge
        handle_r = int(basket.width / 3)
        handle = pygame.Rect(0, 0, handle_r * 2, handle_r * 2)
        handle.center = (rect.centerx, rect.y)
        pygame.draw.arc(self.surface, self.COLOR_BASKET_RIM, handle, 0, math.pi, 4)

    def _render_ui(self, state):
        width, height = self.surface.get_size()

        # Helper to draw text with shadow
        def draw_text(text, font, color, pos, anchor="topleft"):
            shadow_surface = font.render(text, True, self.COLOR_TEXT_SHADOW)
            text_surface = font.render(text, True, color)

            shadow_rect = shadow_surface.get_rect()
            text_rect = text_surface.get_rect()

            setattr(shadow_rect, anchor, (pos[0] + 1, pos[1] + 1))
            setattr(text_rect, anchor, pos)

            self.surface.blit(shadow_surface, shadow_rect)
            self.surface.blit(text_surface, text_rect)

        draw_text(f"Score: {state.score}", self.font_ui, self.COLOR_TEXT, (10, 10))
        draw_text(f"Best: {state.best_score}", self.font_ui, self.COLOR_TEXT, (10, 34))
        draw_text(f"Mall $: {state.total_currency:,}", self.font_ui, self.COLOR_TEXT,
                  (width - 10, 10), anchor="topright")
        if state.leveled:
            draw_text(f"Level: {state.level}", self.font_ui, self.COLOR_TEXT,
                      (width - 10, 34), anchor="topright")
            draw_text(f"Misses: {state.misses} / {state.max_misses}", self.font_ui, self.COLOR_MISS,
                      (width - 10, 58), anchor="topright")

        center = (width // 2, height // 2)
        if state.phase is Phase.IDLE:
            draw_text("Get ready...", self.font_msg, self.COLOR_TEXT, center, anchor="center")
        elif state.phase is Phase.RUNNING and state.level_banner:
            draw_text(f"LEVEL {state.level}", self.font_msg, self.COLOR_BASKET_RIM, center, anchor="center")
        elif state.phase is Phase.GAME_OVER:
            overlay = pygame.Surface((width, height), pygame.SRCALPHA)
            overlay.fill(self.COLOR_OVERLAY)
            self.surface.blit(overlay, (0, 0))
            draw_text("GAME OVER", self.font_msg, (255, 100, 100), (center[0], center[1] - 40), anchor="center")
            draw_text(f"Final score: {state.score}", self.font_ui, (255, 255, 255),
                      (center[0], center[1] + 10), anchor="center")
            draw_text(f"Total Mall $: {state.total_currency:,}", self.font_ui, (255, 255, 255),
                      (center[0], center[1] + 36), anchor="center")
