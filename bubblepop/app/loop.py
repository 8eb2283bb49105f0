from __future__ import annotations
import logging
import math
from typing import Optional

import pygame

from bubblepop.api.config import GameConfig
from bubblepop.api.events import FastTick, PopCommand, Restart, SlowTick
from bubblepop.api.state import SessionSnapshot
from bubblepop.const import (
    BG_COLOR,
    BIG_FONT_SIZE,
    FAST_TICK_MS,
    HUD_COLOR,
    HUD_FONT_SIZE,
    OVERLAY_TEXT_COLOR,
    SLOW_TICK_MS,
)
from bubblepop.core.session import GameSession
from bubblepop.render.shapes import draw_bubble, draw_text
from bubblepop.store.highscores import HighScoreStore
from bubblepop.store.settings import SettingsStore

logger = logging.getLogger(__name__)

SLOW_TICK_EVENT = pygame.USEREVENT + 1
FAST_TICK_EVENT = pygame.USEREVENT + 2


def find_tapped(snap: SessionSnapshot, pos, radius: float) -> Optional[str]:
    """Id of the topmost live bubble under `pos`, if any."""
    px, py = pos
    for b in reversed(snap.bubbles):
        if b.id in snap.popping_ids:
            continue
        if math.hypot(b.x - px, b.y - py) <= radius:
            return b.id
    return None


def run_game(
    player_name: str,
    screen_size: tuple[int, int],
    settings: SettingsStore,
    highscores: HighScoreStore,
):
    pygame.init()
    pygame.display.set_caption(f"Bubble Pop – {player_name}")
    screen = pygame.display.set_mode(screen_size, pygame.RESIZABLE)
    clock = pygame.time.Clock()

    config: GameConfig = settings.load()
    session = GameSession(player_name, screen_size, config=config, highscores=highscores)
    best = highscores.load_top()
    best_score = best[0].score if best else 0

    pygame.time.set_timer(SLOW_TICK_EVENT, SLOW_TICK_MS)
    pygame.time.set_timer(FAST_TICK_EVENT, FAST_TICK_MS)
    logger.info("[loop-start] player=%s screen=%dx%d duration=%ds max_bubbles=%d",
                player_name, screen_size[0], screen_size[1], config.session_duration_sec, config.max_bubbles)

    running = True
    try:
        while running:
            clock.tick(60)
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    elif event.key in (pygame.K_SPACE, pygame.K_RETURN) and session.is_game_over:
                        # settings may have changed between sessions
                        session.update_config(settings.load())
                        session.dispatch(Restart())
                elif event.type == pygame.VIDEORESIZE:
                    session.set_play_area((event.w, event.h))
                elif event.type == SLOW_TICK_EVENT:
                    was_over = session.is_game_over
                    session.dispatch(SlowTick())
                    if session.is_game_over and not was_over:
                        best = highscores.load_top()
                        best_score = best[0].score if best else 0
                elif event.type == FAST_TICK_EVENT:
                    session.dispatch(FastTick())
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    bubble_id = find_tapped(session.snapshot(), event.pos, session.config.bubble_radius)
                    if bubble_id is not None:
                        session.dispatch(PopCommand(bubble_id))

            snap = session.snapshot()
            screen.fill(BG_COLOR)
            _draw_play(screen, snap, session.config)
            _draw_hud(screen, snap, best_score)
            if snap.is_counting_down:
                _draw_countdown(screen, snap)
            elif snap.is_game_over:
                _draw_game_over(screen, snap)
            pygame.display.flip()
    finally:
        pygame.time.set_timer(SLOW_TICK_EVENT, 0)
        pygame.time.set_timer(FAST_TICK_EVENT, 0)
        pygame.quit()


def _draw_play(surface: pygame.Surface, snap: SessionSnapshot, config: GameConfig) -> None:
    for b in snap.bubbles:
        draw_bubble(surface, b, config.bubble_radius, popping=b.id in snap.popping_ids)
    for e in snap.pop_effects:
        draw_text(surface, e.text, (int(e.x), int(e.y)), (200, 150, 0), size=36, center=True)


def _draw_hud(surface: pygame.Surface, snap: SessionSnapshot, best_score: int) -> None:
    w = surface.get_width()
    draw_text(surface, snap.player_name, (16, 18), HUD_COLOR, size=HUD_FONT_SIZE)
    draw_text(surface, f"Time Left: {snap.time_remaining}s", (w // 2, 28), HUD_COLOR, size=HUD_FONT_SIZE, center=True)
    draw_text(surface, f"Score: {snap.score} | Best: {best_score}", (w - 200, 18), HUD_COLOR, size=HUD_FONT_SIZE)


def _dim(surface: pygame.Surface, alpha: int) -> None:
    shade = pygame.Surface(surface.get_size(), pygame.SRCALPHA)
    shade.fill((0, 0, 0, alpha))
    surface.blit(shade, (0, 0))


def _draw_countdown(surface: pygame.Surface, snap: SessionSnapshot) -> None:
    _dim(surface, 128)
    cx, cy = surface.get_width() // 2, surface.get_height() // 2
    draw_text(surface, str(snap.countdown_value), (cx, cy), OVERLAY_TEXT_COLOR, size=BIG_FONT_SIZE, center=True)


def _draw_game_over(surface: pygame.Surface, snap: SessionSnapshot) -> None:
    _dim(surface, 150)
    cx = surface.get_width() // 2
    y = surface.get_height() // 4
    draw_text(surface, f"GAME OVER, {snap.player_name}!", (cx, y), OVERLAY_TEXT_COLOR, size=48, center=True)
    draw_text(surface, f"Your Score: {snap.score}", (cx, y + 56), OVERLAY_TEXT_COLOR, size=32, center=True)
    draw_text(surface, "Top 3 Scores", (cx, y + 110), OVERLAY_TEXT_COLOR, size=28, center=True)
    for i, entry in enumerate(snap.top_three):
        draw_text(surface, f"{entry.name}  {entry.score}", (cx, y + 150 + i * 34), OVERLAY_TEXT_COLOR,
                  size=28, center=True)
    draw_text(surface, "Space: play again   Esc: main menu", (cx, y + 290), OVERLAY_TEXT_COLOR, size=24, center=True)
