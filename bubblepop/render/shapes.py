import pygame
from typing import Tuple

from bubblepop.api.bubble import Bubble


def draw_text(surface: pygame.Surface, text: str, pos: Tuple[int, int], color=(230, 230, 230), size=24, center=False):
    font = pygame.font.SysFont(None, size)
    rendered = font.render(text, True, color)
    if center:
        pos = rendered.get_rect(center=pos).topleft
    surface.blit(rendered, pos)


def draw_bubble(surface: pygame.Surface, bubble: Bubble, radius: float, popping: bool = False):
    # popped bubbles swell and go hollow during the grace window
    r = int(radius * 1.5) if popping else int(radius)
    pygame.draw.circle(surface, bubble.type.rgb, (int(bubble.x), int(bubble.y)), r, width=3 if popping else 0)
