# gui.py

from __future__ import annotations

from typing import Callable, Dict, Tuple

import pygame

from resources import APP_TITLE, get_string
from ui_state import StageDescriptor

TOP_BAR_HEIGHT = 88
IMAGE_SIZE = 220
BUTTON_WIDTH = 160
BUTTON_HEIGHT = 52

WINDOW_WIDTH = 480
WINDOW_HEIGHT = 720

# Colors – light lemonade palette
BG = (250, 246, 228)
TOP_BAR_BG = (249, 228, 76)
CARD_BG = (195, 236, 210)
CARD_HOVER = (175, 226, 194)
TEXT_MAIN = (33, 33, 33)
TEXT_SECONDARY = (90, 90, 90)

BUTTON_BG = (64, 110, 82)
BUTTON_HOVER = (80, 130, 98)
BUTTON_DISABLED = (210, 210, 205)
BUTTON_TEXT = (255, 255, 255)
BUTTON_TEXT_DISABLED = (150, 150, 145)

# Artwork
LEMON = (250, 215, 40)
LEMON_DARK = (200, 160, 10)
LEAF = (70, 160, 70)
TRUNK = (120, 80, 45)
GLASS = (170, 200, 215)
LEMONADE = (252, 236, 140)
STRAW = (230, 80, 80)


def image_button_rect(screen_size: Tuple[int, int] = (WINDOW_WIDTH, WINDOW_HEIGHT)) -> pygame.Rect:
    w, h = screen_size
    size = min(IMAGE_SIZE, w - 80)
    center_y = TOP_BAR_HEIGHT + (h - TOP_BAR_HEIGHT) // 2 - 60
    return pygame.Rect((w - size) // 2, center_y - size // 2, size, size)


def next_button_rect(screen_size: Tuple[int, int] = (WINDOW_WIDTH, WINDOW_HEIGHT)) -> pygame.Rect:
    w, _ = screen_size
    image_rect = image_button_rect(screen_size)
    return pygame.Rect((w - BUTTON_WIDTH) // 2, image_rect.bottom + 90, BUTTON_WIDTH, BUTTON_HEIGHT)


def _draw_lemon_tree(screen: pygame.Surface, rect: pygame.Rect):
    trunk = pygame.Rect(0, 0, rect.width // 8, rect.height // 3)
    trunk.midbottom = rect.midbottom
    pygame.draw.rect(screen, TRUNK, trunk, border_radius=4)

    canopy_center = (rect.centerx, rect.top + rect.height * 2 // 5)
    canopy_radius = rect.width * 2 // 5
    pygame.draw.circle(screen, LEAF, canopy_center, canopy_radius)

    for dx, dy in [(-0.45, -0.2), (0.3, -0.4), (0.1, 0.25), (-0.2, 0.45), (0.5, 0.2)]:
        cx = canopy_center[0] + int(dx * canopy_radius)
        cy = canopy_center[1] + int(dy * canopy_radius)
        lemon = pygame.Rect(0, 0, rect.width // 9, rect.width // 12)
        lemon.center = (cx, cy)
        pygame.draw.ellipse(screen, LEMON, lemon)


def _draw_lemon(screen: pygame.Surface, rect: pygame.Rect):
    body = rect.inflate(-rect.width // 6, -rect.height // 3)
    pygame.draw.ellipse(screen, LEMON, body)
    pygame.draw.ellipse(screen, LEMON_DARK, body, width=3)

    leaf = pygame.Rect(0, 0, rect.width // 4, rect.height // 10)
    leaf.midbottom = (body.centerx + rect.width // 10, body.top + 6)
    pygame.draw.ellipse(screen, LEAF, leaf)


def _glass_points(rect: pygame.Rect) -> list[tuple[int, int]]:
    top = rect.top + rect.height // 6
    bottom = rect.bottom - rect.height // 12
    half_top = rect.width * 3 // 10
    half_bottom = rect.width // 5
    return [
        (rect.centerx - half_top, top),
        (rect.centerx + half_top, top),
        (rect.centerx + half_bottom, bottom),
        (rect.centerx - half_bottom, bottom),
    ]


def _draw_lemonade(screen: pygame.Surface, rect: pygame.Rect):
    points = _glass_points(rect)
    (tl, tr, br, bl) = points
    # Fill level sits a fifth of the way down
    level = tl[1] + (bl[1] - tl[1]) // 5
    shrink = (tr[0] - br[0]) // 5
    pygame.draw.polygon(
        screen, LEMONADE, [(tl[0] + shrink, level), (tr[0] - shrink, level), br, bl]
    )
    pygame.draw.line(
        screen, STRAW, (rect.centerx + 10, bl[1] - 12), (tr[0] + 12, rect.top + 8), width=5
    )
    pygame.draw.polygon(screen, GLASS, points, width=4)


def _draw_empty_glass(screen: pygame.Surface, rect: pygame.Rect):
    pygame.draw.polygon(screen, GLASS, _glass_points(rect), width=4)


ARTWORK: Dict[str, Callable[[pygame.Surface, pygame.Rect], None]] = {
    "lemon_tree": _draw_lemon_tree,
    "lemon_squeeze": _draw_lemon,
    "lemon_drink": _draw_lemonade,
    "lemon_restart": _draw_empty_glass,
}


def draw_top_bar(screen: pygame.Surface, title_font: pygame.font.Font):
    w, _ = screen.get_size()
    pygame.draw.rect(screen, TOP_BAR_BG, (0, 0, w, TOP_BAR_HEIGHT))

    title_surf = title_font.render(APP_TITLE, True, TEXT_MAIN)
    title_rect = title_surf.get_rect(center=(w // 2, TOP_BAR_HEIGHT // 2))
    screen.blit(title_surf, title_rect)


def draw_stage(
    screen: pygame.Surface,
    title_font: pygame.font.Font,
    body_font: pygame.font.Font,
    caption_font: pygame.font.Font,
    descriptor: StageDescriptor,
):
    """
    Draws the whole screen for one stage.
    The image button is always clickable; the Next/Restart button is greyed
    out unless descriptor.button_enabled.
    """
    screen.fill(BG)
    draw_top_bar(screen, title_font)

    screen_size = screen.get_size()
    mouse_pos = pygame.mouse.get_pos()

    # Image button
    image_rect = image_button_rect(screen_size)
    hovering_image = image_rect.collidepoint(mouse_pos)
    color = CARD_HOVER if hovering_image else CARD_BG
    pygame.draw.rect(screen, color, image_rect, border_radius=24)
    ARTWORK[descriptor.image_key](screen, image_rect.inflate(-32, -32))

    if hovering_image:
        alt = caption_font.render(get_string(descriptor.alt_text_key), True, TEXT_SECONDARY)
        screen.blit(alt, alt.get_rect(midtop=(image_rect.centerx, image_rect.bottom + 8)))

    # Label
    label = body_font.render(get_string(descriptor.text_key), True, TEXT_MAIN)
    screen.blit(label, label.get_rect(midtop=(image_rect.centerx, image_rect.bottom + 40)))

    # Next / Restart
    button_rect = next_button_rect(screen_size)
    if descriptor.button_enabled:
        color = BUTTON_HOVER if button_rect.collidepoint(mouse_pos) else BUTTON_BG
        text_color = BUTTON_TEXT
    else:
        color = BUTTON_DISABLED
        text_color = BUTTON_TEXT_DISABLED

    pygame.draw.rect(screen, color, button_rect, border_radius=26)
    btn_text = body_font.render(descriptor.button_label, True, text_color)
    screen.blit(btn_text, btn_text.get_rect(center=button_rect.center))


def get_stage_action(
    mouse_pos: Tuple[int, int], screen_size: Tuple[int, int] = (WINDOW_WIDTH, WINDOW_HEIGHT)
) -> str | None:
    # Same layout as draw_stage; enabled-state gating is up to the caller
    if image_button_rect(screen_size).collidepoint(mouse_pos):
        return "tap"
    if next_button_rect(screen_size).collidepoint(mouse_pos):
        return "advance"
    return None
