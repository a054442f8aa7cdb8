from __future__ import annotations

import pygame
import pytest

from gui import (
    BG,
    BUTTON_BG,
    BUTTON_DISABLED,
    BUTTON_HOVER,
    CARD_BG,
    CARD_HOVER,
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
    draw_stage,
    get_stage_action,
    image_button_rect,
    next_button_rect,
)
from stages import Stage
from ui_state import StageController

DEFAULT_SIZE = (WINDOW_WIDTH, WINDOW_HEIGHT)
OFF_SCREEN = (-1, -1)


@pytest.fixture
def fonts():
    pygame.font.init()
    return pygame.font.Font(None, 32), pygame.font.Font(None, 20), pygame.font.Font(None, 16)


def _render(controller: StageController, fonts, size: tuple[int, int]) -> pygame.Surface:
    screen = pygame.Surface(size)
    draw_stage(screen, *fonts, controller.describe())
    return screen


def _rgb(screen: pygame.Surface, pos: tuple[int, int]) -> tuple[int, int, int]:
    return tuple(screen.get_at(pos))[:3]


def _button_sample(size: tuple[int, int]) -> tuple[int, int]:
    # Left end of the pill, clear of the centered label
    rect = next_button_rect(size)
    return rect.left + 8, rect.centery


@pytest.mark.parametrize("size", [(WINDOW_WIDTH, WINDOW_HEIGHT), (360, 640), (1024, 900)])
def test_hit_testing_matches_layout(size: tuple[int, int]) -> None:
    assert get_stage_action(image_button_rect(size).center, size) == "tap"
    assert get_stage_action(next_button_rect(size).center, size) == "advance"
    assert get_stage_action((1, 1), size) is None


def test_buttons_do_not_overlap() -> None:
    assert not image_button_rect().colliderect(next_button_rect())


@pytest.mark.parametrize("stage", list(Stage))
def test_next_button_greyed_until_stage_complete(stage: Stage, fixed_range, fonts, monkeypatch) -> None:
    monkeypatch.setattr(pygame.mouse, "get_pos", lambda: OFF_SCREEN)
    controller = StageController(fixed_range(3))
    controller.enter_stage(stage)

    screen = _render(controller, fonts, DEFAULT_SIZE)
    assert _rgb(screen, _button_sample(DEFAULT_SIZE)) == BUTTON_DISABLED

    while not controller.complete:
        controller.tap()
    screen = _render(controller, fonts, DEFAULT_SIZE)
    assert _rgb(screen, _button_sample(DEFAULT_SIZE)) in (BUTTON_BG, BUTTON_HOVER)


def test_enabled_button_highlights_under_mouse(fixed_range, fonts, monkeypatch) -> None:
    monkeypatch.setattr(pygame.mouse, "get_pos", lambda: next_button_rect(DEFAULT_SIZE).center)
    controller = StageController(fixed_range(2))
    controller.tap()
    screen = _render(controller, fonts, DEFAULT_SIZE)
    assert _rgb(screen, _button_sample(DEFAULT_SIZE)) == BUTTON_HOVER


@pytest.mark.parametrize("stage", list(Stage))
def test_alt_text_caption_only_on_hover(stage: Stage, fixed_range, fonts, monkeypatch) -> None:
    controller = StageController(fixed_range(2))
    controller.enter_stage(stage)
    image_rect = image_button_rect(DEFAULT_SIZE)
    edge = (image_rect.left + 4, image_rect.centery)
    caption_strip = [
        (x, y)
        for x in range(image_rect.left, image_rect.right)
        for y in range(image_rect.bottom + 8, image_rect.bottom + 28)
    ]

    monkeypatch.setattr(pygame.mouse, "get_pos", lambda: OFF_SCREEN)
    screen = _render(controller, fonts, DEFAULT_SIZE)
    assert _rgb(screen, edge) == CARD_BG
    assert all(_rgb(screen, p) == BG for p in caption_strip)

    monkeypatch.setattr(pygame.mouse, "get_pos", lambda: image_rect.center)
    screen = _render(controller, fonts, DEFAULT_SIZE)
    assert _rgb(screen, edge) == CARD_HOVER
    assert any(_rgb(screen, p) != BG for p in caption_strip)


@pytest.mark.parametrize("size", [DEFAULT_SIZE, (100, 200), (60, 60)])
def test_every_stage_renders_at_any_size(size: tuple[int, int], fixed_range, fonts, monkeypatch) -> None:
    monkeypatch.setattr(pygame.mouse, "get_pos", lambda: image_button_rect(size).center)
    controller = StageController(fixed_range(2))
    for stage in Stage:
        controller.enter_stage(stage)
        _render(controller, fonts, size)
        while not controller.complete:
            controller.tap()
        screen = _render(controller, fonts, size)
        assert screen.get_size() == size
