from __future__ import annotations
import pygame

from gui import WINDOW_WIDTH, WINDOW_HEIGHT, draw_stage, get_stage_action
from resources import APP_TITLE
from stages import Stage
from ui_state import StageController

FPS = 60


def _report(controller: StageController):
    if controller.stage is Stage.SQUEEZE:
        print(f"Entering stage {controller.stage.name} ({controller.remaining_taps} squeezes)...")
    else:
        print(f"Entering stage {controller.stage.name}...")


def handle_action(controller: StageController, action: str | None) -> bool:
    """Applies a GUI action. Returns True if the stage changed."""
    if action == "tap":
        controller.tap()
    elif action == "advance" and controller.describe().button_enabled:
        return controller.advance()
    return False


def main():
    pygame.init()
    screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT), pygame.RESIZABLE)
    pygame.display.set_caption(APP_TITLE)

    # Fonts
    title_font = pygame.font.SysFont("SF Pro Display", 32, bold=True)
    body_font = pygame.font.SysFont("SF Pro Text", 20)
    caption_font = pygame.font.SysFont("SF Pro Text", 16)

    clock = pygame.time.Clock()
    controller = StageController()
    _report(controller)

    running = True
    while running:
        clock.tick(FPS)

        for event in pygame.event.get():
            action = None
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.VIDEORESIZE:
                screen = pygame.display.set_mode((event.w, event.h), pygame.RESIZABLE)
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                action = get_stage_action(event.pos, screen.get_size())
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_SPACE:
                    action = "tap"
                elif event.key in (pygame.K_RETURN, pygame.K_RIGHT):
                    action = "advance"

            if handle_action(controller, action):
                _report(controller)

        draw_stage(screen, title_font, body_font, caption_font, controller.describe())
        pygame.display.flip()

    pygame.quit()

if __name__ == "__main__":
    main()
