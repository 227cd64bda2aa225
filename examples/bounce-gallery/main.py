"""Bounce Gallery — Precomputed gravity bounces, batched behind one callback.

Exercises scenetick, scenetick-actions and scenetick-gravity.

Controls:
  Space   Drop a wave of balls (one lane per bounciness)
  +/-     Adjust bounce count
  G       Cycle gravity strength
  Esc     Quit
"""
from __future__ import annotations

import sys

import pygame

from scenetick import Actor, Stage, StageConfig
from scenetick_actions import ActionList
from scenetick_gravity import MAX_BOUNCES, gravity

# --- Configuration ---
LANE_COUNT = 6
LANE_W = 110
FLOOR_Y = 520
TOP_Y = 60
STATUS_H = 36
SCREEN_W = LANE_W * LANE_COUNT
SCREEN_H = FLOOR_Y + 40 + STATUS_H
FPS = 60
BALL_RADIUS = 14
EXTRA_DELAY = 0.3

GRAVITY_PRESETS = [800.0, 1500.0, 3000.0, 6000.0]

BG_COLOR = (20, 20, 30)
FLOOR_COLOR = (60, 60, 80)
TEXT_COLOR = (200, 200, 210)
TEXT_DIM = (120, 120, 140)
BALL_COLOR = (0, 220, 220)
DONE_COLOR = (255, 255, 255)


class GalleryState:
    """Holds the stage, the lane actors and wave bookkeeping."""

    def __init__(self) -> None:
        self.stage = Stage(StageConfig(fps=FPS))
        self.batch = ActionList(self.stage)
        self.balls = [Actor(f"lane{i}", x=LANE_W * (i + 0.5), y=TOP_Y) for i in range(LANE_COUNT)]
        for ball in self.balls:
            self.stage.add_actor(ball)

        self.bounces = 3
        self.gravity_index = 2
        self.wave_count = 0
        self.complete_count = 0
        self.in_flight = False
        self.last_wait = 0.0

    @property
    def gravity(self) -> float:
        return GRAVITY_PRESETS[self.gravity_index]

    def drop_wave(self) -> None:
        if self.in_flight:
            return
        for i, ball in enumerate(self.balls):
            bounciness = i / (LANE_COUNT - 1)
            ball.y = TOP_Y
            self.batch.add(
                gravity(self.gravity, TOP_Y, FLOOR_Y - BALL_RADIUS, self.bounces, bounciness),
                ball,
            )
        self.last_wait = self.batch.process(self._on_wave_complete, EXTRA_DELAY)
        self.in_flight = True
        self.wave_count += 1

    def _on_wave_complete(self) -> None:
        self.in_flight = False
        self.complete_count += 1


def draw(screen: pygame.Surface, font: pygame.font.Font, state: GalleryState) -> None:
    screen.fill(BG_COLOR)
    pygame.draw.line(screen, FLOOR_COLOR, (0, FLOOR_Y), (SCREEN_W, FLOOR_Y), 2)

    for i, ball in enumerate(state.balls):
        color = BALL_COLOR if ball.has_actions() else DONE_COLOR
        pygame.draw.circle(screen, color, (int(ball.x), int(ball.y)), BALL_RADIUS)
        label = font.render(f"b={i / (LANE_COUNT - 1):.1f}", True, TEXT_DIM)
        screen.blit(label, (int(ball.x) - label.get_width() // 2, FLOOR_Y + 10))

    status = (
        f"g={state.gravity:.0f}  bounces={state.bounces}  "
        f"waves={state.wave_count}  done={state.complete_count}  "
        f"wait={state.last_wait:.2f}s"
    )
    screen.blit(font.render(status, True, TEXT_COLOR), (10, SCREEN_H - STATUS_H + 10))


def main() -> None:
    pygame.init()
    screen = pygame.display.set_mode((SCREEN_W, SCREEN_H))
    pygame.display.set_caption("Bounce Gallery — scenetick-gravity demo")
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("monospace", 13)

    state = GalleryState()
    frame_interval = 1.0 / FPS
    accumulator = 0.0
    running = True

    while running:
        accumulator += clock.tick(FPS) / 1000.0

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_SPACE:
                    state.drop_wave()
                elif event.key in (pygame.K_PLUS, pygame.K_EQUALS, pygame.K_KP_PLUS):
                    state.bounces = min(state.bounces + 1, MAX_BOUNCES)
                elif event.key in (pygame.K_MINUS, pygame.K_KP_MINUS):
                    state.bounces = max(state.bounces - 1, 0)
                elif event.key == pygame.K_g:
                    state.gravity_index = (state.gravity_index + 1) % len(GRAVITY_PRESETS)

        while accumulator >= frame_interval:
            state.stage.step()
            accumulator -= frame_interval

        draw(screen, font, state)
        pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
