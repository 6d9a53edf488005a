"""Countdown Clock -- desktop countdown timer.

The pygame frame loop doubles as the wake-up scheduler: a ManualScheduler
backed by the monotonic clock is pumped once per frame, so heartbeats
arrive roughly every interval and the engine corrects for whatever jitter
the frame pacing adds.

Controls:
  S / click start   Start or resume
  P / click pause   Pause
  R / click reset   Reset to the full duration
  Esc               Quit
"""
from __future__ import annotations

import argparse
import logging
import sys

import pygame

from countdown import (
    CountdownConfig,
    CountdownEngine,
    ManualScheduler,
    MonotonicClock,
    timer_title,
)
from countdown.config import DEFAULT_INTERVAL_MS, DEFAULT_MINUTES
from ui.constants import BG_COLOR, FPS, SCREEN_H, SCREEN_W
from ui.face import draw_buttons, draw_face, draw_title, hit_button

logger = logging.getLogger("countdown-clock")


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Countdown Clock -- pygame countdown timer")
    p.add_argument("--minutes", type=int, default=DEFAULT_MINUTES,
                   help=f"Countdown length in minutes (default: {DEFAULT_MINUTES})")
    p.add_argument("--interval", type=int, default=DEFAULT_INTERVAL_MS,
                   help=f"Heartbeat interval in ms (default: {DEFAULT_INTERVAL_MS})")
    return p.parse_args()


class ClockApp:
    """Owns the engine and routes input to its commands."""

    def __init__(self, minutes: int, interval_ms: int) -> None:
        self.minutes = minutes
        self.clock = MonotonicClock()
        self.scheduler = ManualScheduler(self.clock)
        self.engine = CountdownEngine(
            self.scheduler,
            CountdownConfig.from_minutes(minutes, interval_ms=interval_ms),
            self.clock,
        )
        self.finished_count = 0
        self.engine.subscribe_finished(self._on_finished)

    def _on_finished(self) -> None:
        self.finished_count += 1
        logger.info("countdown finished (%d so far)", self.finished_count)

    def command(self, name: str) -> None:
        getattr(self.engine, name)()

    def close(self) -> None:
        self.engine.dispose()


def main() -> None:
    args = parse_args()
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = ClockApp(args.minutes, args.interval)

    pygame.init()
    screen = pygame.display.set_mode((SCREEN_W, SCREEN_H))
    pygame.display.set_caption(timer_title(args.minutes))
    frame_clock = pygame.time.Clock()
    title_font = pygame.font.SysFont("sans", 24, bold=True)
    face_font = pygame.font.SysFont("monospace", 80, bold=True)
    button_font = pygame.font.SysFont("sans", 16)

    keys = {pygame.K_s: "start", pygame.K_p: "pause", pygame.K_r: "reset"}
    running = True

    while running:
        frame_clock.tick(FPS)

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key in keys:
                    app.command(keys[event.key])

            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                name = hit_button(event.pos)
                if name is not None:
                    app.command(name)

        # --- Heartbeats ---
        app.scheduler.pump()

        # --- Render ---
        screen.fill(BG_COLOR)
        draw_title(screen, title_font, timer_title(app.minutes))
        draw_face(screen, face_font, app.engine)
        draw_buttons(screen, button_font, app.engine.status, pygame.mouse.get_pos())
        pygame.display.flip()

    app.close()
    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
