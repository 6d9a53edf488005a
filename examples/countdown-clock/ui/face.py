"""Clock face, title and start/pause/reset buttons."""
from __future__ import annotations

import pygame

from countdown import CountdownEngine, Status
from ui.constants import (
    ACTIVE_OUTLINE,
    BUTTON_COLORS,
    BUTTON_GAP,
    BUTTON_H,
    BUTTON_LABELS,
    BUTTON_ORDER,
    BUTTON_TEXT,
    BUTTON_W,
    FACE_BORDER,
    FACE_H,
    FINISHED_COLOR,
    PAD,
    SCREEN_W,
    TEXT_COLOR,
    TITLE_H,
)


def button_rects() -> dict[str, pygame.Rect]:
    """Centered row of buttons below the clock face."""
    total_w = BUTTON_W * len(BUTTON_ORDER) + BUTTON_GAP * (len(BUTTON_ORDER) - 1)
    x = (SCREEN_W - total_w) // 2
    y = PAD + TITLE_H + FACE_H + 2 * BUTTON_GAP
    rects: dict[str, pygame.Rect] = {}
    for name in BUTTON_ORDER:
        rects[name] = pygame.Rect(x, y, BUTTON_W, BUTTON_H)
        x += BUTTON_W + BUTTON_GAP
    return rects


def hit_button(pos: tuple[int, int]) -> str | None:
    for name, rect in button_rects().items():
        if rect.collidepoint(pos):
            return name
    return None


def active_button(status: Status) -> str | None:
    """Start is highlighted while running, pause while idle."""
    if status is Status.RUNNING:
        return "start"
    if status is Status.IDLE:
        return "pause"
    return None


def draw_title(surface: pygame.Surface, font: pygame.font.Font, title: str) -> None:
    text = font.render(title, True, TEXT_COLOR)
    surface.blit(text, ((SCREEN_W - text.get_width()) // 2, PAD))


def draw_face(surface: pygame.Surface, font: pygame.font.Font, engine: CountdownEngine) -> None:
    rect = pygame.Rect(PAD, PAD + TITLE_H, SCREEN_W - 2 * PAD, FACE_H)
    pygame.draw.rect(surface, FACE_BORDER, rect, width=1)
    color = FINISHED_COLOR if engine.status is Status.FINISHED else TEXT_COLOR
    text = font.render(engine.display(), True, color)
    surface.blit(
        text,
        (rect.centerx - text.get_width() // 2, rect.centery - text.get_height() // 2),
    )


def draw_buttons(
    surface: pygame.Surface,
    font: pygame.font.Font,
    status: Status,
    mouse_pos: tuple[int, int],
) -> None:
    active = active_button(status)
    for name, rect in button_rects().items():
        base, hover = BUTTON_COLORS[name]
        color = hover if rect.collidepoint(mouse_pos) else base
        pygame.draw.rect(surface, color, rect, border_radius=5)
        if name == active:
            pygame.draw.rect(surface, ACTIVE_OUTLINE, rect, width=3, border_radius=5)
        label = font.render(BUTTON_LABELS[name], True, BUTTON_TEXT)
        surface.blit(
            label,
            (rect.centerx - label.get_width() // 2, rect.centery - label.get_height() // 2),
        )
