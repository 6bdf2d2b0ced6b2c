# src/platformer/hud.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Optional
import pygame
from .config import COLOR_FG, COLOR_PANEL, MESSAGE_HIDE_MS


@dataclass
class MessageOverlay:
    """
    Checkpoint message panel. A message shown with auto_hide disappears
    MESSAGE_HIDE_MS later; showing a new message replaces the pending deadline.
    """
    text: Optional[str] = None
    visible: bool = False
    hide_at_ms: Optional[int] = None

    def show(self, text: str, auto_hide: bool, now_ms: int):
        self.text = text
        self.visible = True
        self.hide_at_ms = now_ms + MESSAGE_HIDE_MS if auto_hide else None

    def update(self, now_ms: int):
        if self.hide_at_ms is not None and now_ms >= self.hide_at_ms:
            self.visible = False
            self.hide_at_ms = None

    def draw(self, surf: pygame.Surface, font: pygame.font.Font):
        if not self.visible or not self.text:
            return
        txt = font.render(self.text, True, COLOR_FG)
        w, h = surf.get_size()
        panel = pygame.Rect(0, 0, txt.get_width() + 40, txt.get_height() + 30)
        panel.center = (w // 2, h // 3)
        pygame.draw.rect(surf, COLOR_PANEL, panel, border_radius=10)
        pygame.draw.rect(surf, COLOR_FG, panel, width=2, border_radius=10)
        surf.blit(txt, (panel.centerx - txt.get_width() // 2,
                        panel.centery - txt.get_height() // 2))
