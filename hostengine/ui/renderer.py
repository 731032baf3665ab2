"""
UI Renderer for drawing text onto a pygame surface.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple, Optional

import pygame


@dataclass
class FontConfig:
    """Font configuration."""
    name: Optional[str] = None  # None = pygame default
    size: int = 16
    bold: bool = False
    italic: bool = False


class UIRenderer:
    """
    Renderer for UI text.

    Usage:
        renderer = UIRenderer(screen_surface)
        renderer.draw_text("Hello", 60, 35, color=(255, 255, 255, 128), align="center")
    """

    def __init__(self, surface: pygame.Surface):
        self.surface = surface
        self._fonts: dict[tuple, pygame.font.Font] = {}
        self._default_font = FontConfig()

    def set_surface(self, surface: pygame.Surface) -> None:
        """Change the target surface."""
        self.surface = surface

    def get_font(self, config: Optional[FontConfig] = None) -> pygame.font.Font:
        """Get or create a font from config."""
        if config is None:
            config = self._default_font

        key = (config.name, config.size, config.bold, config.italic)

        if key not in self._fonts:
            if not pygame.font.get_init():
                pygame.font.init()
            if config.name:
                font = pygame.font.Font(config.name, config.size)
            else:
                font = pygame.font.SysFont(None, config.size)
            font.set_bold(config.bold)
            font.set_italic(config.italic)
            self._fonts[key] = font

        return self._fonts[key]

    def draw_text(
        self,
        text: str,
        x: float,
        y: float,
        color: Tuple[int, ...] = (255, 255, 255),
        font_config: Optional[FontConfig] = None,
        align: str = "left",
        max_width: Optional[float] = None,
    ) -> pygame.Rect:
        """
        Draw text.

        Args:
            text: Text to render
            x, y: Position
            color: Text color (RGB or RGBA)
            font_config: Font settings
            align: "left", "center", or "right"
            max_width: Maximum width for text wrapping

        Returns:
            Bounding rect of rendered text
        """
        font = self.get_font(font_config)

        if max_width and len(text) > 0:
            lines = self._wrap_text(text, font, max_width)
        else:
            lines = text.split('\n')

        total_rect = pygame.Rect(int(x), int(y), 0, 0)
        line_height = font.get_height()

        for i, line in enumerate(lines):
            if not line:
                continue

            text_surface = font.render(line, True, color[:3])
            text_rect = text_surface.get_rect()

            if align == "center":
                text_rect.centerx = int(x)
            elif align == "right":
                text_rect.right = int(x)
            else:
                text_rect.left = int(x)

            text_rect.top = int(y) + i * line_height

            if len(color) == 4 and color[3] < 255:
                text_surface.set_alpha(color[3])

            self.surface.blit(text_surface, text_rect)
            total_rect = total_rect.union(text_rect)

        return total_rect

    def measure_text(
        self,
        text: str,
        font_config: Optional[FontConfig] = None,
    ) -> Tuple[int, int]:
        """Measure text dimensions."""
        font = self.get_font(font_config)
        return font.size(text)

    def get_line_height(self, font_config: Optional[FontConfig] = None) -> int:
        """Get font line height."""
        font = self.get_font(font_config)
        return font.get_height()

    def _wrap_text(
        self,
        text: str,
        font: pygame.font.Font,
        max_width: float,
    ) -> list[str]:
        """Wrap text to fit within max_width."""
        lines = []

        for paragraph in text.split('\n'):
            current_line = ""
            for word in paragraph.split(' '):
                test_line = current_line + (" " if current_line else "") + word

                if font.size(test_line)[0] <= max_width:
                    current_line = test_line
                else:
                    if current_line:
                        lines.append(current_line)
                    current_line = word

            lines.append(current_line)

        return lines if lines else [""]
