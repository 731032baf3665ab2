"""
Label widget for displaying text.

This is the display target the dialogue sequencer writes to: it
exposes set_text, set_visible and set_opacity.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Tuple

from hostengine.ui.widget import Widget
from hostengine.ui.renderer import FontConfig

if TYPE_CHECKING:
    from hostengine.ui.renderer import UIRenderer


DEFAULT_TEXT_COLOR = (240, 240, 240)


class Label(Widget):
    """
    Simple text display widget.

    Features:
    - Single or multi-line text
    - Alignment options
    - Custom font and color
    - Opacity (0.0 transparent, 1.0 opaque)
    """

    def __init__(
        self,
        text: str = "",
        color: Optional[Tuple[int, ...]] = None,
        font_size: Optional[int] = None,
    ):
        super().__init__()
        self._text = text
        self._color = color
        self._font_size = font_size
        self._font_config: Optional[FontConfig] = None
        self._opacity: float = 1.0

        # Alignment
        self.align: str = "left"  # "left", "center", "right"
        self.valign: str = "top"  # "top", "middle", "bottom"

        # Wrapping
        self.max_width: Optional[float] = None

    @property
    def text(self) -> str:
        return self._text

    @text.setter
    def text(self, value: str) -> None:
        self._text = value

    @property
    def opacity(self) -> float:
        return self._opacity

    @opacity.setter
    def opacity(self, value: float) -> None:
        self._opacity = min(1.0, max(0.0, float(value)))

    @property
    def color(self) -> Tuple[int, ...]:
        """Get text color."""
        return self._color or DEFAULT_TEXT_COLOR

    @color.setter
    def color(self, value: Tuple[int, ...]) -> None:
        self._color = value

    @property
    def font_config(self) -> FontConfig:
        """Get font configuration."""
        if self._font_config:
            return self._font_config
        return FontConfig(size=self._font_size or 16)

    @font_config.setter
    def font_config(self, value: FontConfig) -> None:
        self._font_config = value

    def set_text(self, text: str) -> 'Label':
        """Set text (fluent)."""
        self.text = text
        return self

    def set_opacity(self, opacity: float) -> 'Label':
        """Set opacity (fluent)."""
        self.opacity = opacity
        return self

    def set_color(self, color: Tuple[int, ...]) -> 'Label':
        """Set color (fluent)."""
        self.color = color
        return self

    def set_align(self, align: str) -> 'Label':
        """Set alignment (fluent)."""
        self.align = align
        return self

    def get_preferred_size(self) -> Tuple[float, float]:
        """Approximate size without a renderer."""
        char_width = (self._font_size or 16) * 0.6
        line_height = (self._font_size or 16) * 1.2

        lines = self._text.split('\n')
        max_line_width = max(len(line) for line in lines) if lines else 0

        width = max_line_width * char_width + self.padding.horizontal
        height = len(lines) * line_height + self.padding.vertical

        return (width, height)

    def render(self, renderer: 'UIRenderer') -> None:
        """Render the label."""
        if not self.visible or not self._text or self._opacity <= 0:
            return

        x, y = self.position
        text_x = x + self.padding.left
        text_y = y + self.padding.top

        if self.align == "center":
            text_x = x + self.rect.width / 2
        elif self.align == "right":
            text_x = x + self.rect.width - self.padding.right

        if self.valign == "middle":
            line_height = renderer.get_line_height(self.font_config)
            text_y = y + (self.rect.height - line_height) / 2
        elif self.valign == "bottom":
            line_height = renderer.get_line_height(self.font_config)
            text_y = y + self.rect.height - line_height - self.padding.bottom

        alpha = int(round(255 * self._opacity))
        color = (*self.color[:3], alpha)

        renderer.draw_text(
            self._text,
            text_x,
            text_y,
            color=color,
            font_config=self.font_config,
            align=self.align,
            max_width=self.max_width,
        )
