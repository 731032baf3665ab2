"""
Base widget class for UI elements.

Widgets are DATA + BEHAVIOR. Effects from the sequencer mutate them
between frames and render() draws whatever state they are left in.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Tuple

if TYPE_CHECKING:
    from hostengine.ui.renderer import UIRenderer


@dataclass
class Rect:
    """UI rectangle."""
    x: float = 0
    y: float = 0
    width: float = 0
    height: float = 0


@dataclass
class Padding:
    """Padding values."""
    top: float = 0
    right: float = 0
    bottom: float = 0
    left: float = 0

    @classmethod
    def all(cls, value: float) -> 'Padding':
        """Create uniform padding."""
        return cls(value, value, value, value)

    @property
    def horizontal(self) -> float:
        return self.left + self.right

    @property
    def vertical(self) -> float:
        return self.top + self.bottom


class Widget(ABC):
    """
    Base class for all UI widgets.
    """

    def __init__(self):
        # Geometry
        self.rect = Rect()
        self.padding = Padding()

        # State
        self.visible: bool = True
        self.enabled: bool = True
        self.tag: str = ""  # For identification

    @property
    def position(self) -> Tuple[float, float]:
        return (self.rect.x, self.rect.y)

    # Fluent setters

    def set_position(self, x: float, y: float) -> 'Widget':
        """Set position (fluent)."""
        self.rect.x = x
        self.rect.y = y
        return self

    def set_size(self, width: float, height: float) -> 'Widget':
        """Set size (fluent)."""
        self.rect.width = width
        self.rect.height = height
        return self

    def set_padding(self, padding: Padding) -> 'Widget':
        """Set padding (fluent)."""
        self.padding = padding
        return self

    def set_visible(self, visible: bool) -> 'Widget':
        """Set visibility (fluent)."""
        self.visible = visible
        return self

    # Lifecycle

    def update(self, dt: float) -> None:
        """
        Update widget state.

        Args:
            dt: Delta time in seconds
        """
        pass

    @abstractmethod
    def render(self, renderer: 'UIRenderer') -> None:
        """
        Render the widget.

        Args:
            renderer: UI renderer to draw with
        """
        pass

    def get_preferred_size(self) -> Tuple[float, float]:
        return (self.rect.width, self.rect.height)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(tag={self.tag!r}, pos=({self.rect.x}, {self.rect.y}))"
