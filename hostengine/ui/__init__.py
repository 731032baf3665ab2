"""
Minimal UI layer for hosting dialogue text.

Quick Start:
    from hostengine.ui import Label, UIRenderer

    label = Label("Hello").set_position(40, 600)
    label.render(UIRenderer(screen))

Architecture:
    - Widget: Base class for UI elements
    - Label: Text widget with opacity, used as a sequencer display target
    - UIRenderer: Text drawing onto a pygame surface
"""

from hostengine.ui.widget import Widget, Rect, Padding
from hostengine.ui.renderer import UIRenderer, FontConfig
from hostengine.ui.widgets import Label

__all__ = [
    "Widget",
    "Rect",
    "Padding",
    "UIRenderer",
    "FontConfig",
    "Label",
]
