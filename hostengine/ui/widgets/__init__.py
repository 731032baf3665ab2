"""
Widget implementations.
"""

from hostengine.ui.widgets.label import Label

__all__ = [
    "Label",
]
