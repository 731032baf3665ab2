"""
Dialogue data and the display target contract.
"""

from __future__ import annotations

from enum import Enum
from typing import Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field


class DialogueEntry(BaseModel):
    """One line of dialogue and how long it stays up."""

    model_config = ConfigDict(frozen=True, extra='forbid')

    text: str
    # Seconds the line stays fully shown after its entrance
    visible_duration: float = Field(default=2.0, ge=0)
    # Seconds to wait after the exit effect before hiding the target
    post_delay: float = Field(default=0.5, ge=0)


class Sequence(BaseModel):
    """Named, ordered run of dialogue lines."""

    model_config = ConfigDict(frozen=True, extra='forbid')

    key: str = Field(min_length=1)
    entries: tuple[DialogueEntry, ...] = ()

    def __len__(self) -> int:
        return len(self.entries)


@runtime_checkable
class DisplayTarget(Protocol):
    """Anything the sequencer can write text onto, e.g. a Label."""

    def set_text(self, text: str) -> object: ...

    def set_visible(self, visible: bool) -> object: ...

    def set_opacity(self, opacity: float) -> object: ...


class EntranceStyle(Enum):
    """How a line appears."""
    NONE = ""
    INSTANT = "Instant"
    TYPEWRITER = "Typewriter"
    TYPEWRITER_CURSOR = "TypewriterCursor"
    FADE = "Fade"
    SCRAMBLE = "Scramble"


class ExitStyle(Enum):
    """How a line goes away."""
    NONE = ""
    BACKSPACE = "Backspace"
    ERASE = "Erase"
    FADE = "Fade"
    SCRAMBLE = "Scramble"


class PlaybackState(Enum):
    """Where a playback session is in its current line."""
    IDLE = "Idle"
    ENTERING = "Entering"
    HOLDING = "Holding"
    EXITING = "Exiting"
    ADVANCING = "Advancing"
    DONE = "Done"
    CANCELLED = "Cancelled"
    FAILED = "Failed"

    @property
    def is_final(self) -> bool:
        return self in (PlaybackState.DONE, PlaybackState.CANCELLED, PlaybackState.FAILED)
