"""
Entrance and exit text effects.

Each effect is a generator that mutates the display target one step at
a time and yields the number of seconds to wait before the next step.
The playback session owns the waiting; effects never sleep.

Entrance effects leave the target showing the full text at full
opacity. Exit effects start from that state.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Callable, Iterator, Optional

from hostkit.config import SequencerConfig
from hostkit.errors import InvalidArgument
from hostkit.sequencer.models import DisplayTarget, EntranceStyle, ExitStyle


EffectSteps = Iterator[float]


@dataclass
class EffectContext:
    """Timing and randomness shared by the effects of one session."""
    config: SequencerConfig = field(default_factory=SequencerConfig)
    rng: random.Random = field(default_factory=random.Random)
    # Total seconds to spread the effect over; None uses per-step delays
    duration: Optional[float] = None

    def step_delay(self, steps: int, default: float) -> float:
        if self.duration is None or steps <= 0:
            return default
        return self.duration / steps

    def noise(self, text: str) -> str:
        """Random characters in place of every non-space character of text."""
        alphabet = self.config.scramble_alphabet
        return "".join(
            ch if ch.isspace() else self.rng.choice(alphabet)
            for ch in text
        )


Effect = Callable[[DisplayTarget, str, EffectContext], EffectSteps]


# Entrances

def show_instant(target: DisplayTarget, text: str, ctx: EffectContext) -> EffectSteps:
    target.set_opacity(1.0)
    target.set_text(text)
    yield from ()


def type_in(target: DisplayTarget, text: str, ctx: EffectContext) -> EffectSteps:
    """Reveal text one character at a time."""
    delay = ctx.step_delay(len(text), ctx.config.char_delay)
    target.set_opacity(1.0)
    target.set_text("")
    for i in range(1, len(text) + 1):
        target.set_text(text[:i])
        yield delay


def type_in_with_cursor(target: DisplayTarget, text: str, ctx: EffectContext) -> EffectSteps:
    """Reveal text behind a cursor, then trim the cursor off."""
    cursor = ctx.config.cursor
    delay = ctx.step_delay(len(text) + 1, ctx.config.char_delay)
    target.set_opacity(1.0)
    target.set_text(cursor)
    for i in range(1, len(text) + 1):
        yield delay
        target.set_text(text[:i] + cursor)
    yield delay
    target.set_text(text)


def fade_in(target: DisplayTarget, text: str, ctx: EffectContext) -> EffectSteps:
    steps = ctx.config.fade_steps
    delay = ctx.step_delay(steps, ctx.config.fade_delay)
    target.set_opacity(0.0)
    target.set_text(text)
    for step in range(1, steps + 1):
        yield delay
        target.set_opacity(step / steps)


def scramble_in(target: DisplayTarget, text: str, ctx: EffectContext) -> EffectSteps:
    """Show noise, then lock in one real character per step from the left."""
    delay = ctx.step_delay(len(text), ctx.config.scramble_delay)
    target.set_opacity(1.0)
    for i in range(len(text)):
        target.set_text(text[:i] + ctx.noise(text[i:]))
        yield delay
    target.set_text(text)


# Exits

def hold_exit(target: DisplayTarget, text: str, ctx: EffectContext) -> EffectSteps:
    yield from ()


def backspace_out(target: DisplayTarget, text: str, ctx: EffectContext) -> EffectSteps:
    """Trim characters off the end."""
    delay = ctx.step_delay(len(text), ctx.config.char_delay)
    for i in range(len(text) - 1, -1, -1):
        yield delay
        target.set_text(text[:i])


def erase_out(target: DisplayTarget, text: str, ctx: EffectContext) -> EffectSteps:
    """Remove characters from the front, the reverse of typing in."""
    delay = ctx.step_delay(len(text), ctx.config.char_delay)
    for i in range(1, len(text) + 1):
        yield delay
        target.set_text(text[i:])


def fade_out(target: DisplayTarget, text: str, ctx: EffectContext) -> EffectSteps:
    steps = ctx.config.fade_steps
    delay = ctx.step_delay(steps, ctx.config.fade_delay)
    for step in range(steps - 1, -1, -1):
        yield delay
        target.set_opacity(step / steps)


def scramble_out(target: DisplayTarget, text: str, ctx: EffectContext) -> EffectSteps:
    """Turn the text into noise from the left, then fade the noise away."""
    fade_steps = ctx.config.fade_steps
    total_steps = len(text) + fade_steps
    scramble_delay = ctx.step_delay(total_steps, ctx.config.scramble_delay)
    fade_delay = ctx.step_delay(total_steps, ctx.config.fade_delay)

    for i in range(1, len(text) + 1):
        yield scramble_delay
        target.set_text(ctx.noise(text[:i]) + text[i:])

    for step in range(fade_steps - 1, -1, -1):
        yield fade_delay
        target.set_opacity(step / fade_steps)


ENTRANCE_EFFECTS: dict[EntranceStyle, Effect] = {
    EntranceStyle.NONE: show_instant,
    EntranceStyle.INSTANT: show_instant,
    EntranceStyle.TYPEWRITER: type_in,
    EntranceStyle.TYPEWRITER_CURSOR: type_in_with_cursor,
    EntranceStyle.FADE: fade_in,
    EntranceStyle.SCRAMBLE: scramble_in,
}

EXIT_EFFECTS: dict[ExitStyle, Effect] = {
    ExitStyle.NONE: hold_exit,
    ExitStyle.BACKSPACE: backspace_out,
    ExitStyle.ERASE: erase_out,
    ExitStyle.FADE: fade_out,
    ExitStyle.SCRAMBLE: scramble_out,
}


def resolve_entrance(style: EntranceStyle | str | None) -> EntranceStyle:
    """EntranceStyle for a member, its name string, or None (no effect)."""
    if style is None:
        return EntranceStyle.NONE
    if isinstance(style, EntranceStyle):
        return style
    try:
        return EntranceStyle(style)
    except ValueError:
        raise InvalidArgument(f"Unknown entrance style: {style!r}") from None


def resolve_exit(style: ExitStyle | str | None) -> ExitStyle:
    """ExitStyle for a member, its name string, or None (no effect)."""
    if style is None:
        return ExitStyle.NONE
    if isinstance(style, ExitStyle):
        return style
    try:
        return ExitStyle(style)
    except ValueError:
        raise InvalidArgument(f"Unknown exit style: {style!r}") from None
