"""
Sequencer - plays catalog dialogue onto display targets.
"""

from __future__ import annotations

import logging
import math
import random
from typing import Optional

from hostengine.core.events import EventBus
from hostengine.core.scheduler import Scheduler
from hostkit.config import SequencerConfig
from hostkit.errors import InvalidArgument, InvalidDisplayTarget
from hostkit.sequencer.catalog import DialogueCatalog
from hostkit.sequencer.effects import resolve_entrance, resolve_exit
from hostkit.sequencer.models import DialogueEntry, DisplayTarget, EntranceStyle, ExitStyle
from hostkit.sequencer.session import (
    CancellationToken,
    CompleteCallback,
    EntryCallback,
    PlaybackSession,
)


logger = logging.getLogger(__name__)

_TARGET_METHODS = ("set_text", "set_visible", "set_opacity")


class Sequencer:
    """
    Plays named dialogue sequences with entrance and exit effects.

    Only one session drives a given target at a time: starting a new
    one on a busy target cancels the old session first.

    Usage:
        scheduler = FrameScheduler()
        sequencer = Sequencer(scheduler)

        label = Label()
        sequencer.play("Tutorial", label, entrance="Typewriter", exit="Fade")

        # Each frame
        scheduler.update(dt)
    """

    def __init__(
        self,
        scheduler: Scheduler,
        catalog: Optional[DialogueCatalog] = None,
        config: Optional[SequencerConfig] = None,
        event_bus: Optional[EventBus] = None,
        rng: Optional[random.Random] = None,
    ):
        self.scheduler = scheduler
        self.catalog = catalog if catalog is not None else DialogueCatalog.default()
        self.config = config or SequencerConfig()
        self.event_bus = event_bus
        self._rng = rng or random.Random()

        # id(target) -> session currently driving it
        self._active: dict[int, PlaybackSession] = {}

    def get(self, key: str) -> list[DialogueEntry]:
        """
        Read-only snapshot of a sequence's entries. Does not play anything.

        Raises:
            MissingSequence: if the catalog has no such sequence
        """
        return self.catalog.get_entries(key)

    def play(
        self,
        key: str,
        target: DisplayTarget,
        entrance: EntranceStyle | str | None = "",
        exit: ExitStyle | str | None = "",
        *,
        exit_duration: Optional[float] = None,
        on_entry: Optional[EntryCallback] = None,
        on_complete: Optional[CompleteCallback] = None,
        token: Optional[CancellationToken] = None,
    ) -> PlaybackSession:
        """
        Start playing a sequence on target.

        Args:
            key: Catalog sequence key
            target: Object with set_text/set_visible/set_opacity
            entrance: Entrance style, "" for none
            exit: Exit style, "" for none
            exit_duration: Seconds the exit effect should take; None uses
                the configured per-step delays
            on_entry: Called with (index, entry) after each entry is hidden
            on_complete: Called with the session after the last entry
            token: Cancellation token to bind the session to

        Returns:
            The running session

        Raises:
            MissingSequence: unknown key
            InvalidDisplayTarget: target lacks a required method
            InvalidArgument: unknown style name, or an exit_duration that is
                negative or not finite
        """
        entries = self.catalog.get_entries(key)
        self._check_target(target)
        entrance_style = resolve_entrance(entrance)
        exit_style = resolve_exit(exit)
        if exit_duration is not None and not (math.isfinite(exit_duration) and exit_duration >= 0):
            raise InvalidArgument(f"exit_duration must be a finite number >= 0, got {exit_duration!r}")

        previous = self._active.get(id(target))
        if previous is not None and not previous.done:
            logger.info(f"Replacing {previous.sequence_key!r} on {target!r} with {key!r}")
            previous.cancel()

        session = PlaybackSession(
            sequence_key=key,
            entries=entries,
            target=target,
            scheduler=self.scheduler,
            entrance=entrance_style,
            exit=exit_style,
            config=self.config,
            rng=self._rng,
            exit_duration=exit_duration,
            event_bus=self.event_bus,
            on_entry=on_entry,
            on_complete=on_complete,
            on_release=self._release,
        )
        self._active[id(target)] = session

        if token is not None:
            session.bind(token)
            if session.done:
                return session

        return session.start()

    def active_session(self, target: DisplayTarget) -> Optional[PlaybackSession]:
        """Session currently driving target, if any."""
        session = self._active.get(id(target))
        if session is None or session.done:
            return None
        return session

    def stop(self, target: DisplayTarget) -> bool:
        """Cancel whatever is playing on target."""
        session = self._active.pop(id(target), None)
        if session is None:
            return False
        return session.cancel()

    def stop_all(self) -> None:
        sessions, self._active = list(self._active.values()), {}
        for session in sessions:
            session.cancel()

    def _release(self, session: PlaybackSession) -> None:
        if self._active.get(id(session.target)) is session:
            del self._active[id(session.target)]

    def _check_target(self, target: object) -> None:
        missing = [
            name for name in _TARGET_METHODS
            if not callable(getattr(target, name, None))
        ]
        if missing:
            raise InvalidDisplayTarget(
                f"{type(target).__name__} cannot be a display target, missing: {', '.join(missing)}"
            )
