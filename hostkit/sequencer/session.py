"""
Playback session - one run of one dialogue sequence on one target.

The session is a generator of delays driven by a Scheduler. For every
entry it goes Entering -> Holding -> Exiting -> Advancing, then moves
to the next entry or finishes. Sessions can be cancelled at any wait.
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Callable, Iterator, Optional

from hostengine.core.events import EventBus, SequencerEvent
from hostengine.core.scheduler import CallHandle, Scheduler
from hostkit.config import SequencerConfig
from hostkit.sequencer.effects import (
    ENTRANCE_EFFECTS,
    EXIT_EFFECTS,
    EffectContext,
)
from hostkit.sequencer.models import (
    DialogueEntry,
    DisplayTarget,
    EntranceStyle,
    ExitStyle,
    PlaybackState,
)

if TYPE_CHECKING:
    import random


logger = logging.getLogger(__name__)

EntryCallback = Callable[[int, DialogueEntry], None]
CompleteCallback = Callable[['PlaybackSession'], None]


class CancellationToken:
    """
    Cancels every session it has been handed to.

    Usage:
        token = CancellationToken()
        sequencer.play("Intro", label_a, token=token)
        sequencer.play("Intro", label_b, token=token)
        token.cancel()  # stops both
    """

    def __init__(self):
        self._cancelled = False
        self._callbacks: list[Callable[[], None]] = []

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def add_callback(self, callback: Callable[[], None]) -> None:
        """Run callback on cancel, or right away if already cancelled."""
        if self._cancelled:
            callback()
        else:
            self._callbacks.append(callback)

    def cancel(self) -> None:
        if self._cancelled:
            return
        self._cancelled = True
        callbacks, self._callbacks = self._callbacks, []
        for callback in callbacks:
            callback()


class PlaybackSession:
    """
    Plays a list of dialogue entries onto a display target.

    Created by Sequencer.play(); not usually built directly.
    """

    def __init__(
        self,
        sequence_key: str,
        entries: list[DialogueEntry],
        target: DisplayTarget,
        scheduler: Scheduler,
        entrance: EntranceStyle = EntranceStyle.NONE,
        exit: ExitStyle = ExitStyle.NONE,
        config: Optional[SequencerConfig] = None,
        rng: Optional['random.Random'] = None,
        exit_duration: Optional[float] = None,
        event_bus: Optional[EventBus] = None,
        on_entry: Optional[EntryCallback] = None,
        on_complete: Optional[CompleteCallback] = None,
        on_release: Optional[CompleteCallback] = None,
    ):
        self.sequence_key = sequence_key
        self.target = target
        self.entrance = entrance
        self.exit = exit
        self.current_index: int = 0

        self._entries = entries
        self._scheduler = scheduler
        self._config = config or SequencerConfig()
        self._event_bus = event_bus
        self._on_entry = on_entry
        self._on_complete = on_complete
        # Owner hook, called once the session reaches a final state
        self._on_release = on_release

        self._entrance_ctx = EffectContext(config=self._config)
        if rng is not None:
            self._entrance_ctx.rng = rng
        self._exit_ctx = EffectContext(
            config=self._config,
            rng=self._entrance_ctx.rng,
            duration=exit_duration,
        )

        self._state = PlaybackState.IDLE
        self._steps: Optional[Iterator[float]] = None
        self._handle: Optional[CallHandle] = None
        self._stepping = False
        self._waiters: list[asyncio.Future] = []
        self.error: Optional[BaseException] = None

    # State

    @property
    def state(self) -> PlaybackState:
        return self._state

    @property
    def done(self) -> bool:
        """True once the session completed, was cancelled or failed."""
        return self._state.is_final

    @property
    def entries(self) -> list[DialogueEntry]:
        return list(self._entries)

    @property
    def current_entry(self) -> Optional[DialogueEntry]:
        if self.done or not 0 <= self.current_index < len(self._entries):
            return None
        return self._entries[self.current_index]

    # Control

    def start(self) -> 'PlaybackSession':
        """Begin playback. The first entry is shown before this returns."""
        if self._state is not PlaybackState.IDLE:
            raise RuntimeError(f"Session for {self.sequence_key!r} already started")

        self._steps = self._run()
        self._publish(SequencerEvent.SEQUENCE_STARTED)
        self._step()
        return self

    def cancel(self) -> bool:
        """
        Stop playback at the current step.

        Returns:
            False if the session had already finished
        """
        if self.done:
            return False

        if self._handle is not None:
            self._handle.cancel()
            self._handle = None
        # A callback inside the generator may cancel; _step closes it afterwards
        if self._steps is not None and not self._stepping:
            self._steps.close()

        self._state = PlaybackState.CANCELLED
        if self._config.hide_on_cancel:
            self.target.set_visible(False)

        logger.debug(f"Cancelled {self.sequence_key!r} at entry {self.current_index}")
        self._publish(SequencerEvent.SEQUENCE_CANCELLED, index=self.current_index)
        self._resolve_waiters()
        self._release()
        return True

    def bind(self, token: CancellationToken) -> None:
        """Cancel this session when token is cancelled."""
        token.add_callback(self.cancel)

    async def wait(self) -> PlaybackState:
        """
        Wait for the session to finish (asyncio hosts).

        Returns:
            The final state
        """
        if not self.done:
            future = asyncio.get_running_loop().create_future()
            self._waiters.append(future)
            await future
        return self._state

    # Driving

    def _run(self) -> Iterator[float]:
        entrance = ENTRANCE_EFFECTS[self.entrance]
        exit_effect = EXIT_EFFECTS[self.exit]

        for index, entry in enumerate(self._entries):
            self.current_index = index
            self._publish(SequencerEvent.ENTRY_STARTED, index=index, text=entry.text)
            if self.done:
                return

            self._state = PlaybackState.ENTERING
            self.target.set_visible(True)
            yield from entrance(self.target, entry.text, self._entrance_ctx)

            self._state = PlaybackState.HOLDING
            yield entry.visible_duration

            self._state = PlaybackState.EXITING
            yield from exit_effect(self.target, entry.text, self._exit_ctx)

            self._state = PlaybackState.ADVANCING
            yield entry.post_delay
            self.target.set_visible(False)

            self._publish(SequencerEvent.ENTRY_COMPLETED, index=index, text=entry.text)
            if self._on_entry and not self.done:
                self._on_entry(index, entry)
            if self.done:
                return

    def _step(self) -> None:
        """Run steps until one asks for a real wait, then schedule the rest."""
        self._handle = None

        while not self.done:
            self._stepping = True
            try:
                delay = next(self._steps)
            except StopIteration:
                if not self.done:
                    self._finish()
                return
            except Exception as e:
                self._fail(e)
                return
            finally:
                self._stepping = False

            if self.done:
                # Cancelled from inside a callback
                self._steps.close()
                return

            if delay > 0:
                self._handle = self._scheduler.call_later(delay, self._step)
                return

    def _finish(self) -> None:
        self._state = PlaybackState.DONE
        self._publish(SequencerEvent.SEQUENCE_COMPLETED)
        if self._on_complete:
            try:
                self._on_complete(self)
            except Exception:
                logger.exception(f"Completion callback for {self.sequence_key!r} raised")
        self._resolve_waiters()
        self._release()

    def _fail(self, error: Exception) -> None:
        self._state = PlaybackState.FAILED
        self.error = error
        logger.error(
            f"Playback of {self.sequence_key!r} failed at entry {self.current_index}: {error}"
        )
        self._publish(SequencerEvent.SEQUENCE_FAILED, index=self.current_index, error=str(error))
        self._resolve_waiters()
        self._release()

    def _resolve_waiters(self) -> None:
        waiters, self._waiters = self._waiters, []
        for future in waiters:
            if future.done():
                continue
            if self.error is not None:
                future.set_exception(self.error)
            else:
                future.set_result(self._state)

    def _release(self) -> None:
        release, self._on_release = self._on_release, None
        if release:
            release(self)

    def _publish(self, event_type: SequencerEvent, **data) -> None:
        if self._event_bus:
            self._event_bus.publish(event_type, sequence=self.sequence_key, session=self, **data)

    def __repr__(self) -> str:
        return (
            f"PlaybackSession({self.sequence_key!r}, state={self._state.value}, "
            f"index={self.current_index}/{len(self._entries)})"
        )
