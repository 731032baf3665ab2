"""
Core host services.

Exports:
- EventBus, Event, RegistryEvent, SequencerEvent: Event system
- Scheduler, FrameScheduler, AsyncioScheduler: Delay scheduling
"""

from hostengine.core.events import (
    EventBus,
    Event,
    EventHandler,
    RegistryEvent,
    SequencerEvent,
)
from hostengine.core.scheduler import (
    Scheduler,
    FrameScheduler,
    AsyncioScheduler,
    ScheduledCall,
    CallHandle,
)

__all__ = [
    # Events
    "EventBus",
    "Event",
    "EventHandler",
    "RegistryEvent",
    "SequencerEvent",
    # Scheduling
    "Scheduler",
    "FrameScheduler",
    "AsyncioScheduler",
    "ScheduledCall",
    "CallHandle",
]
