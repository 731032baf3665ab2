import os
import sys
import random
import pytest
from unittest.mock import MagicMock, patch

# Ensure project modules can be imported
sys.path.append(os.getcwd())


@pytest.fixture(autouse=True)
def mock_pygame():
    """
    Global mock for pygame to allow headless testing.
    Autoused for all tests to prevent accidental window or font setup.
    """
    with patch('pygame.init'), \
         patch('pygame.display'), \
         patch('pygame.font'), \
         patch('pygame.Surface'):
        import pygame
        pygame.font.get_init = MagicMock(return_value=True)
        yield


@pytest.fixture
def event_bus():
    """Fresh EventBus for each test."""
    from hostengine.core.events import EventBus
    return EventBus()


@pytest.fixture
def scheduler():
    """Frame-driven scheduler starting at t=0."""
    from hostengine.core.scheduler import FrameScheduler
    return FrameScheduler()


@pytest.fixture
def store():
    from hostengine.store import MemoryStore
    return MemoryStore()


@pytest.fixture
def registry(store, event_bus):
    from hostkit.registry import Registry
    return Registry(store, event_bus=event_bus)


class RecordingTarget:
    """Display target that remembers every call with the scheduler time."""

    def __init__(self, clock=None):
        self.text = ""
        self.visible = False
        self.opacity = 1.0
        self.calls = []
        self._clock = clock or (lambda: 0.0)

    def set_text(self, text):
        self.text = text
        self.calls.append((self._clock(), "text", text))

    def set_visible(self, visible):
        self.visible = visible
        self.calls.append((self._clock(), "visible", visible))

    def set_opacity(self, opacity):
        self.opacity = opacity
        self.calls.append((self._clock(), "opacity", opacity))

    def history(self, kind):
        return [(t, value) for t, k, value in self.calls if k == kind]


@pytest.fixture
def target(scheduler):
    return RecordingTarget(clock=scheduler.now)


@pytest.fixture
def sequencer(scheduler, event_bus):
    from hostkit.sequencer import Sequencer
    return Sequencer(scheduler, event_bus=event_bus, rng=random.Random(7))


@pytest.fixture
def make_target(scheduler):
    """Factory for extra recording targets sharing the scheduler clock."""
    return lambda: RecordingTarget(clock=scheduler.now)
