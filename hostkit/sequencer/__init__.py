"""
Sequencer module - timed dialogue playback.

Provides:
- Sequencer: play catalog sequences onto display targets
- PlaybackSession, CancellationToken: running playback and its cancellation
- DialogueCatalog, load_catalog: static sequences, built-in or from JSON
- DialogueEntry, Sequence: dialogue data
- EntranceStyle, ExitStyle: text effects
"""

from hostkit.sequencer.models import (
    DialogueEntry,
    Sequence,
    DisplayTarget,
    EntranceStyle,
    ExitStyle,
    PlaybackState,
)
from hostkit.sequencer.catalog import (
    DialogueCatalog,
    DEFAULT_SEQUENCES,
    SEQUENCE_SCHEMA,
    load_catalog,
    parse_sequences,
)
from hostkit.sequencer.effects import EffectContext, ENTRANCE_EFFECTS, EXIT_EFFECTS
from hostkit.sequencer.session import PlaybackSession, CancellationToken
from hostkit.sequencer.player import Sequencer

__all__ = [
    # Data
    "DialogueEntry",
    "Sequence",
    "DisplayTarget",
    "EntranceStyle",
    "ExitStyle",
    "PlaybackState",
    # Catalog
    "DialogueCatalog",
    "DEFAULT_SEQUENCES",
    "SEQUENCE_SCHEMA",
    "load_catalog",
    "parse_sequences",
    # Effects
    "EffectContext",
    "ENTRANCE_EFFECTS",
    "EXIT_EFFECTS",
    # Playback
    "PlaybackSession",
    "CancellationToken",
    "Sequencer",
]
