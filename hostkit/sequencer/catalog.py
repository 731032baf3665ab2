"""
Dialogue catalog - the static, named sequences a sequencer can play.

Sequences are immutable once the catalog is built. Hosts either use the
built-in catalog or load their own from JSON files:

    [
      {
        "key": "Shopkeeper",
        "entries": [
          {"text": "Welcome in!", "visible_duration": 2.0, "post_delay": 0.5}
        ]
      }
    ]
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from types import MappingProxyType
from typing import Any, Iterable, Iterator, Mapping

import jsonschema

from hostkit.errors import MissingSequence
from hostkit.sequencer.models import DialogueEntry, Sequence


logger = logging.getLogger(__name__)


SEQUENCE_SCHEMA: dict[str, Any] = {
    "type": "object",
    "required": ["key", "entries"],
    "additionalProperties": False,
    "properties": {
        "key": {"type": "string", "minLength": 1},
        "entries": {
            "type": "array",
            "items": {
                "type": "object",
                "required": ["text"],
                "additionalProperties": False,
                "properties": {
                    "text": {"type": "string"},
                    "visible_duration": {"type": "number", "minimum": 0},
                    "post_delay": {"type": "number", "minimum": 0},
                },
            },
        },
    },
}


def _entry(text: str, visible_duration: float, post_delay: float) -> DialogueEntry:
    return DialogueEntry(text=text, visible_duration=visible_duration, post_delay=post_delay)


DEFAULT_SEQUENCES: tuple[Sequence, ...] = (
    Sequence(key="Tutorial", entries=(
        _entry("Welcome! Use the arrow keys to move around.", 3.0, 0.5),
        _entry("Walk up to a villager and press E to talk.", 3.0, 0.5),
        _entry("Your progress saves automatically. Good luck!", 4.0, 1.0),
    )),
    Sequence(key="Intro", entries=(
        _entry("Long ago, the lanterns of the valley never went out.", 3.5, 0.5),
        _entry("Tonight, the last one flickers.", 3.0, 1.0),
    )),
    Sequence(key="QuestComplete", entries=(
        _entry("Quest complete!", 2.0, 0.5),
    )),
)


class DialogueCatalog(Mapping[str, Sequence]):
    """
    Read-only mapping of sequence key to Sequence.

    Usage:
        catalog = DialogueCatalog.default()
        lines = catalog.get_entries("Tutorial")
    """

    def __init__(self, sequences: Iterable[Sequence] = ()):
        table: dict[str, Sequence] = {}
        for sequence in sequences:
            if sequence.key in table:
                logger.warning(f"Duplicate dialogue sequence {sequence.key!r}, keeping the last one")
            table[sequence.key] = sequence
        self._sequences = MappingProxyType(table)

    @classmethod
    def default(cls) -> 'DialogueCatalog':
        """Catalog holding the built-in sequences."""
        return cls(DEFAULT_SEQUENCES)

    def __getitem__(self, key: str) -> Sequence:
        try:
            return self._sequences[key]
        except KeyError:
            raise MissingSequence(key) from None

    def __iter__(self) -> Iterator[str]:
        return iter(self._sequences)

    def __len__(self) -> int:
        return len(self._sequences)

    def get_entries(self, key: str) -> list[DialogueEntry]:
        """
        Snapshot of a sequence's lines.

        The returned list is new on every call; entries themselves are frozen.

        Raises:
            MissingSequence: if no sequence has that key
        """
        return list(self[key].entries)

    def merged(self, other: Iterable[Sequence]) -> 'DialogueCatalog':
        """New catalog with other's sequences added over these."""
        return DialogueCatalog([*self._sequences.values(), *other])


def parse_sequences(data: Any, source: str = "<data>") -> list[Sequence]:
    """
    Validate and build sequences from decoded JSON.

    data may be one sequence document or a list of them. Documents that
    fail validation are logged and skipped.
    """
    documents = data if isinstance(data, list) else [data]
    sequences = []

    for document in documents:
        try:
            jsonschema.validate(instance=document, schema=SEQUENCE_SCHEMA)
        except jsonschema.ValidationError as e:
            logger.error(f"Validation error in {source}: {e.message}")
            continue

        sequences.append(Sequence(
            key=document['key'],
            entries=tuple(DialogueEntry(**entry) for entry in document['entries']),
        ))

    return sequences


def load_catalog(path: str | Path) -> DialogueCatalog:
    """
    Load a catalog from a JSON file or a directory of JSON files.

    Unreadable files are logged and skipped.
    """
    path = Path(path)
    if path.is_dir():
        files = sorted(path.glob("*.json"))
    elif path.exists():
        files = [path]
    else:
        logger.warning(f"Dialogue path not found: {path}")
        files = []

    sequences: list[Sequence] = []
    for file_path in files:
        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.error(f"Failed to load {file_path}: {e}")
            continue
        sequences.extend(parse_sequences(data, source=str(file_path)))

    logger.info(f"Loaded {len(sequences)} dialogue sequences from {path}")
    return DialogueCatalog(sequences)
