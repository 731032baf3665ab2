"""
Configuration for the registry and the sequencer.

Configs are frozen pydantic models injected at construction. A host
can keep them in a JSON file:

    {
      "log_level": "DEBUG",
      "registry": {"store_path": "game/registry"},
      "sequencer": {"char_delay": 0.05}
    }

and load it with HostConfig.load(path).
"""

from __future__ import annotations

import json
import logging
import string
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class _FrozenConfig(BaseModel):
    model_config = ConfigDict(frozen=True, extra='forbid')


class RegistryConfig(_FrozenConfig):
    """Registry settings."""

    # Must contain {partition} and {user_id}
    key_format: str = "{partition}/{user_id}"
    # Bounds for cloning caller data before it is stored
    clone_max_depth: int = Field(default=64, ge=1)
    clone_max_items: int = Field(default=10_000, ge=1)
    # JSON file store directory; None keeps records in memory
    store_path: Optional[str] = None

    @field_validator('key_format')
    @classmethod
    def _check_key_format(cls, value: str) -> str:
        if "{partition}" not in value or "{user_id}" not in value:
            raise ValueError("key_format needs {partition} and {user_id} placeholders")
        return value


class SequencerConfig(_FrozenConfig):
    """Timing and look of the dialogue effects."""

    # Seconds per revealed or trimmed character
    char_delay: float = Field(default=0.03, ge=0)
    # Opacity ramp resolution and seconds per ramp step
    fade_steps: int = Field(default=10, ge=1)
    fade_delay: float = Field(default=0.05, ge=0)
    # Seconds per scramble step and the characters drawn from
    scramble_delay: float = Field(default=0.03, ge=0)
    scramble_alphabet: str = Field(
        default=string.ascii_letters + string.digits + "!@#$%&*?",
        min_length=1,
    )
    cursor: str = "_"
    hide_on_cancel: bool = True


class HostConfig(_FrozenConfig):
    """Top-level configuration file."""

    log_level: str = "INFO"
    registry: RegistryConfig = Field(default_factory=RegistryConfig)
    sequencer: SequencerConfig = Field(default_factory=SequencerConfig)

    @field_validator('log_level')
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level

    @classmethod
    def load(cls, path: str | Path) -> 'HostConfig':
        """Load configuration from a JSON file."""
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
        return cls.model_validate(data)


def configure_logging(config: Optional[HostConfig] = None) -> None:
    """Set up root logging from config."""
    config = config or HostConfig()
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
