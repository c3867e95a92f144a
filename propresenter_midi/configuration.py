"""Configuration loading and dataclasses for the MIDI remote."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Optional

import yaml

from .midi_io import DEFAULT_PORT_NAME


@dataclass(frozen=True)
class MidiConfig:
    port_name: str = DEFAULT_PORT_NAME
    channel: int = 1
    note_offset: int = 0
    strict: bool = False

    def __post_init__(self) -> None:
        if not self.port_name:
            raise ValueError("midi.port_name must not be empty")
        if not 1 <= self.channel <= 16:
            raise ValueError(f"midi.channel must be 1-16, got {self.channel}")
        if self.note_offset < 0:
            raise ValueError(f"midi.note_offset must be non-negative, got {self.note_offset}")


@dataclass(frozen=True)
class LoggingConfig:
    level: str = "INFO"


@dataclass(frozen=True)
class AppConfig:
    midi: MidiConfig = field(default_factory=MidiConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def with_overrides(
        self,
        *,
        port_name: Optional[str] = None,
        note_offset: Optional[int] = None,
        strict: Optional[bool] = None,
    ) -> "AppConfig":
        """Return a copy with command-line overrides applied."""
        changes: dict = {}
        if port_name is not None:
            changes["port_name"] = port_name
        if note_offset is not None:
            changes["note_offset"] = note_offset
        if strict is not None:
            changes["strict"] = strict
        if not changes:
            return self
        return replace(self, midi=replace(self.midi, **changes))


def load_config(path: Path) -> AppConfig:
    """Load configuration from a YAML file."""
    with path.open("r", encoding="utf-8") as handle:
        raw = yaml.safe_load(handle) or {}
    if not isinstance(raw, dict):
        raise ValueError(f"{path}: top level must be a mapping")

    return AppConfig(
        midi=_parse_midi(raw.get("midi", {})),
        logging=_parse_logging(raw.get("logging", {})),
    )


def _parse_midi(raw: Any) -> MidiConfig:
    if not isinstance(raw, dict):
        raw = {}
    return MidiConfig(
        port_name=str(raw.get("port_name", DEFAULT_PORT_NAME)),
        channel=int(raw.get("channel", 1)),
        note_offset=int(raw.get("note_offset", 0)),
        strict=bool(raw.get("strict", False)),
    )


def _parse_logging(raw: Any) -> LoggingConfig:
    if not isinstance(raw, dict):
        raw = {}
    return LoggingConfig(level=str(raw.get("level", "INFO")))


def load_default_config() -> AppConfig:
    """Load the default config.yaml shipped with the package."""
    path = Path(__file__).resolve().parent / "config.yaml"
    return load_config(path)


__all__ = [
    "AppConfig",
    "LoggingConfig",
    "MidiConfig",
    "load_config",
    "load_default_config",
]
