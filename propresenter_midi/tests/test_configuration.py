"""Tests for YAML configuration loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from propresenter_midi.configuration import AppConfig, MidiConfig, load_config, load_default_config


def test_default_config_matches_receiver_defaults() -> None:
    config = load_default_config()
    assert config.midi == MidiConfig(
        port_name="ProPresenter Control", channel=1, note_offset=0, strict=False
    )
    assert config.logging.level == "INFO"


def test_load_config_reads_values(tmp_path: Path) -> None:
    path = tmp_path / "config.yaml"
    path.write_text(
        "midi:\n"
        "  port_name: Stage Display\n"
        "  channel: 3\n"
        "  note_offset: 28\n"
        "  strict: true\n"
        "logging:\n"
        "  level: DEBUG\n",
        encoding="utf-8",
    )
    config = load_config(path)
    assert config.midi == MidiConfig(
        port_name="Stage Display", channel=3, note_offset=28, strict=True
    )
    assert config.logging.level == "DEBUG"


def test_missing_sections_fall_back_to_defaults(tmp_path: Path) -> None:
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")
    assert load_config(path) == AppConfig()


def test_non_mapping_config_rejected(tmp_path: Path) -> None:
    path = tmp_path / "list.yaml"
    path.write_text("- 1\n- 2\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_config(path)


@pytest.mark.parametrize(
    "midi_yaml",
    [
        "  channel: 0\n",
        "  channel: 17\n",
        "  note_offset: -1\n",
        "  port_name: ''\n",
    ],
)
def test_invalid_midi_values_rejected(tmp_path: Path, midi_yaml: str) -> None:
    path = tmp_path / "bad.yaml"
    path.write_text("midi:\n" + midi_yaml, encoding="utf-8")
    with pytest.raises(ValueError):
        load_config(path)


def test_with_overrides() -> None:
    config = AppConfig().with_overrides(port_name="Backup", note_offset=5, strict=True)
    assert config.midi == MidiConfig(port_name="Backup", channel=1, note_offset=5, strict=True)
    assert AppConfig().with_overrides() == AppConfig()


@pytest.mark.parametrize("section", ["logging: INFO\n", "logging: [DEBUG]\n", "logging:\n"])
def test_non_mapping_logging_section_falls_back(tmp_path: Path, section: str) -> None:
    path = tmp_path / "config.yaml"
    path.write_text(section, encoding="utf-8")
    assert load_config(path).logging.level == "INFO"
