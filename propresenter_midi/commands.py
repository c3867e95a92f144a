"""Command catalog for the ProPresenter / ProVideoPlayer MIDI remote.

The integer value of each command is the note number sent on the wire (before
the note offset is added), so the values must never be renumbered.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Dict, Iterator, Optional


class Command(IntEnum):
    """Remote-control operations understood by the receiving application."""

    # Clear commands
    CLEAR_ALL = 0
    CLEAR_SLIDE = 1
    CLEAR_BACKGROUND = 2
    CLEAR_PROPS = 3
    CLEAR_AUDIO = 4
    CLEAR_LOGO = 5

    # Video controls
    GO_TO_BEGINNING = 6
    PLAY_PAUSE = 7
    PLAY = 8
    PAUSE = 9

    # Presentation actions
    NEXT_PLAYLIST_ITEM = 10
    PREVIOUS_PLAYLIST_ITEM = 11
    NEXT_SLIDE = 12
    PREVIOUS_SLIDE = 13
    START_TIMELINE = 14
    STOP_TIMELINE = 15
    REWIND_TIMELINE = 16

    # Select by index
    SELECT_PLAYLIST = 17
    SELECT_PLAYLIST_ITEM = 18
    TRIGGER_SLIDE = 19
    SELECT_MEDIA_PLAYLIST = 20
    TRIGGER_MEDIA = 21
    SELECT_AUDIO_PLAYLIST = 22
    TRIGGER_AUDIO = 23
    TOGGLE_PROP = 24

    # Timers
    START_TIMER = 25
    STOP_TIMER = 26
    RESET_TIMER = 27


class CommandGroup(str, Enum):
    CLEAR = "clear"
    VIDEO = "video"
    PRESENTATION = "presentation"
    SELECT = "select"
    TIMER = "timer"


@dataclass(frozen=True)
class CommandSpec:
    """Metadata describing how a command is exposed on the remote."""

    command: Command
    method: str
    group: CommandGroup
    description: str
    index_name: Optional[str] = None

    @property
    def takes_index(self) -> bool:
        return self.index_name is not None

    @property
    def cli_name(self) -> str:
        return self.method.replace("_", "-")


_CATALOG = (
    CommandSpec(Command.CLEAR_ALL, "clear_all", CommandGroup.CLEAR, "Clear all layers"),
    CommandSpec(Command.CLEAR_SLIDE, "clear_slide", CommandGroup.CLEAR, "Clear slide layer"),
    CommandSpec(
        Command.CLEAR_BACKGROUND, "clear_background", CommandGroup.CLEAR, "Clear background layer"
    ),
    CommandSpec(Command.CLEAR_PROPS, "clear_props", CommandGroup.CLEAR, "Clear props layer"),
    CommandSpec(Command.CLEAR_AUDIO, "clear_audio", CommandGroup.CLEAR, "Clear audio layer"),
    CommandSpec(Command.CLEAR_LOGO, "clear_logo", CommandGroup.CLEAR, "Clear logo layer"),
    CommandSpec(
        Command.GO_TO_BEGINNING,
        "video_go_to_beginning",
        CommandGroup.VIDEO,
        "Jump to the beginning of the current video",
    ),
    CommandSpec(
        Command.PLAY_PAUSE, "video_play_pause", CommandGroup.VIDEO, "Play/pause the current video"
    ),
    CommandSpec(Command.PLAY, "video_play", CommandGroup.VIDEO, "Play the current video"),
    CommandSpec(Command.PAUSE, "video_pause", CommandGroup.VIDEO, "Pause the current video"),
    CommandSpec(
        Command.NEXT_PLAYLIST_ITEM,
        "next_playlist_item",
        CommandGroup.PRESENTATION,
        "Open the next playlist item",
    ),
    CommandSpec(
        Command.PREVIOUS_PLAYLIST_ITEM,
        "previous_playlist_item",
        CommandGroup.PRESENTATION,
        "Open the previous playlist item",
    ),
    CommandSpec(Command.NEXT_SLIDE, "next_slide", CommandGroup.PRESENTATION, "Trigger the next slide"),
    CommandSpec(
        Command.PREVIOUS_SLIDE, "previous_slide", CommandGroup.PRESENTATION, "Trigger the previous slide"
    ),
    CommandSpec(
        Command.START_TIMELINE, "start_timeline", CommandGroup.PRESENTATION, "Start the timeline"
    ),
    CommandSpec(Command.STOP_TIMELINE, "stop_timeline", CommandGroup.PRESENTATION, "Stop the timeline"),
    CommandSpec(
        Command.REWIND_TIMELINE, "rewind_timeline", CommandGroup.PRESENTATION, "Rewind the timeline"
    ),
    CommandSpec(
        Command.SELECT_PLAYLIST,
        "select_playlist",
        CommandGroup.SELECT,
        "Select a specific playlist",
        index_name="playlist_index",
    ),
    CommandSpec(
        Command.SELECT_PLAYLIST_ITEM,
        "select_playlist_item",
        CommandGroup.SELECT,
        "Select a specific item in the playlist",
        index_name="item_index",
    ),
    CommandSpec(
        Command.TRIGGER_SLIDE,
        "trigger_slide",
        CommandGroup.SELECT,
        "Trigger a specific slide in the current playlist",
        index_name="slide_index",
    ),
    CommandSpec(
        Command.SELECT_MEDIA_PLAYLIST,
        "select_media_playlist",
        CommandGroup.SELECT,
        "Select a specific media (video/image) playlist",
        index_name="playlist_index",
    ),
    CommandSpec(
        Command.TRIGGER_MEDIA,
        "trigger_media",
        CommandGroup.SELECT,
        "Trigger a specific item in the media playlist",
        index_name="media_index",
    ),
    CommandSpec(
        Command.SELECT_AUDIO_PLAYLIST,
        "select_audio_playlist",
        CommandGroup.SELECT,
        "Select a specific audio playlist",
        index_name="audio_index",
    ),
    CommandSpec(
        Command.TRIGGER_AUDIO,
        "trigger_audio",
        CommandGroup.SELECT,
        "Trigger a specific item in the audio playlist",
        index_name="audio_index",
    ),
    CommandSpec(
        Command.TOGGLE_PROP,
        "toggle_prop",
        CommandGroup.SELECT,
        "Toggle a prop on/off",
        index_name="prop_index",
    ),
    CommandSpec(
        Command.START_TIMER, "start_timer", CommandGroup.TIMER, "Start a timer", index_name="timer_index"
    ),
    CommandSpec(
        Command.STOP_TIMER, "stop_timer", CommandGroup.TIMER, "Stop a timer", index_name="timer_index"
    ),
    CommandSpec(
        Command.RESET_TIMER, "reset_timer", CommandGroup.TIMER, "Reset a timer", index_name="timer_index"
    ),
)

CATALOG: Dict[Command, CommandSpec] = {spec.command: spec for spec in _CATALOG}

_BY_NAME: Dict[str, CommandSpec] = {}
for _spec in _CATALOG:
    _BY_NAME[_spec.command.name.lower()] = _spec
    _BY_NAME[_spec.method] = _spec
del _spec


def iter_catalog() -> Iterator[CommandSpec]:
    """Yield command specs in wire order."""
    return iter(sorted(CATALOG.values(), key=lambda spec: int(spec.command)))


def spec_for(command: Command) -> CommandSpec:
    return CATALOG[Command(command)]


def lookup(name: str) -> CommandSpec:
    """Resolve a command by enum name, method name, or hyphenated CLI name.

    Matching is case-insensitive: ``CLEAR_ALL``, ``clear_all`` and
    ``clear-all`` all resolve to the same spec.
    """
    key = str(name).strip().lower().replace("-", "_")
    try:
        return _BY_NAME[key]
    except KeyError:
        raise ValueError(f"Unknown command: {name!r}") from None


__all__ = [
    "CATALOG",
    "Command",
    "CommandGroup",
    "CommandSpec",
    "iter_catalog",
    "lookup",
    "spec_for",
]
