"""Named remote-control shortcuts for ProPresenter / ProVideoPlayer."""

from __future__ import annotations

import logging
from typing import Optional

from .commands import Command
from .configuration import AppConfig
from .encoder import Encoder, Message
from .midi_io import PortOpener, PortSession

LOGGER = logging.getLogger(__name__)


class ProPresenterRemote:
    """Sends catalog commands through one port session.

    Each remote carries its own encoder, so two remotes with different note
    offsets can drive two receivers side by side.
    """

    def __init__(self, session: PortSession, encoder: Optional[Encoder] = None) -> None:
        self._session = session
        self._encoder = encoder or Encoder()

    @classmethod
    def from_config(cls, config: AppConfig, opener: Optional[PortOpener] = None) -> "ProPresenterRemote":
        midi = config.midi
        session = PortSession(midi.port_name, opener=opener)
        encoder = Encoder(offset=midi.note_offset, channel=midi.channel, strict=midi.strict)
        return cls(session, encoder)

    @property
    def session(self) -> PortSession:
        return self._session

    @property
    def encoder(self) -> Encoder:
        return self._encoder

    # Lifecycle ----------------------------------------------------------------

    def open(self) -> None:
        """Open the port for ProPresenter to connect to."""
        self._session.open()

    def close(self) -> None:
        """Close the connection to ProPresenter."""
        self._session.close()

    def __enter__(self) -> "ProPresenterRemote":
        self.open()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    # Configuration ------------------------------------------------------------

    def set_note_offset(self, offset: int) -> None:
        """Set the offset configured in the receiving application."""
        self._encoder.set_offset(offset)
        LOGGER.debug("Note offset set to %d", offset)

    def execute(self, command: Command, arg: Optional[int] = None) -> Message:
        message = self._encoder.execute_command(command, arg)
        self._session.send(message)
        return message

    # Clear commands -----------------------------------------------------------

    def clear_all(self) -> Message:
        """Clear all layers."""
        return self.execute(Command.CLEAR_ALL)

    def clear_slide(self) -> Message:
        return self.execute(Command.CLEAR_SLIDE)

    def clear_background(self) -> Message:
        return self.execute(Command.CLEAR_BACKGROUND)

    def clear_props(self) -> Message:
        return self.execute(Command.CLEAR_PROPS)

    def clear_audio(self) -> Message:
        return self.execute(Command.CLEAR_AUDIO)

    def clear_logo(self) -> Message:
        return self.execute(Command.CLEAR_LOGO)

    # Video controls -----------------------------------------------------------

    def video_go_to_beginning(self) -> Message:
        return self.execute(Command.GO_TO_BEGINNING)

    def video_play_pause(self) -> Message:
        """Toggle play/pause on the current video."""
        return self.execute(Command.PLAY_PAUSE)

    def video_play(self) -> Message:
        return self.execute(Command.PLAY)

    def video_pause(self) -> Message:
        return self.execute(Command.PAUSE)

    # Presentation actions -----------------------------------------------------

    def next_playlist_item(self) -> Message:
        return self.execute(Command.NEXT_PLAYLIST_ITEM)

    def previous_playlist_item(self) -> Message:
        return self.execute(Command.PREVIOUS_PLAYLIST_ITEM)

    def next_slide(self) -> Message:
        return self.execute(Command.NEXT_SLIDE)

    def previous_slide(self) -> Message:
        return self.execute(Command.PREVIOUS_SLIDE)

    def start_timeline(self) -> Message:
        return self.execute(Command.START_TIMELINE)

    def stop_timeline(self) -> Message:
        return self.execute(Command.STOP_TIMELINE)

    def rewind_timeline(self) -> Message:
        return self.execute(Command.REWIND_TIMELINE)

    # Select by index ----------------------------------------------------------

    def select_playlist(self, playlist_index: int) -> Message:
        return self.execute(Command.SELECT_PLAYLIST, playlist_index)

    def select_playlist_item(self, item_index: int) -> Message:
        return self.execute(Command.SELECT_PLAYLIST_ITEM, item_index)

    def trigger_slide(self, slide_index: int) -> Optional[Message]:
        """Trigger a slide in the current playlist.

        Indexes of zero or below are ignored and nothing is sent. The other
        indexed commands send whatever index they are given.
        """
        if slide_index <= 0:
            LOGGER.debug("Ignoring trigger_slide with index %d", slide_index)
            return None
        return self.execute(Command.TRIGGER_SLIDE, slide_index)

    def select_media_playlist(self, playlist_index: int) -> Message:
        """Select a media (video/image) playlist."""
        return self.execute(Command.SELECT_MEDIA_PLAYLIST, playlist_index)

    def trigger_media(self, media_index: int) -> Message:
        return self.execute(Command.TRIGGER_MEDIA, media_index)

    def select_audio_playlist(self, audio_index: int) -> Message:
        return self.execute(Command.SELECT_AUDIO_PLAYLIST, audio_index)

    def trigger_audio(self, audio_index: int) -> Message:
        return self.execute(Command.TRIGGER_AUDIO, audio_index)

    def toggle_prop(self, prop_index: int) -> Message:
        return self.execute(Command.TOGGLE_PROP, prop_index)

    # Timers -------------------------------------------------------------------

    def start_timer(self, timer_index: int) -> Message:
        return self.execute(Command.START_TIMER, timer_index)

    def stop_timer(self, timer_index: int) -> Message:
        return self.execute(Command.STOP_TIMER, timer_index)

    def reset_timer(self, timer_index: int) -> Message:
        return self.execute(Command.RESET_TIMER, timer_index)


__all__ = ["ProPresenterRemote"]
