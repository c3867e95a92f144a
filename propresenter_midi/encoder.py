"""Encoding of remote commands into three-byte MIDI note messages."""

from __future__ import annotations

from typing import List, NamedTuple, Optional

from .commands import Command

DEFAULT_CHANNEL = 1
DEFAULT_VELOCITY = 1

# The receiver expects status = 127 + channel for note-off and
# 127 + 16 + channel for note-on, not the usual 0x80/0x90 bases.
_STATUS_BASE = 127
_NOTE_ON_FLAG = 16


class EncodingError(ValueError):
    """Raised in strict mode when a message would leave the MIDI byte ranges."""


class Message(NamedTuple):
    """A single wire message: status byte followed by two data bytes."""

    status: int
    note: int
    velocity: int

    def as_list(self) -> List[int]:
        return [self.status, self.note, self.velocity]

    def __str__(self) -> str:
        return f"[{self.status}, {self.note}, {self.velocity}]"


def build_message(note_on: bool, channel: int, note: int, velocity: int = DEFAULT_VELOCITY) -> Message:
    """Pack a note message. Values are passed through unclamped."""
    status = _STATUS_BASE + (_NOTE_ON_FLAG if note_on else 0) + channel
    return Message(status=status, note=note, velocity=velocity)


def _validate_offset(offset: int) -> int:
    if isinstance(offset, bool) or not isinstance(offset, int):
        raise ValueError(f"Note offset must be an integer, got {offset!r}")
    if offset < 0:
        raise ValueError(f"Note offset must be non-negative, got {offset}")
    return offset


class Encoder:
    """Turns commands into messages relative to a configurable note offset.

    The offset lets the same command set address a second receiver (or a
    second range configured in the receiving application) without changing
    command codes. With ``strict`` enabled, messages whose bytes fall outside
    the MIDI ranges, unknown command codes and non-integer arguments raise
    :class:`EncodingError`. Otherwise the triple is returned as computed and
    left for the port session to accept or reject.
    """

    def __init__(self, offset: int = 0, channel: int = DEFAULT_CHANNEL, strict: bool = False) -> None:
        self._offset = _validate_offset(offset)
        self._channel = int(channel)
        self._strict = bool(strict)
        if self._strict:
            self._check_channel(self._channel)

    @property
    def offset(self) -> int:
        return self._offset

    @property
    def channel(self) -> int:
        return self._channel

    @property
    def strict(self) -> bool:
        return self._strict

    def set_offset(self, offset: int) -> None:
        """Apply a new offset to every message encoded from now on."""
        self._offset = _validate_offset(offset)

    def execute_command(self, command: Command, arg: Optional[int] = None) -> Message:
        if self._strict:
            self._check_command(command, arg)
        note = self._offset + int(command)
        velocity = DEFAULT_VELOCITY if arg is None else arg
        message = build_message(True, self._channel, note, velocity)
        if self._strict:
            self._check_message(command, message)
        return message

    # Validation ---------------------------------------------------------------

    @staticmethod
    def _check_channel(channel: int) -> None:
        if not 1 <= channel <= 16:
            raise EncodingError(f"MIDI channel must be 1-16, got {channel}")

    @staticmethod
    def _check_command(command: int, arg: Optional[int]) -> None:
        try:
            Command(int(command))
        except ValueError:
            raise EncodingError(f"Unknown command code {int(command)}") from None
        if arg is not None and (isinstance(arg, bool) or not isinstance(arg, int)):
            raise EncodingError(f"Command argument must be an integer, got {arg!r}")

    def _check_message(self, command: Command, message: Message) -> None:
        if not 0 <= message.note <= 127:
            raise EncodingError(
                f"command {int(command)} with offset {self._offset} gives note "
                f"{message.note}, outside 0-127"
            )
        if not 0 <= message.velocity <= 127:
            raise EncodingError(
                f"command {int(command)} argument {message.velocity} is outside 0-127"
            )


__all__ = [
    "DEFAULT_CHANNEL",
    "DEFAULT_VELOCITY",
    "Encoder",
    "EncodingError",
    "Message",
    "build_message",
]
