"""Tests for the named remote-control shortcuts."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

import pytest

from propresenter_midi.commands import CATALOG, Command
from propresenter_midi.configuration import AppConfig, MidiConfig
from propresenter_midi.encoder import Encoder
from propresenter_midi.midi_io import PortClosedError, PortSession
from propresenter_midi.remote import ProPresenterRemote


@dataclass
class FakePort:
    name: str = ""
    messages: list = field(default_factory=list)

    def send(self, message) -> None:
        self.messages.append(message)

    def close(self) -> None:
        pass

    def sent_bytes(self) -> List[List[int]]:
        return [message.bytes() for message in self.messages]


def make_remote(offset: int = 0) -> tuple[ProPresenterRemote, FakePort]:
    port = FakePort()
    session = PortSession(opener=lambda name: port)
    remote = ProPresenterRemote(session, Encoder(offset=offset))
    remote.open()
    return remote, port


def test_clear_all_sends_expected_bytes() -> None:
    remote, port = make_remote()
    remote.clear_all()
    remote.set_note_offset(10)
    remote.clear_all()
    assert port.sent_bytes() == [[144, 0, 1], [144, 10, 1]]


def test_select_playlist_passes_index_as_velocity() -> None:
    remote, port = make_remote()
    assert remote.select_playlist(5).as_list() == [144, 17, 5]
    assert port.sent_bytes() == [[144, 17, 5]]


@pytest.mark.parametrize("index", [0, -1, -20])
def test_trigger_slide_ignores_non_positive_index(index: int) -> None:
    remote, port = make_remote()
    assert remote.trigger_slide(index) is None
    assert port.messages == []


def test_trigger_slide_sends_positive_index() -> None:
    remote, port = make_remote()
    remote.trigger_slide(1)
    assert port.sent_bytes() == [[144, 19, 1]]


def test_other_indexed_commands_send_index_zero() -> None:
    remote, port = make_remote()
    for spec in CATALOG.values():
        if spec.takes_index and spec.command is not Command.TRIGGER_SLIDE:
            getattr(remote, spec.method)(0)
    assert len(port.messages) == 10
    assert all(message.velocity == 0 for message in port.messages)


@pytest.mark.parametrize("offset", [0, 40])
def test_every_shortcut_encodes_its_command(offset: int) -> None:
    remote, port = make_remote(offset)
    for spec in sorted(CATALOG.values(), key=lambda s: int(s.command)):
        method = getattr(remote, spec.method)
        message = method(3) if spec.takes_index else method()
        expected_velocity = 3 if spec.takes_index else 1
        assert message.as_list() == [144, offset + int(spec.command), expected_velocity]
    assert len(port.messages) == len(CATALOG)


def test_offset_applies_only_to_following_messages() -> None:
    remote, port = make_remote()
    remote.next_slide()
    remote.set_note_offset(30)
    remote.next_slide()
    assert port.sent_bytes() == [[144, 12, 1], [144, 42, 1]]


def test_two_remotes_keep_independent_offsets() -> None:
    first, first_port = make_remote(offset=0)
    second, second_port = make_remote(offset=50)
    first.video_play()
    second.video_play()
    assert first_port.sent_bytes() == [[144, 8, 1]]
    assert second_port.sent_bytes() == [[144, 58, 1]]


def test_command_before_open_raises() -> None:
    remote = ProPresenterRemote(PortSession(opener=lambda name: FakePort(name)))
    with pytest.raises(PortClosedError):
        remote.next_slide()


def test_context_manager_opens_and_closes() -> None:
    remote = ProPresenterRemote(PortSession(opener=lambda name: FakePort(name)))
    with remote as opened:
        assert opened.session.is_open
    assert not remote.session.is_open


def test_from_config_uses_port_name_offset_and_channel() -> None:
    ports: list = []

    def opener(name: str) -> FakePort:
        port = FakePort(name)
        ports.append(port)
        return port

    config = AppConfig(midi=MidiConfig(port_name="PVP Control", channel=2, note_offset=20))
    with ProPresenterRemote.from_config(config, opener=opener) as remote:
        remote.stop_timer(4)
    assert ports[0].name == "PVP Control"
    assert ports[0].sent_bytes() == [[145, 46, 4]]


@pytest.mark.parametrize("index", [-1, 128, 200])
def test_out_of_range_index_is_not_sent(index: int) -> None:
    remote, port = make_remote()
    with pytest.raises(ValueError):
        remote.select_playlist(index)
    assert port.messages == []
