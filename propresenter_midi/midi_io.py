"""Virtual MIDI output port session used to reach the receiving application."""

from __future__ import annotations

import json
import logging
from typing import Callable, Iterable, List, Optional, Protocol

import mido

LOGGER = logging.getLogger(__name__)

DEFAULT_PORT_NAME = "ProPresenter Control"


def _log_event(event: str, **fields: object) -> None:
    LOGGER.info(json.dumps({"event": event, **fields}))


class MidiPort(Protocol):
    """Subset of the mido output port API used by the session."""

    def send(self, message: mido.Message) -> None:
        ...

    def close(self) -> None:
        ...


PortOpener = Callable[[str], MidiPort]


class PortClosedError(RuntimeError):
    """Raised when sending through a session whose port is not open."""


def _open_virtual_output(port_name: str) -> MidiPort:
    """Advertise a virtual output port with user-friendly errors."""
    try:
        return mido.open_output(port_name, virtual=True)
    except (IOError, NotImplementedError) as exc:  # pragma: no cover - depends on backend
        raise RuntimeError(f"Failed to open virtual MIDI output '{port_name}': {exc}") from exc


def list_output_ports() -> List[str]:
    """Return the MIDI output names currently visible to the host."""
    return list(mido.get_output_names())


class PortSession:
    """Owns a single virtual MIDI output and its open/closed state.

    ``opener`` builds the underlying port from its name; it defaults to a
    mido virtual output and is replaced in tests.
    """

    def __init__(
        self,
        port_name: str = DEFAULT_PORT_NAME,
        opener: Optional[PortOpener] = None,
    ) -> None:
        self._port_name = port_name
        self._opener = opener or _open_virtual_output
        self._port: Optional[MidiPort] = None

    @property
    def port_name(self) -> str:
        return self._port_name

    @property
    def is_open(self) -> bool:
        return self._port is not None

    def open(self) -> None:
        """Advertise the virtual port. Opening an open session does nothing."""
        if self._port is not None:
            LOGGER.debug("Port %r already open", self._port_name)
            return
        self._port = self._opener(self._port_name)
        _log_event("port_opened", port=self._port_name)

    def close(self) -> None:
        """Release the port. Closing a closed session does nothing."""
        if self._port is None:
            return
        port, self._port = self._port, None
        port.close()
        _log_event("port_closed", port=self._port_name)

    def send(self, message: Iterable[int]) -> None:
        """Transmit one raw message; no acknowledgement is expected.

        Bytes mido cannot encode (data bytes outside 0-127, non-integers)
        raise before anything is logged or sent.
        """
        if self._port is None:
            raise PortClosedError(f"MIDI port '{self._port_name}' is not open")
        data = list(message)
        midi_message = mido.Message.from_bytes(data)
        _log_event("midi_tx", port=self._port_name, bytes=data)
        self._port.send(midi_message)

    def __enter__(self) -> "PortSession":
        self.open()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


__all__ = [
    "DEFAULT_PORT_NAME",
    "MidiPort",
    "PortClosedError",
    "PortOpener",
    "PortSession",
    "list_output_ports",
]
