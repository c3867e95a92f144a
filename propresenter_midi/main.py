"""Command-line entry point for the ProPresenter MIDI remote."""

from __future__ import annotations

import argparse
import json
import logging
import sys
import time
from pathlib import Path
from typing import Iterable, List, Optional, TextIO

from .commands import CommandSpec, iter_catalog, lookup
from .configuration import AppConfig, load_config, load_default_config
from .encoder import Message
from .midi_io import list_output_ports
from .remote import ProPresenterRemote

LOGGER = logging.getLogger(__name__)

_QUIT_WORDS = {"quit", "exit"}


def _log_event(event: str, **fields: object) -> None:
    LOGGER.info(json.dumps({"event": event, **fields}))


def parse_args(argv: Optional[Iterable[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="propresenter-midi",
        description="Control ProPresenter / ProVideoPlayer over a virtual MIDI port.",
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="Path to configuration YAML. Defaults to bundled config.yaml if omitted.",
    )
    parser.add_argument("--port-name", help="Override the virtual port name.")
    parser.add_argument("--offset", type=int, help="Override the note offset.")
    parser.add_argument(
        "--strict",
        action="store_true",
        default=None,
        help="Reject out-of-range notes/velocities instead of sending them.",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("list-commands", help="List the remote commands and their codes")
    subparsers.add_parser("list-ports", help="List MIDI output ports visible to the host")

    send_parser = subparsers.add_parser("send", help="Open the port and send one command")
    send_parser.add_argument("name", help="Command name, e.g. clear-all or select-playlist")
    send_parser.add_argument("index", nargs="?", type=int, help="Index for indexed commands")
    send_parser.add_argument(
        "--wait",
        type=float,
        default=0.0,
        help="Seconds to wait after opening so the receiver can connect (default: 0).",
    )

    subparsers.add_parser(
        "console", help="Open the port and read 'command [index]' lines from stdin"
    )
    return parser.parse_args(list(argv) if argv is not None else None)


def _load(args: argparse.Namespace) -> AppConfig:
    config = load_config(args.config) if args.config else load_default_config()
    return config.with_overrides(
        port_name=args.port_name,
        note_offset=args.offset,
        strict=args.strict,
    )


def invoke(remote: ProPresenterRemote, spec: CommandSpec, index: Optional[int]) -> Optional[Message]:
    """Call the remote method behind ``spec`` with the right arguments."""
    method = getattr(remote, spec.method)
    if spec.takes_index:
        if index is None:
            raise ValueError(f"{spec.cli_name} needs an index ({spec.index_name})")
        return method(index)
    if index is not None:
        raise ValueError(f"{spec.cli_name} does not take an index")
    return method()


def format_catalog() -> List[str]:
    lines = []
    for spec in iter_catalog():
        usage = f"{spec.cli_name} <{spec.index_name}>" if spec.takes_index else spec.cli_name
        lines.append(f"{int(spec.command):3d}  {spec.group.value:<13}{usage:<36}{spec.description}")
    return lines


def run_console(remote: ProPresenterRemote, lines: Iterable[str], out: TextIO) -> int:
    """Send one command per input line until EOF or ``quit``.

    ``offset N`` changes the note offset. Bad lines are reported and skipped.
    Returns the number of messages sent.
    """
    sent = 0
    for raw_line in lines:
        tokens = raw_line.split()
        if not tokens or tokens[0].startswith("#"):
            continue
        word = tokens[0].lower()
        if word in _QUIT_WORDS:
            break
        try:
            if word == "help":
                out.write("\n".join(format_catalog()) + "\n")
                continue
            if word == "offset":
                if len(tokens) != 2:
                    raise ValueError("usage: offset <n>")
                remote.set_note_offset(int(tokens[1]))
                out.write(f"offset={remote.encoder.offset}\n")
                continue
            if len(tokens) > 2:
                raise ValueError(f"too many arguments: {raw_line.strip()!r}")
            index = int(tokens[1]) if len(tokens) == 2 else None
            message = invoke(remote, lookup(word), index)
        except ValueError as exc:
            out.write(f"error: {exc}\n")
            continue
        if message is None:
            out.write("skipped\n")
        else:
            sent += 1
            out.write(f"{message}\n")
    return sent


def cmd_list_commands(_args: argparse.Namespace, _config: AppConfig) -> int:
    print("\n".join(format_catalog()))
    return 0


def cmd_list_ports(_args: argparse.Namespace, _config: AppConfig) -> int:
    ports = list_output_ports()
    if not ports:
        print("No MIDI output ports found.")
        return 0
    for i, port in enumerate(ports, 1):
        print(f"  [{i}] {port}")
    return 0


def cmd_send(args: argparse.Namespace, config: AppConfig) -> int:
    spec = lookup(args.name)
    with ProPresenterRemote.from_config(config) as remote:
        if args.wait > 0:
            time.sleep(args.wait)
        message = invoke(remote, spec, args.index)
    print(message if message is not None else "skipped")
    return 0


def cmd_console(_args: argparse.Namespace, config: AppConfig) -> int:
    with ProPresenterRemote.from_config(config) as remote:
        _log_event(
            "console_started",
            port=config.midi.port_name,
            note_offset=config.midi.note_offset,
        )
        sent = run_console(remote, sys.stdin, sys.stdout)
    _log_event("console_stopped", sent=sent)
    return 0


_HANDLERS = {
    "list-commands": cmd_list_commands,
    "list-ports": cmd_list_ports,
    "send": cmd_send,
    "console": cmd_console,
}


def main(argv: Optional[Iterable[str]] = None) -> int:
    args = parse_args(argv)
    try:
        config = _load(args)
    except (OSError, ValueError, TypeError) as exc:
        print(f"Error: could not load configuration: {exc}", file=sys.stderr)
        return 1

    logging_level = getattr(logging, config.logging.level.upper(), logging.INFO)
    logging.basicConfig(level=logging_level, format="%(message)s")

    try:
        return _HANDLERS[args.command](args, config)
    except KeyboardInterrupt:
        _log_event("keyboard_interrupt")
        return 130
    except (ValueError, RuntimeError) as exc:
        _log_event("fatal_error", error=str(exc))
        return 1


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
