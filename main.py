# main.py
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from backend import VolumeBackend
from errors import InvalidDeltaArgument, PwVolumeError
from pw_cli import PwCli
from pw_volume import MUTE_TRANSITIONS, Action, ChangeBy, QueryStatus, is_decimal_percentage, parse_delta
from store_config import APP_NAME, load_settings


log = logging.getLogger(__name__)


def _delta(text: str) -> float:
    try:
        return parse_delta(text)
    except InvalidDeltaArgument as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=APP_NAME,
        description="Basic interface to PipeWire volume controls",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="count",
        default=0,
        help="log more detail to stderr (repeat for debug output)",
    )
    parser.add_argument(
        "-c", "--config",
        metavar="PATH",
        type=Path,
        default=None,
        help="settings file (default: $XDG_CONFIG_HOME/pw-volume/pw-volume.cfg)",
    )

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")
    subparsers.required = True

    p = subparsers.add_parser("mute", help="mutes audio [possible values: on, off, toggle]")
    p.add_argument("transition", metavar="TRANSITION", choices=sorted(MUTE_TRANSITIONS))

    p = subparsers.add_parser("change", help="adjusts volume by decimal percentage, e.g. '+1%%', '-0.5%%'")
    p.add_argument("delta", metavar="DELTA", type=_delta, help="decimal percentage, e.g. '+1%%', '-0.5%%'")

    subparsers.add_parser("status", help="get volume and mute information")
    return parser


def _command_index(argv: List[str]) -> int:
    # skip global options; -c/--config consumes the next token
    i = 0
    while i < len(argv):
        a = argv[i]
        if a in ("-c", "--config"):
            i += 2
        elif a.startswith("-") and a != "--":
            i += 1
        else:
            return i + 1 if a == "--" else i
    return i


def _protect_negative_delta(argv: List[str]) -> List[str]:
    # argparse reads "-5%" as an unknown option; "--" makes it positional
    i = _command_index(argv)
    if i + 1 < len(argv) and argv[i] == "change":
        delta = argv[i + 1]
        if delta.startswith("-") and is_decimal_percentage(delta):
            return argv[: i + 1] + ["--"] + argv[i + 1 :]
    return argv


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    args = list(sys.argv[1:] if argv is None else argv)
    return build_parser().parse_args(_protect_negative_delta(args))


def action_from_args(args: argparse.Namespace) -> Action:
    if args.command == "mute":
        return MUTE_TRANSITIONS[args.transition]
    if args.command == "change":
        return ChangeBy(args.delta)
    if args.command == "status":
        return QueryStatus()
    raise ValueError(f"unknown command: {args.command}")


def _log_level(verbose: int, configured: str) -> int:
    if verbose >= 2:
        return logging.DEBUG
    if verbose == 1:
        return logging.INFO
    return logging.getLevelName(configured)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    settings = load_settings(args.config)

    logging.basicConfig(
        stream=sys.stderr,
        level=_log_level(args.verbose, settings.log_level),
        format="%(name)s: %(levelname)s: %(message)s",
    )

    backend = VolumeBackend(PwCli(dump_cmd=settings.dump_cmd, control_cmd=settings.control_cmd))
    try:
        out = backend.run(action_from_args(args))
    except PwVolumeError as e:
        log.debug("run failed", exc_info=True)
        print(f"{APP_NAME}: error: {e}", file=sys.stderr)
        return 1

    if out is not None:
        print(out)
    return 0


if __name__ == "__main__":
    sys.exit(main())
