# pw_volume.py
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Union

from errors import InvalidDeltaArgument
from models import CommandPayload, StatusView, VolumeRange, VolumeState


_DELTA_RE = re.compile(r"^[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?%$")


@dataclass(frozen=True)
class MuteOn:
    pass


@dataclass(frozen=True)
class MuteOff:
    pass


@dataclass(frozen=True)
class MuteToggle:
    pass


@dataclass(frozen=True)
class ChangeBy:
    percent: float  # signed, e.g. +1.0 or -0.5


@dataclass(frozen=True)
class QueryStatus:
    pass


Action = Union[MuteOn, MuteOff, MuteToggle, ChangeBy, QueryStatus]

MUTE_TRANSITIONS = {
    "on": MuteOn(),
    "off": MuteOff(),
    "toggle": MuteToggle(),
}


def is_decimal_percentage(text: str) -> bool:
    return bool(_DELTA_RE.match(text or ""))


def parse_delta(text: str) -> float:
    """'+1%' -> 1.0, '-0.5%' -> -0.5"""
    if not is_decimal_percentage(text):
        raise InvalidDeltaArgument(text)
    return float(text[:-1])


def clamp(v: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, v))


def change_volume(vr: VolumeRange, vs: VolumeState, percent: float) -> CommandPayload:
    increment = percent * vr.span / 100.0
    vols = tuple(clamp(v + increment, vr.min, vr.max) for v in vs.channel_volumes)
    # Current mute is not consulted: a relative change always sends mute=false,
    # so changing the volume of a muted sink also unmutes it.
    return CommandPayload(mute=False, channel_volumes=vols)


def status_view(vr: VolumeRange, vs: VolumeState) -> StatusView:
    if vs.mute:
        return StatusView(muted=True)
    # assumes all channels carry the same volume; min is not subtracted
    percentage = vs.channel_volumes[0] * 100.0 / vr.span
    return StatusView(muted=False, percentage=int(round(percentage)))


def apply_action(action: Action, vr: VolumeRange, vs: VolumeState) -> Union[CommandPayload, StatusView]:
    if isinstance(action, MuteOn):
        return CommandPayload(mute=True)
    if isinstance(action, MuteOff):
        return CommandPayload(mute=False)
    if isinstance(action, MuteToggle):
        return CommandPayload(mute=not vs.mute)
    if isinstance(action, ChangeBy):
        return change_volume(vr, vs, action.percent)
    if isinstance(action, QueryStatus):
        return status_view(vr, vs)
    raise TypeError(f"unknown action: {action!r}")
