# pw_output.py
from __future__ import annotations

import json
from typing import Any, Dict

from models import CHANNEL_VOLUMES, CommandPayload, StatusView


def _compact(obj: Dict[str, Any]) -> str:
    return json.dumps(obj, separators=(",", ":"))


def command_dict(payload: CommandPayload) -> Dict[str, Any]:
    out: Dict[str, Any] = {"mute": payload.mute}
    if payload.volume is not None:
        out["volume"] = payload.volume
    if payload.channel_volumes is not None:
        out[CHANNEL_VOLUMES] = list(payload.channel_volumes)
    return out


def encode_command(payload: CommandPayload) -> str:
    """Props JSON for `pw-cli set-param`; unset fields are left out, not null."""
    return _compact(command_dict(payload))


def render_status(view: StatusView) -> str:
    if view.muted:
        return _compact({"alt": "mute", "tooltip": "muted"})
    return _compact({"percentage": view.percentage, "tooltip": f"{view.percentage}%"})
