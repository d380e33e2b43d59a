"""Pytest configuration and fixtures"""

import json
from typing import Any, Dict, List, Optional

import pytest


SINK_NAME = "alsa_output.pci-0000_00_1f.3.analog-stereo"


def metadata_obj(sink: Optional[str] = SINK_NAME, oid: int = 34, name: str = "default") -> Dict[str, Any]:
    entries: List[Dict[str, Any]] = [
        {"subject": 0, "key": "default.configured.audio.sink", "type": "Spa:String:JSON",
         "value": {"name": "something.else"}},
    ]
    if sink is not None:
        entries.append({"subject": 0, "key": "default.audio.sink", "type": "Spa:String:JSON",
                        "value": {"name": sink}})
    return {
        "id": oid,
        "type": "PipeWire:Interface:Metadata",
        "version": 3,
        "permissions": ["r", "w", "x", "m"],
        "props": {"metadata.name": name},
        "metadata": entries,
    }


def node_obj(
    oid: int = 52,
    name: str = SINK_NAME,
    channel_volumes: Optional[List[float]] = None,
    mute: bool = False,
    vmin: float = 0.0,
    vmax: float = 10.0,
) -> Dict[str, Any]:
    vols = [0.5, 0.5] if channel_volumes is None else channel_volumes
    return {
        "id": oid,
        "type": "PipeWire:Interface:Node",
        "version": 3,
        "info": {
            "max-input-ports": 65,
            "state": "suspended",
            "props": {"node.name": name, "media.class": "Audio/Sink", "object.id": oid},
            "params": {
                "EnumFormat": [
                    {"mediaType": "audio", "mediaSubtype": "raw", "channels": 2, "position": ["FL", "FR"]},
                ],
                "PropInfo": [
                    {"id": "volume", "type": {"default": 1.0, "min": 0.0, "max": 10.0}},
                    {"id": "mute", "type": {"default": False}},
                    {"id": "channelVolumes", "type": {"default": 1.0, "min": vmin, "max": vmax},
                     "container": "Array"},
                ],
                "Props": [
                    {"volume": 1.0, "mute": mute, "channelVolumes": vols, "channelMap": ["FL", "FR"]},
                    {"params": ["audio.channels", 2]},
                ],
            },
        },
    }


class FakePwCli:
    def __init__(self, dump: Any) -> None:
        self.dump = dump if isinstance(dump, str) else json.dumps(dump)
        self.calls: List[Any] = []

    def dump_text(self) -> str:
        return self.dump

    def set_props(self, node_id: int, payload: str) -> None:
        self.calls.append((node_id, payload))


@pytest.fixture
def dump() -> List[Dict[str, Any]]:
    """A small dump: core, client, metadata, an unrelated node and the sink"""
    return [
        {"id": 0, "type": "PipeWire:Interface:Core", "info": {"name": "pipewire-0"}},
        {"id": 31, "type": "PipeWire:Interface:Client", "info": {"props": {}}},
        metadata_obj(),
        node_obj(oid=40, name="alsa_input.pci-0000_00_1f.3.analog-stereo"),
        node_obj(),
    ]
