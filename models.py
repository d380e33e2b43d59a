# models.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Tuple, Union


METADATA_INTERFACE = "PipeWire:Interface:Metadata"
NODE_INTERFACE = "PipeWire:Interface:Node"

DEFAULT_SINK_KEY = "default.audio.sink"
CHANNEL_VOLUMES = "channelVolumes"


@dataclass(frozen=True)
class MetadataEntry:
    key: str
    name: str   # value.name


@dataclass(frozen=True)
class MetadataObject:
    id: Optional[int]
    type: str
    entries: Tuple[MetadataEntry, ...]


@dataclass(frozen=True)
class EnumFormat:
    channels: Optional[int]


@dataclass(frozen=True)
class VolumeRange:
    default: float
    min: float
    max: float

    @property
    def span(self) -> float:
        return self.max - self.min


@dataclass(frozen=True)
class VolumeState:
    volume: float
    mute: bool
    channel_volumes: Tuple[float, ...]


@dataclass(frozen=True)
class RawEntry:
    value: Any


PropInfoEntry = Union[VolumeRange, RawEntry]
PropEntry = Union[VolumeState, RawEntry]


@dataclass(frozen=True)
class NodeObject:
    id: int
    type: str
    name: str   # info.props["node.name"]
    enum_formats: Tuple[EnumFormat, ...] = ()
    prop_info: Tuple[PropInfoEntry, ...] = ()
    props: Tuple[PropEntry, ...] = ()


@dataclass(frozen=True)
class UnrecognizedObject:
    raw: Any


DumpObject = Union[MetadataObject, NodeObject, UnrecognizedObject]


@dataclass(frozen=True)
class ResolvedSink:
    node: NodeObject
    volume_range: VolumeRange
    volume_state: VolumeState


@dataclass(frozen=True)
class CommandPayload:
    mute: bool = False
    volume: Optional[float] = None
    channel_volumes: Optional[Tuple[float, ...]] = None


@dataclass(frozen=True)
class StatusView:
    muted: bool
    percentage: Optional[int] = None  # None when muted
