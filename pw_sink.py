# pw_sink.py
from __future__ import annotations

import logging
from typing import Iterable, Optional, Sequence

from errors import (
    InvalidVolumeRange,
    NoChannels,
    NoDefaultSink,
    NoVolumeRange,
    NoVolumeState,
    SinkNodeNotFound,
)
from models import (
    DEFAULT_SINK_KEY,
    METADATA_INTERFACE,
    NODE_INTERFACE,
    DumpObject,
    MetadataObject,
    NodeObject,
    ResolvedSink,
    VolumeRange,
    VolumeState,
)


log = logging.getLogger(__name__)


def default_sink_name(objects: Iterable[DumpObject]) -> Optional[str]:
    for o in objects:
        if not isinstance(o, MetadataObject) or o.type != METADATA_INTERFACE:
            continue
        for e in o.entries:
            if e.key == DEFAULT_SINK_KEY:
                return e.name
    return None


def find_node_by_name(objects: Iterable[DumpObject], name: str) -> Optional[NodeObject]:
    for o in objects:
        if isinstance(o, NodeObject) and o.type == NODE_INTERFACE and o.name == name:
            return o
    return None


def volume_range(node: NodeObject) -> Optional[VolumeRange]:
    return next((p for p in node.prop_info if isinstance(p, VolumeRange)), None)


def volume_state(node: NodeObject) -> Optional[VolumeState]:
    return next((p for p in node.props if isinstance(p, VolumeState)), None)


def resolve(objects: Sequence[DumpObject]) -> ResolvedSink:
    """
    Locate the default sink node and its volume parameters.

    Every lookup takes the first match in dump order; later duplicates are
    ignored.
    """
    sink = default_sink_name(objects)
    if sink is None:
        raise NoDefaultSink()

    node = find_node_by_name(objects, sink)
    if node is None:
        raise SinkNodeNotFound(sink)

    vr = volume_range(node)
    if vr is None:
        raise NoVolumeRange(node.id)
    if not vr.span > 0.0:
        raise InvalidVolumeRange(vr.min, vr.max)

    vs = volume_state(node)
    if vs is None:
        raise NoVolumeState(node.id)
    if not vs.channel_volumes:
        raise NoChannels()

    log.debug("default sink %r is node %d, range (%s, %s)", sink, node.id, vr.min, vr.max)
    return ResolvedSink(node=node, volume_range=vr, volume_state=vs)
