# pw_dump.py
from __future__ import annotations

import json
import logging
from typing import Any, Dict, List, Optional

from errors import MalformedDump
from models import (
    CHANNEL_VOLUMES,
    DumpObject,
    EnumFormat,
    MetadataEntry,
    MetadataObject,
    NodeObject,
    PropEntry,
    PropInfoEntry,
    RawEntry,
    UnrecognizedObject,
    VolumeRange,
    VolumeState,
)


log = logging.getLogger(__name__)


def _is_number(v: Any) -> bool:
    # json gives bool for true/false, which is an int subclass
    return isinstance(v, (int, float)) and not isinstance(v, bool)


def _is_int(v: Any) -> bool:
    return isinstance(v, int) and not isinstance(v, bool)


def metadata_entry(raw: Any) -> Optional[MetadataEntry]:
    if not isinstance(raw, dict):
        return None
    key = raw.get("key")
    value = raw.get("value")
    if not isinstance(key, str) or not isinstance(value, dict):
        return None
    name = value.get("name")
    if not isinstance(name, str):
        return None
    return MetadataEntry(key=key, name=name)


def enum_format(raw: Any) -> EnumFormat:
    ch = raw.get("channels") if isinstance(raw, dict) else None
    return EnumFormat(channels=ch if _is_int(ch) else None)


def prop_info_entry(raw: Any) -> PropInfoEntry:
    if isinstance(raw, dict) and raw.get("id") == CHANNEL_VOLUMES:
        t = raw.get("type")
        if isinstance(t, dict) and all(_is_number(t.get(k)) for k in ("default", "min", "max")):
            return VolumeRange(default=float(t["default"]), min=float(t["min"]), max=float(t["max"]))
    return RawEntry(raw)


def prop_entry(raw: Any) -> PropEntry:
    if not isinstance(raw, dict):
        return RawEntry(raw)

    volume = raw.get("volume")
    mute = raw.get("mute")
    chans = raw.get(CHANNEL_VOLUMES)
    if not _is_number(volume) or not isinstance(mute, bool) or not isinstance(chans, list):
        return RawEntry(raw)
    if not all(_is_number(c) for c in chans):
        return RawEntry(raw)

    return VolumeState(
        volume=float(volume),
        mute=mute,
        channel_volumes=tuple(float(c) for c in chans),
    )


def _metadata_object(obj: Dict[str, Any]) -> Optional[MetadataObject]:
    t = obj.get("type")
    md = obj.get("metadata")
    if not isinstance(t, str) or not isinstance(md, list):
        return None

    entries = [e for e in (metadata_entry(m) for m in md) if e is not None]
    oid = obj.get("id")
    return MetadataObject(id=oid if _is_int(oid) else None, type=t, entries=tuple(entries))


def _node_object(obj: Dict[str, Any]) -> Optional[NodeObject]:
    oid = obj.get("id")
    t = obj.get("type")
    info = obj.get("info")
    if not _is_int(oid) or not isinstance(t, str) or not isinstance(info, dict):
        return None

    props = info.get("props")
    params = info.get("params")
    if not isinstance(props, dict) or not isinstance(params, dict):
        return None

    name = props.get("node.name")
    if not isinstance(name, str):
        return None

    formats = params.get("EnumFormat")
    prop_info = params.get("PropInfo")
    node_props = params.get("Props")
    if not isinstance(formats, list) or not isinstance(prop_info, list) or not isinstance(node_props, list):
        return None

    return NodeObject(
        id=oid,
        type=t,
        name=name,
        enum_formats=tuple(enum_format(f) for f in formats),
        prop_info=tuple(prop_info_entry(p) for p in prop_info),
        props=tuple(prop_entry(p) for p in node_props),
    )


def parse_object(raw: Any) -> DumpObject:
    if not isinstance(raw, dict):
        return UnrecognizedObject(raw)

    md = _metadata_object(raw)
    if md is not None:
        return md

    node = _node_object(raw)
    if node is not None:
        return node

    return UnrecognizedObject(raw)


def _reject_constant(name: str) -> Any:
    raise MalformedDump(f"pw-dump output contains non-JSON constant: {name}")


def parse_dump(text: str) -> List[DumpObject]:
    try:
        data = json.loads(text, parse_constant=_reject_constant)
    except ValueError as e:
        raise MalformedDump(f"pw-dump output is not valid JSON: {e}") from e

    if not isinstance(data, list):
        raise MalformedDump("pw-dump output JSON is not a list")

    objects = [parse_object(o) for o in data]
    log.debug(
        "parsed %d dump objects (%d metadata, %d nodes)",
        len(objects),
        sum(isinstance(o, MetadataObject) for o in objects),
        sum(isinstance(o, NodeObject) for o in objects),
    )
    return objects
