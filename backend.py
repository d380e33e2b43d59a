# backend.py
from __future__ import annotations

import logging
from typing import List, Optional

from models import CommandPayload, DumpObject, ResolvedSink, StatusView
from pw_cli import PwCli
from pw_dump import parse_dump
from pw_output import encode_command, render_status
from pw_sink import resolve
from pw_volume import Action, apply_action


log = logging.getLogger(__name__)


class VolumeBackend:
    """One read-modify-write cycle against the default sink."""

    def __init__(self, cli: Optional[PwCli] = None) -> None:
        self._cli = cli if cli is not None else PwCli()
        self._objects: List[DumpObject] = []

    def refresh(self) -> None:
        self._objects = parse_dump(self._cli.dump_text())

    def default_sink(self) -> ResolvedSink:
        if not self._objects:
            self.refresh()
        return resolve(self._objects)

    def run(self, action: Action) -> Optional[str]:
        """
        Apply the action to the default sink.

        Returns the status line for status queries. Mutating actions send
        the payload to the control command and return None.
        """
        sink = self.default_sink()
        result = apply_action(action, sink.volume_range, sink.volume_state)

        if isinstance(result, StatusView):
            return render_status(result)

        if not isinstance(result, CommandPayload):
            raise TypeError(f"unexpected result: {result!r}")
        payload = encode_command(result)
        log.debug("node %d <- %s", sink.node.id, payload)
        self._cli.set_props(sink.node.id, payload)
        return None
