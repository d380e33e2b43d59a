# errors.py
from __future__ import annotations

from typing import Optional


class PwVolumeError(RuntimeError):
    """Base for every failure that aborts a pw-volume run."""


class MalformedDump(PwVolumeError):
    pass


class DumpCommandFailed(PwVolumeError):
    pass


class NoDefaultSink(PwVolumeError):
    def __init__(self) -> None:
        super().__init__("failed to determine default audio sink")


class SinkNodeNotFound(PwVolumeError):
    def __init__(self, name: str) -> None:
        super().__init__(f"failed to find node for audio sink: {name}")
        self.name = name


class NoVolumeRange(PwVolumeError):
    def __init__(self, node_id: int) -> None:
        super().__init__(f"failed to determine volume range for node: {node_id}")
        self.node_id = node_id


class InvalidVolumeRange(PwVolumeError):
    def __init__(self, min_: float, max_: float) -> None:
        super().__init__(f"volume range ({min_}, {max_}) is not positive")
        self.min = min_
        self.max = max_


class NoVolumeState(PwVolumeError):
    def __init__(self, node_id: int) -> None:
        super().__init__(f"failed to determine volume for node: {node_id}")
        self.node_id = node_id


class NoChannels(PwVolumeError):
    def __init__(self) -> None:
        super().__init__("no volume channels present")


class InvalidDeltaArgument(PwVolumeError):
    def __init__(self, text: str) -> None:
        super().__init__(f'"{text}" is not a decimal percentage')
        self.text = text


class ControlCommandFailed(PwVolumeError):
    def __init__(self, msg: str, exit_code: Optional[int] = None, signal: Optional[int] = None) -> None:
        super().__init__(msg)
        self.exit_code = exit_code
        self.signal = signal
