# pw_cli.py
from __future__ import annotations

import logging
import signal
import subprocess
from typing import Sequence

from errors import ControlCommandFailed, DumpCommandFailed, MalformedDump


log = logging.getLogger(__name__)


def _run(cmd: Sequence[str]) -> subprocess.CompletedProcess[str]:
    log.debug("running: %s", " ".join(cmd))
    return subprocess.run(list(cmd), capture_output=True, text=True)


def _signal_name(num: int) -> str:
    try:
        return signal.Signals(num).name
    except ValueError:
        return str(num)


class PwCli:
    """
    The only place that spawns processes: fetch the dump text and apply a
    Props payload to a node. Tests substitute any object with the same two
    methods.
    """

    def __init__(self, dump_cmd: str = "pw-dump", control_cmd: str = "pw-cli") -> None:
        self.dump_cmd = dump_cmd
        self.control_cmd = control_cmd

    def dump_text(self) -> str:
        try:
            p = _run([self.dump_cmd])
        except OSError as e:
            raise DumpCommandFailed(f"failed to execute {self.dump_cmd}: {e}") from e
        except UnicodeDecodeError as e:
            raise MalformedDump(f"{self.dump_cmd} output is not valid UTF-8: {e}") from e

        if p.returncode != 0:
            msg = (p.stderr or p.stdout).strip()
            raise DumpCommandFailed(f"{self.dump_cmd} failed: {msg}")

        return p.stdout

    def set_props(self, node_id: int, payload: str) -> None:
        cmd = [self.control_cmd, "set-param", str(node_id), "Props", payload]
        try:
            p = _run(cmd)
        except OSError as e:
            raise ControlCommandFailed(f"failed to execute {self.control_cmd}: {e}") from e
        except UnicodeDecodeError as e:
            raise ControlCommandFailed(f"{self.control_cmd} output is not valid UTF-8: {e}") from e

        if p.returncode < 0:
            sig = -p.returncode
            raise ControlCommandFailed(
                f"{self.control_cmd} terminated by signal {_signal_name(sig)}",
                signal=sig,
            )
        if p.returncode != 0:
            msg = (p.stderr or p.stdout).strip()
            raise ControlCommandFailed(
                f"{self.control_cmd} did not exit successfully ({p.returncode}): {msg}",
                exit_code=p.returncode,
            )

        # pw-cli reports some failures on stdout with a zero exit
        out = (p.stdout or "").strip()
        if out:
            log.info("%s: %s", self.control_cmd, out)
