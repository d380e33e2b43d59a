# store_config.py
from __future__ import annotations

import configparser
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional


log = logging.getLogger(__name__)

APP_NAME = "pw-volume"
CONFIG_FILENAME = "pw-volume.cfg"

DEFAULT_DUMP_CMD = "pw-dump"
DEFAULT_CONTROL_CMD = "pw-cli"
DEFAULT_LOG_LEVEL = "WARNING"


def _linux_xdg_config_dir() -> Path:
    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg)
    return Path.home() / ".config"


def user_config_dir(app_name: str = APP_NAME) -> Path:
    return _linux_xdg_config_dir() / app_name


def default_config_path() -> Path:
    return user_config_dir() / CONFIG_FILENAME


@dataclass(frozen=True)
class Settings:
    dump_cmd: str = DEFAULT_DUMP_CMD
    control_cmd: str = DEFAULT_CONTROL_CMD
    log_level: str = DEFAULT_LOG_LEVEL


def _get(cfg: configparser.ConfigParser, section: str, key: str, fallback: str) -> str:
    v = cfg.get(section, key, fallback="").strip()
    return v or fallback


def load_settings(path: Optional[Path] = None) -> Settings:
    """
    I read [Commands] and [Logging] from the settings file, if there is one.

    The file is optional and never written; a missing file, blank values or
    a file that fails to parse all fall back to the defaults.
    """
    p = Path(path).expanduser() if path is not None else default_config_path()
    if not p.exists():
        return Settings()

    cfg = configparser.ConfigParser()
    try:
        cfg.read(p, encoding="utf-8")
    except (configparser.Error, OSError, UnicodeDecodeError) as e:
        log.warning("ignoring unreadable config %s: %s", p, e)
        return Settings()

    level = _get(cfg, "Logging", "level", DEFAULT_LOG_LEVEL).upper()
    if not isinstance(logging.getLevelName(level), int):
        log.warning("ignoring unknown log level %r in %s", level, p)
        level = DEFAULT_LOG_LEVEL

    return Settings(
        dump_cmd=_get(cfg, "Commands", "dump", DEFAULT_DUMP_CMD),
        control_cmd=_get(cfg, "Commands", "control", DEFAULT_CONTROL_CMD),
        log_level=level,
    )
