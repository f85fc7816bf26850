"""Configuration file loading and file-system helpers."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

CONFIG_NAME = "EasyTier-Monitor"
DEFAULT_PORT = 8899


@dataclass
class Config:
    """Runtime settings: HTTP port and path to the EasyTier CLI."""

    port: int = DEFAULT_PORT
    cli_path: str = ""


def _find_config(directory: Path) -> Path | None:
    for candidate in (directory / f"{CONFIG_NAME}.json", directory / CONFIG_NAME):
        if candidate.is_file():
            return candidate
    return None


def _to_int(value: Any) -> int:
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, (int, float)):
        return int(value)
    if isinstance(value, str):
        try:
            return int(value.strip(), 0)
        except ValueError:
            try:
                return int(float(value))
            except ValueError:
                return 0
    return 0


def _to_str(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (str, int, float)):
        return str(value)
    return ""


def load_config(directory: str | os.PathLike[str] = ".") -> Config:
    """Read EasyTier-Monitor.json from ``directory``.

    A missing or unreadable file yields the default port and no CLI path.
    Keys are matched ignoring case; absent keys give 0 and "".
    """
    path = _find_config(Path(directory))
    if path is None:
        print(f"未找到配置文件，端口号默认{DEFAULT_PORT}..")
        return Config()
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
        if not isinstance(data, dict):
            raise ValueError("config root must be an object")
    except (OSError, ValueError):
        print(f"获取配置文件出错，端口号默认{DEFAULT_PORT}")
        return Config()

    lowered = {str(key).lower(): value for key, value in data.items()}
    return Config(
        port=_to_int(lowered.get("port")),
        cli_path=_to_str(lowered.get("cli_path")),
    )


def file_exists(path: str | os.PathLike[str]) -> bool:
    """True unless looking up ``path`` (without following links) says it is missing."""
    try:
        os.lstat(path)
    except FileNotFoundError:
        return False
    except OSError:
        return True
    return True