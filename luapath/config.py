from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any

CONFIG_PATH = Path(os.path.expanduser("~")) / ".luapath" / "config.json"

DEFAULTS: dict[str, Any] = {
    "lua_executable": "lua",
    "log_level": "INFO",
}


def ensure_config_dir() -> None:
    CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
    if not CONFIG_PATH.exists():
        CONFIG_PATH.write_text(json.dumps(DEFAULTS, ensure_ascii=False, indent=2), encoding="utf-8")


def load_config() -> dict[str, Any]:
    ensure_config_dir()
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        data = {}
    merged = {**DEFAULTS, **data}
    # ENV overlay (приоритетнее файла)
    env_overlay = {
        "lua_executable": os.getenv("LUAPATH_LUA") or merged["lua_executable"],
        "log_level": os.getenv("LUAPATH_LOG_LEVEL") or merged["log_level"],
    }
    merged.update(env_overlay)
    return merged


def save_config(cfg: dict[str, Any]) -> None:
    ensure_config_dir()
    CONFIG_PATH.write_text(json.dumps(cfg, ensure_ascii=False, indent=2), encoding="utf-8")


def get_lua_executable() -> str:
    return load_config().get("lua_executable") or DEFAULTS["lua_executable"]
