# luapath/search.py
from __future__ import annotations

import logging
import re
import subprocess
from collections.abc import Mapping
from typing import Any

from luapath.models import SearchPaths

logger = logging.getLogger(__name__)

_NON_ALNUM = re.compile(r"([^0-9A-Za-z])")

# печатаем обе строки одним вызовом, чтобы не зависеть от print/tostring
LUA_PROBE = 'io.write(package.path, "\\n", package.cpath, "\\n")'


class InterpreterError(RuntimeError):
    """Не удалось опросить lua-интерпретатор."""


def escape_literal(text: str) -> str:
    """Экранирует всё, кроме [0-9A-Za-z], чтобы строка совпадала буквально."""
    return _NON_ALNUM.sub(r"\\\1", text)


def substitute_folder(text: str, folder: str, tag: str) -> str:
    """Заменяет каждое вхождение `folder` в `text` на `tag`."""
    if not folder:
        return text
    return re.sub(escape_literal(folder), lambda _m: tag, text)


def split_path_list(text: str) -> list[str]:
    return [seg for seg in text.split(";") if seg]


def query_interpreter(lua_executable: str = "lua") -> SearchPaths:
    try:
        proc = subprocess.run(
            [lua_executable, "-e", LUA_PROBE],
            capture_output=True,
            text=True,
            check=True,
        )
    except FileNotFoundError as err:
        raise InterpreterError(f"lua interpreter not found: {lua_executable}") from err
    except subprocess.CalledProcessError as err:
        raise InterpreterError(
            f"{lua_executable} exited with {err.returncode}: {(err.stderr or '').strip()}"
        ) from err
    except OSError as err:
        raise InterpreterError(f"cannot run {lua_executable}: {err}") from err

    lines = proc.stdout.splitlines()
    if len(lines) < 2:
        raise InterpreterError(f"unexpected output from {lua_executable}: {proc.stdout!r}")
    logger.debug("search paths from %s: path=%s cpath=%s", lua_executable, lines[0], lines[1])
    return SearchPaths(path=lines[0], cpath=lines[1])


def from_package(package: Any) -> SearchPaths:
    """Берёт path/cpath из хостового `package` (таблица-объект или dict)."""
    if isinstance(package, Mapping):
        return SearchPaths(path=str(package["path"]), cpath=str(package["cpath"]))
    return SearchPaths(path=str(package.path), cpath=str(package.cpath))
