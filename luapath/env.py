# luapath/env.py
from __future__ import annotations

import builtins
import logging
from collections.abc import Callable, Mapping
from functools import partial
from typing import Any

import typer

from luapath.models import HostBindings, RuntimeMode, SearchPaths
from luapath.paths import current_working_directory, script_directory, working_folder
from luapath.search import from_package, query_interpreter

logger = logging.getLogger(__name__)

# то, что QUIK кладёт в глобальное окружение скрипта
HOST_MESSAGE = "message"
HOST_WORKING_FOLDER = "getWorkingFolder"
HOST_SCRIPT_PATH = "getScriptPath"
HOST_PACKAGE = "package"


def _host_namespace(namespace: Mapping[str, Any] | None) -> Mapping[str, Any]:
    return vars(builtins) if namespace is None else namespace


def detect_mode(namespace: Mapping[str, Any] | None = None) -> RuntimeMode:
    ns = _host_namespace(namespace)
    if ns.get(HOST_MESSAGE) is not None:
        return RuntimeMode.EMBEDDED
    return RuntimeMode.STANDALONE


def build_bindings(
    namespace: Mapping[str, Any] | None = None,
    *,
    lua_executable: str = "lua",
    launcher: str | None = None,
) -> HostBindings:
    """
    Собирает HostBindings один раз при старте.

    Всё, что хост уже положил в namespace, берётся как есть; остальное
    подменяется локальными реализациями.
    """
    ns = _host_namespace(namespace)
    mode = detect_mode(ns)

    log: Callable[[str], None] = ns.get(HOST_MESSAGE) or typer.echo

    wf: Callable[[], str] = ns.get(HOST_WORKING_FOLDER) or (
        lambda: working_folder(mode, current_working_directory(), launcher)
    )

    sp: Callable[[], str] | None = ns.get(HOST_SCRIPT_PATH)
    if sp is None:
        resolved = script_directory()
        sp = lambda: resolved  # noqa: E731

    package = ns.get(HOST_PACKAGE)
    search: Callable[[], SearchPaths]
    if package is not None:
        search = partial(from_package, package)
    else:
        search = partial(query_interpreter, lua_executable)

    logger.info("runtime mode: %s", mode.value)
    return HostBindings(
        mode=mode,
        log=log,
        working_folder=wf,
        script_path=sp,
        search_paths=search,
    )
