# luapath/report.py
from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import TextIO

from luapath.models import RuntimeMode, SearchPaths
from luapath.search import split_path_list, substitute_folder

logger = logging.getLogger(__name__)

REPORT_FILES = {
    RuntimeMode.EMBEDDED: "test_luapath_quik.txt",
    RuntimeMode.STANDALONE: "test_luapath_lua.txt",
}

RUNTIME_TAGS = {
    RuntimeMode.EMBEDDED: "QUIK",
    RuntimeMode.STANDALONE: "LUA",
}


def report_filename(mode: RuntimeMode) -> str:
    return REPORT_FILES[mode]


def runtime_tag(mode: RuntimeMode) -> str:
    return RUNTIME_TAGS[mode]


def report_path(script_path: str, mode: RuntimeMode) -> Path:
    return Path(script_path) / report_filename(mode)


def _write_path_section(fh: TextIO, label: str, value: str) -> None:
    fh.write(f"{label}\n")
    fh.write(value)
    fh.write("\n\n")
    for segment in split_path_list(value):
        fh.write(segment)
        fh.write("\n")


def write_report(
    filepath: str | os.PathLike[str],
    *,
    mode: RuntimeMode,
    working_folder: str,
    script_path: str,
    cwd: str,
    search_paths: SearchPaths,
) -> Path:
    """
    Пишет отчёт: три папки, затем package.path и package.cpath.

    Вхождения рабочей папки в путях заменяются на QUIK/LUA. Ошибка открытия
    файла не перехватывается.
    """
    tag = runtime_tag(mode)
    path = substitute_folder(search_paths.path, working_folder, tag)
    cpath = substitute_folder(search_paths.cpath, working_folder, tag)

    target = Path(filepath)
    with open(target, "w", encoding="utf-8", newline="\n") as fh:
        fh.write("getWorkingFolder\n")
        fh.write(working_folder + "\n")
        fh.write("getScriptPath\n")
        fh.write(script_path + "\n")
        fh.write("cwd\n")
        fh.write(cwd + "\n")
        fh.write("\n")

        _write_path_section(fh, "package.path", path)
        fh.write("\n\n")

        _write_path_section(fh, "package.cpath", cpath)
        fh.write("\n")

    logger.info("report written: %s", target)
    return target
