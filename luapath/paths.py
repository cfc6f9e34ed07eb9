# luapath/paths.py
from __future__ import annotations

import logging
import os
import subprocess
import sys
from pathlib import Path

from luapath.models import RuntimeMode

logger = logging.getLogger(__name__)

# `cd` без аргументов печатает текущую папку только в cmd.exe
CWD_COMMAND = "cd" if os.name == "nt" else "pwd"


class ShellError(RuntimeError):
    """Не удалось получить текущую папку через shell."""


def current_working_directory() -> str:
    """
    Текущая папка процесса со слов shell (`cd` / `pwd`).

    Окно консоли на Windows создаётся с CREATE_NO_WINDOW, иначе оно мигает.
    """
    flags = getattr(subprocess, "CREATE_NO_WINDOW", 0)
    try:
        with subprocess.Popen(
            CWD_COMMAND,
            shell=True,
            stdout=subprocess.PIPE,
            stderr=subprocess.DEVNULL,
            text=True,
            creationflags=flags,
        ) as proc:
            line = proc.stdout.readline() if proc.stdout else ""
    except OSError as err:
        raise ShellError(f"cannot spawn {CWD_COMMAND!r}: {err}") from err

    line = line.rstrip("\r\n")
    if not line:
        raise ShellError(f"{CWD_COMMAND!r} printed nothing")
    logger.debug("cwd via %s: %s", CWD_COMMAND, line)
    return line


def directory_of(path: str) -> str:
    """Всё до последнего `/` или `\\`; без разделителя — пустая строка."""
    cut = max(path.rfind("/"), path.rfind("\\"))
    if cut < 0:
        return ""
    return path[:cut]


def default_launcher() -> str:
    """Интерпретатор так, как его набрали в командной строке (аналог arg[-1])."""
    orig = getattr(sys, "orig_argv", None)
    if orig:
        return orig[0]
    return sys.executable


def working_folder(mode: RuntimeMode, cwd: str, launcher: str | None = None) -> str:
    """STANDALONE: cwd. EMBEDDED: cwd + папка лаунчера (по умолчанию интерпретатор как его вызвали)."""
    if mode is RuntimeMode.STANDALONE:
        return cwd
    launcher = launcher if launcher is not None else default_launcher()
    folder = directory_of(launcher)
    if not folder:
        return cwd
    return os.path.join(cwd, folder)


def script_directory(main_file: str | os.PathLike[str] | None = None) -> str:
    """Папка запущенной программы: __main__.__file__, затем argv[0]."""
    if main_file is None:
        if getattr(sys, "frozen", False):
            main_file = sys.executable
        else:
            main_mod = sys.modules.get("__main__")
            main_file = getattr(main_mod, "__file__", None) or (sys.argv[0] if sys.argv else "")
    if not main_file:
        return os.getcwd()
    return directory_of(str(Path(main_file).resolve()))
