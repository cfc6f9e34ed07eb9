# luapath/audit.py
from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from luapath.env import build_bindings
from luapath.models import HostBindings, RuntimeMode
from luapath.paths import current_working_directory
from luapath.report import report_path, write_report

logger = logging.getLogger(__name__)


def _q(value: str) -> str:
    return json.dumps(value, ensure_ascii=False)


def main(bindings: HostBindings | None = None) -> Path:
    """
    Точка входа. В QUIK вызывается самим терминалом; из консоли её запускает
    autorun() (`luapath report` или `python -m luapath.audit`).

    Все папки вычисляются до открытия файла: если shell упал, файла не будет.
    """
    b = bindings or build_bindings()
    search = b.search_paths()

    b.log("test_luapath")
    b.log(search.path)
    b.log(search.cpath)

    wf = b.working_folder()
    sp = b.script_path()
    cwd = current_working_directory()

    b.log(f"getWorkingFolder: {_q(wf)}")
    b.log(f"getScriptPath: {_q(sp)}")
    b.log(f"cwd: {_q(cwd)}")

    filepath = report_path(sp, b.mode)
    b.log(f"file: {_q(str(filepath))}")

    return write_report(
        filepath,
        mode=b.mode,
        working_folder=wf,
        script_path=sp,
        cwd=cwd,
        search_paths=search,
    )


def autorun(namespace: Mapping[str, Any] | None = None, **kwargs: Any) -> Path | None:
    b = build_bindings(namespace, **kwargs)
    if b.mode is RuntimeMode.EMBEDDED:
        logger.info("embedded host detected, waiting for host to call main()")
        return None
    return main(b)


if __name__ == "__main__":
    autorun()
