# luapath/logs.py
from __future__ import annotations

import logging
import logging.handlers
import os
from pathlib import Path

DEFAULT_LOG_DIR = Path(os.path.expanduser("~")) / ".luapath"
DEFAULT_LOG_FILE = DEFAULT_LOG_DIR / "luapath.log"
DEFAULT_LEVEL = os.environ.get("LUAPATH_LOG_LEVEL", "INFO").upper()
FALLBACK_LEVEL = "INFO"


def is_known_level(name: str) -> bool:
    return isinstance(logging.getLevelName(name.upper()), int)


def setup_logging(
    level: str | None = None, file_path: str | os.PathLike[str] | None = None
) -> Path:
    """
    Журнал аудита путей: подробности (режим, ответы lua, куда лёг отчёт)
    идут в файл, stdout остаётся под сам отчёт и сообщения message().
      - файл: ротация по 1 МБ, хранит 5 штук
      - консоль (stderr): только WARNING и выше
    Уровень — аргумент, иначе LUAPATH_LOG_LEVEL; неизвестное имя уровня
    заменяется на INFO, чтобы испорченный конфиг не ломал запуск.
    Путь — LUAPATH_LOG_FILE (по умолчанию ~/.luapath/luapath.log).
    """
    log_level = (level or DEFAULT_LEVEL).upper()
    bad_level = None
    if not is_known_level(log_level):
        bad_level, log_level = log_level, FALLBACK_LEVEL
    log_file = Path(file_path or os.environ.get("LUAPATH_LOG_FILE", DEFAULT_LOG_FILE))
    log_file.parent.mkdir(parents=True, exist_ok=True)

    root = logging.getLogger()
    if getattr(root, "_luapath_configured", False):
        return log_file

    root.setLevel(log_level)

    fmt = logging.Formatter(
        fmt="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    fh = logging.handlers.RotatingFileHandler(
        log_file, maxBytes=1_000_000, backupCount=5, encoding="utf-8"
    )
    fh.setFormatter(fmt)
    fh.setLevel(log_level)
    root.addHandler(fh)

    ch = logging.StreamHandler()
    ch.setFormatter(fmt)
    # stdout занят отчётом
    ch.setLevel(max(logging.getLevelName(log_level), logging.WARNING))
    root.addHandler(ch)

    root._luapath_configured = True  # type: ignore[attr-defined]
    logging.getLogger(__name__).info("Logging initialized at %s, file=%s", log_level, log_file)
    if bad_level:
        logging.getLogger(__name__).warning("Unknown log level %r, using %s", bad_level, log_level)
    return log_file
