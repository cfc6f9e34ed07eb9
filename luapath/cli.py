from __future__ import annotations

import json
import logging
from typing import Annotated

import typer

from luapath.audit import autorun
from luapath.config import get_lua_executable, load_config, save_config
from luapath.diag import runtime_snapshot
from luapath.env import build_bindings
from luapath.logs import is_known_level, setup_logging
from luapath.models import HostBindings
from luapath.paths import ShellError
from luapath.report import runtime_tag
from luapath.search import InterpreterError, split_path_list, substitute_folder

logger = logging.getLogger(__name__)

app = typer.Typer(add_completion=False, help="Аудит package.path/package.cpath: QUIK vs. консольный lua")

OPT_LUA = typer.Option(None, "--lua", help="Путь к lua-интерпретатору (по умолчанию из конфига)")
OPT_LOG_LEVEL = typer.Option(None, "--log-level", help="Уровень логирования: DEBUG, INFO, WARNING, ERROR")


@app.callback()
def _init() -> None:
    setup_logging(load_config().get("log_level"))


def _bindings(lua: str | None) -> HostBindings:
    return build_bindings(lua_executable=lua or get_lua_executable())


def _fail(err: Exception) -> typer.Exit:
    logger.error("%s", err)
    typer.secho(f"Ошибка: {err}", fg=typer.colors.RED)
    return typer.Exit(1)


@app.command("report")
def cmd_report(lua: str | None = OPT_LUA) -> None:
    """
    Записать test_luapath_*.txt рядом со скриптом (папка __main__).

    Для установленной команды это папка bin/ окружения, для `python -m luapath`
    — site-packages/luapath; при нехватке прав запись упадёт с ошибкой.
    Внутри QUIK (задан message) отчёт не пишется: main() вызывает сам терминал.
    """
    try:
        path = autorun(lua_executable=lua or get_lua_executable())
    except (ShellError, InterpreterError, OSError) as err:
        raise _fail(err) from err
    if path is None:
        typer.secho("Обнаружен QUIK: main() вызывается терминалом, отчёт не записан.", fg=typer.colors.YELLOW)
        return
    typer.secho(f"Отчёт: {path}", fg=typer.colors.GREEN)


@app.command("show")
def cmd_show(lua: str | None = OPT_LUA) -> None:
    """Показать пути поиска модулей построчно, без записи файла."""
    try:
        b = _bindings(lua)
        search = b.search_paths()
        wf = b.working_folder()
    except (ShellError, InterpreterError) as err:
        raise _fail(err) from err

    tag = runtime_tag(b.mode)
    for label, value in (("package.path", search.path), ("package.cpath", search.cpath)):
        typer.secho(label, fg=typer.colors.BLUE)
        for segment in split_path_list(substitute_folder(value, wf, tag)):
            typer.echo(segment)


@app.command("snapshot")
def cmd_snapshot(lua: str | None = OPT_LUA) -> None:
    """Снимок окружения в JSON."""
    try:
        data = runtime_snapshot(_bindings(lua))
    except (ShellError, InterpreterError) as err:
        raise _fail(err) from err
    typer.echo(json.dumps(data, ensure_ascii=False, indent=2))


@app.command("config")
def configure(
    lua_executable: Annotated[str | None, typer.Option(help="lua-интерпретатор")] = None,
    log_level: str | None = OPT_LOG_LEVEL,
) -> None:
    cfg = load_config()
    if lua_executable:
        cfg["lua_executable"] = lua_executable
    if log_level:
        if not is_known_level(log_level):
            typer.secho(f"Неизвестный уровень логирования: {log_level}", fg=typer.colors.RED)
            raise typer.Exit(2)
        cfg["log_level"] = log_level.upper()
    save_config(cfg)
    typer.echo("Конфиг сохранён.")


# -------------------- Entry --------------------


def run():
    app()


if __name__ == "__main__":
    run()
