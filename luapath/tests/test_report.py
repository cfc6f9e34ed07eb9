from pathlib import Path

import pytest

from luapath.models import RuntimeMode, SearchPaths
from luapath.report import report_filename, report_path, runtime_tag, write_report


def test_filenames_are_distinct_per_mode():
    assert report_filename(RuntimeMode.EMBEDDED) == "test_luapath_quik.txt"
    assert report_filename(RuntimeMode.STANDALONE) == "test_luapath_lua.txt"
    assert runtime_tag(RuntimeMode.EMBEDDED) == "QUIK"
    assert runtime_tag(RuntimeMode.STANDALONE) == "LUA"


def test_report_path_joins_script_dir(tmp_path: Path):
    assert report_path(str(tmp_path), RuntimeMode.STANDALONE) == tmp_path / "test_luapath_lua.txt"


def test_write_report_standalone_layout(tmp_path: Path):
    out = write_report(
        tmp_path / "test_luapath_lua.txt",
        mode=RuntimeMode.STANDALONE,
        working_folder="/proj",
        script_path="/proj/scripts",
        cwd="/proj",
        search_paths=SearchPaths(path="/proj/?.lua;/proj/?/init.lua", cpath="/proj/?.so;;"),
    )
    assert out.read_text(encoding="utf-8") == (
        "getWorkingFolder\n/proj\n"
        "getScriptPath\n/proj/scripts\n"
        "cwd\n/proj\n"
        "\n"
        "package.path\n"
        "LUA/?.lua;LUA/?/init.lua\n"
        "\n"
        "LUA/?.lua\n"
        "LUA/?/init.lua\n"
        "\n\n"
        "package.cpath\n"
        "LUA/?.so;;\n"
        "\n"
        "LUA/?.so\n"
        "\n"
    )


def test_write_report_embedded_replaces_windows_folder(tmp_path: Path):
    out = write_report(
        tmp_path / report_filename(RuntimeMode.EMBEDDED),
        mode=RuntimeMode.EMBEDDED,
        working_folder="C:\\QUIK (x64)",
        script_path="C:\\QUIK (x64)\\scripts",
        cwd="C:\\QUIK (x64)",
        search_paths=SearchPaths(
            path="C:\\QUIK (x64)\\lua\\?.lua;.\\?.lua",
            cpath="C:\\QUIK (x64)\\?.dll",
        ),
    )
    text = out.read_text(encoding="utf-8")
    assert "QUIK\\lua\\?.lua;.\\?.lua\n" in text
    assert "\nQUIK\\?.dll\n" in text
    body = text.split("package.path\n", 1)[1]
    assert "C:\\QUIK (x64)" not in body


def test_write_report_open_failure_propagates(tmp_path: Path):
    with pytest.raises(OSError):
        write_report(
            tmp_path / "missing" / "test_luapath_lua.txt",
            mode=RuntimeMode.STANDALONE,
            working_folder="/proj",
            script_path="/proj",
            cwd="/proj",
            search_paths=SearchPaths("", ""),
        )
