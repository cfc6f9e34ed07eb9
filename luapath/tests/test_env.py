from luapath import env
from luapath.env import build_bindings, detect_mode
from luapath.models import RuntimeMode, SearchPaths


def test_detect_mode_embedded_when_message_bound():
    assert detect_mode({"message": lambda s: None}) is RuntimeMode.EMBEDDED


def test_detect_mode_standalone_when_absent_or_none():
    assert detect_mode({}) is RuntimeMode.STANDALONE
    assert detect_mode({"message": None}) is RuntimeMode.STANDALONE


def test_detect_mode_default_namespace_is_builtins():
    # под pytest никакой хост message не подкладывает
    assert detect_mode() is RuntimeMode.STANDALONE


def test_build_bindings_prefers_host_globals():
    seen = []
    ns = {
        "message": seen.append,
        "getWorkingFolder": lambda: "C:\\QUIK",
        "getScriptPath": lambda: "C:\\QUIK\\scripts",
        "package": {"path": "C:\\QUIK\\lua\\?.lua", "cpath": "C:\\QUIK\\?.dll"},
    }
    b = build_bindings(ns)
    assert b.mode is RuntimeMode.EMBEDDED
    b.log("hi")
    assert seen == ["hi"]
    assert b.working_folder() == "C:\\QUIK"
    assert b.script_path() == "C:\\QUIK\\scripts"
    assert b.search_paths() == SearchPaths("C:\\QUIK\\lua\\?.lua", "C:\\QUIK\\?.dll")


def test_build_bindings_standalone_defaults(monkeypatch):
    monkeypatch.setattr(env, "current_working_directory", lambda: "/proj")
    monkeypatch.setattr(env, "script_directory", lambda: "/proj/scripts")
    asked = []

    def fake_query(exe):
        asked.append(exe)
        return SearchPaths("/proj/?.lua", "/proj/?.so")

    monkeypatch.setattr(env, "query_interpreter", fake_query)

    b = build_bindings({}, lua_executable="lua5.4")
    assert b.mode is RuntimeMode.STANDALONE
    assert b.working_folder() == "/proj"
    assert b.script_path() == "/proj/scripts"
    assert b.search_paths() == SearchPaths("/proj/?.lua", "/proj/?.so")
    assert asked == ["lua5.4"]


def test_build_bindings_embedded_without_working_folder_uses_launcher(monkeypatch):
    monkeypatch.setattr(env, "current_working_directory", lambda: "/srv")
    b = build_bindings({"message": print}, launcher="quik/info.exe")
    assert b.working_folder().replace("\\", "/") == "/srv/quik"
