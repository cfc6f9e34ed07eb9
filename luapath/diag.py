import json
import platform
import sys

from luapath.env import build_bindings
from luapath.models import HostBindings
from luapath.paths import current_working_directory
from luapath.report import report_filename, runtime_tag
from luapath.search import split_path_list, substitute_folder


def runtime_snapshot(bindings: HostBindings) -> dict:
    search = bindings.search_paths()
    wf = bindings.working_folder()
    tag = runtime_tag(bindings.mode)
    return {
        "mode": bindings.mode.value,
        "python": sys.version.split()[0],
        "platform": platform.platform(),
        "working_folder": wf,
        "script_path": bindings.script_path(),
        "cwd": current_working_directory(),
        "report_file": report_filename(bindings.mode),
        "package_path": split_path_list(substitute_folder(search.path, wf, tag)),
        "package_cpath": split_path_list(substitute_folder(search.cpath, wf, tag)),
    }


if __name__ == "__main__":
    print(json.dumps(runtime_snapshot(build_bindings()), indent=2, ensure_ascii=False))
