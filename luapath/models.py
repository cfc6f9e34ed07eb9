from __future__ import annotations

import enum
from collections.abc import Callable
from dataclasses import dataclass


class RuntimeMode(enum.Enum):
    EMBEDDED = "embedded"  # внутри QUIK
    STANDALONE = "standalone"  # голый lua


@dataclass(frozen=True)
class SearchPaths:
    path: str  # package.path
    cpath: str  # package.cpath


@dataclass(frozen=True)
class HostBindings:
    mode: RuntimeMode
    log: Callable[[str], None]
    working_folder: Callable[[], str]
    script_path: Callable[[], str]
    search_paths: Callable[[], SearchPaths]
