import importlib
import sys
from pathlib import Path
from typing import Callable, List

import pytest

from cfgseq.handlers import HandlerResolver
from cfgseq.handlers import registry as handler_registry

from tests.infrastructure import write_module


@pytest.fixture
def resolver() -> HandlerResolver:
    """Isolated resolver: registrations never leak between tests."""
    return HandlerResolver()


@pytest.fixture
def default_resolver(monkeypatch) -> HandlerResolver:
    """Swap the process-wide resolver for a fresh one."""
    fresh = HandlerResolver()
    monkeypatch.setattr(handler_registry, "_DEFAULT", fresh)
    return fresh


@pytest.fixture
def handler_module(tmp_path: Path, monkeypatch) -> Callable[[str, str], str]:
    """
    Factory writing an importable handler module under tmp_path.

    Returns the dotted module name. Everything imported from those
    modules is dropped from sys.modules at teardown.
    """
    monkeypatch.syspath_prepend(str(tmp_path))
    tops: List[str] = []

    def make(dotted: str, source: str) -> str:
        write_module(tmp_path, dotted, source)
        importlib.invalidate_caches()
        tops.append(dotted.split(".")[0])
        return dotted

    yield make

    for mod in list(sys.modules):
        if any(mod == top or mod.startswith(top + ".") for top in tops):
            del sys.modules[mod]
