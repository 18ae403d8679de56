# ruff: noqa: E402

import builtins
import sys
from pathlib import Path

import pytest
from _pytest.doctest import DoctestModule

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

import superspec.io as io
import superspec.log as superspec_log

DOCTEST_MODULES = {
    ROOT / "src" / "superspec" / "__init__.py",
    ROOT / "src" / "superspec" / "config.py",
    ROOT / "src" / "superspec" / "models.py",
    ROOT / "src" / "superspec" / "paths.py",
}


@pytest.fixture(autouse=True)
def _default_io_patches(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(io, "_use_questionary", lambda: False)
    monkeypatch.setattr(superspec_log, "_configured_level", None)
    monkeypatch.setattr(superspec_log, "_no_color_override", None)
    monkeypatch.delenv("SUPERSPEC_LOG_LEVEL", raising=False)

    def fail_input(prompt: str = "") -> str:
        raise AssertionError("prompted unexpectedly")

    monkeypatch.setattr(builtins, "input", fail_input)


def pytest_collect_file(
    parent: pytest.Collector, file_path: Path
) -> DoctestModule | None:
    path = file_path if isinstance(file_path, Path) else Path(str(file_path))
    if path in DOCTEST_MODULES:
        return DoctestModule.from_parent(parent, path=path)
    return None
