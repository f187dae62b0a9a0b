from __future__ import annotations

import io
import sys
from pathlib import Path

import pytest

ENV_VARS = (
    "LINEBASIC_MAX_STEPS",
    "LINEBASIC_DUMP",
    "LINEBASIC_LOG_LEVEL",
    "LINEBASIC_STRICT_LINES",
)


def pytest_configure() -> None:
    project_root = Path(__file__).resolve().parents[1]
    sys.path.insert(0, str(project_root))


@pytest.fixture
def out() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> pytest.MonkeyPatch:
    # setenv first so the variables are removed again on teardown even if a
    # test loads them from a .env file
    for name in ENV_VARS:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
    return monkeypatch
