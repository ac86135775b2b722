"""Pytest conftest for daylog tests.

Responsibilities:
- Put the project root on sys.path so `daylog` and `config` import without installing.
- Load `config/.env` into os.environ for test runs (without overwriting existing env vars).
- Reset process-wide logger state between tests.
- Provide minimal, tidy CLI messages when tests start so test output is self-descriptive.
"""
from __future__ import annotations

import inspect
import sys
from pathlib import Path
import pytest
from datetime import datetime
from typing import Dict

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from dotenv import load_dotenv  # noqa: E402

from daylog.logger import Logger  # noqa: E402


# load config/.env right away; existing environment variables win
load_dotenv(PROJECT_ROOT / "config" / ".env", override=False)


@pytest.fixture(autouse=True)
def _reset_date_format():
    """Restore the process-wide timestamp format after every test."""
    yield
    Logger.reset_date_format()


@pytest.fixture
def log_env(monkeypatch):
    """Clear LOG_* variables so AppConfig defaults are observable."""
    for key in ("LOG_DIRECTORY", "LOG_SEVERITY", "LOG_DATE_FORMAT"):
        monkeypatch.delenv(key, raising=False)
    return monkeypatch


# nodeid -> position, so banners can show "N of M"
_ITEM_INDEX: Dict[str, int] = {}
_TOTAL_ITEMS: int = 0


def _color(text: str, code: str) -> str:
    return f"\x1b[{code}m{text}\x1b[0m"


def pytest_collection_modifyitems(session, config, items):
    global _TOTAL_ITEMS
    _TOTAL_ITEMS = len(items)
    for idx, item in enumerate(items, start=1):
        _ITEM_INDEX[item.nodeid] = idx


def pytest_runtest_setup(item):
    """Print `RUN [n/M] test_name  timestamp` and the docstring's first line."""
    idx = _ITEM_INDEX.get(item.nodeid, "?")
    ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    print(f"{_color('RUN', '36')} [{idx}/{_TOTAL_ITEMS or '?'}] {item.name}  {ts}", flush=True)

    func = getattr(item, "obj", None)
    doc = inspect.getdoc(func) if func is not None else None
    if doc:
        print(f"{_color('What it does:', '33')} {doc.splitlines()[0]}", flush=True)


def pytest_runtest_logreport(report):
    """Print a colored outcome line after the call phase."""
    if report.when != "call":
        return
    outcome = report.outcome.upper()
    col = {"PASSED": "32", "FAILED": "31"}.get(outcome, "33")
    print(f"{_color(outcome, col)} ({report.duration:.2f}s)", flush=True)
    print(flush=True)
