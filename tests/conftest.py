"""
Pytest configuration and shared fixtures for all test types.

Settings:
- DJANGO_SETTINGS_MODULE=backend.settings.unittest (SQLite :memory:), set in
  pyproject.toml for pytest-django and defaulted here for direct imports.

Layout:
- tests/unit: matchers driven by in-memory fakes from tests/tools/fakes.py
- tests/integration: matchers driven by the apps.catalog models, forms and URLconf
- tests/property: hypothesis sweeps over generated ranges and arrays
"""

import os
import sys
import pathlib
import pytest

# Ensure code/ is importable
_REPO_ROOT = pathlib.Path(__file__).resolve().parent.parent
_CODE_DIR = _REPO_ROOT / "code"
if str(_CODE_DIR) not in sys.path:
    sys.path.insert(0, str(_CODE_DIR))

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "backend.settings.unittest")


# ============================================================================
# Auto-apply markers based on folder structure
# ============================================================================
FOLDER_MARKS = [
    (("tests", "unit"), ("unit",)),
    (("tests", "integration"), ("integration",)),
    (("tests", "property"), ("property",)),
]


def _under(path_posix: str, *segments: str) -> bool:
    return f"/{'/'.join(segments)}/" in path_posix


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Auto-apply markers from FOLDER_MARKS."""
    for item in items:
        p = pathlib.Path(str(item.fspath)).as_posix()
        for segs, marks in FOLDER_MARKS:
            if _under(p, *segs):
                for m in marks:
                    item.add_marker(getattr(pytest.mark, m))


# ============================================================================
# Global environment setup
# ============================================================================
@pytest.fixture(autouse=True)
def _stable_env(monkeypatch: pytest.MonkeyPatch):
    """Set stable environment for all tests."""
    monkeypatch.setenv("TZ", "UTC")
    monkeypatch.setenv("PYTHONUNBUFFERED", "1")
    # keep probe debug logs quiet unless a test opts in
    monkeypatch.delenv("LOG_SAMPLE_DEBUG", raising=False)
    yield


@pytest.fixture
def debug_logs(monkeypatch: pytest.MonkeyPatch):
    """Emit every debug event as JSON on stderr; pair with capsys."""
    monkeypatch.setenv("LOG_SAMPLE_DEBUG", "1")
    monkeypatch.setenv("JSON_LOGS", "1")
    monkeypatch.setenv("LOG_STREAM", "stderr")
    yield
