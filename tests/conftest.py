from __future__ import annotations

from pathlib import Path
import sys


import pytest


# Ensure the repository root (parent of ./tests) is importable during pytest collection.
# This avoids ModuleNotFoundError for imports like `import persistence...` under pytest import modes
# that don't automatically prepend the cwd/rootdir to sys.path.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))


VALID_PAYLOAD = {
    "name": "A",
    "description": "d",
    "area": "a",
    "city": "c",
    "image": "i",
}


@pytest.fixture
def valid_payload() -> dict:
    return dict(VALID_PAYLOAD)


@pytest.fixture
def data_file(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    """
    Point DATA_FILE_PATH at a temp document so tests never touch a real ./data/restaurants.json.
    """
    path = tmp_path / "data" / "restaurants.json"
    monkeypatch.setenv("DATA_FILE_PATH", str(path))
    monkeypatch.delenv("RESTAURANT_ID_STRATEGY", raising=False)
    monkeypatch.delenv("DEBUG_LOG_REQUESTS", raising=False)
    return path


@pytest.fixture
def client(data_file: Path):
    from fastapi.testclient import TestClient

    import app as app_module

    return TestClient(app_module.create_app())
