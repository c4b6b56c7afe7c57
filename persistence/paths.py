from __future__ import annotations

from pathlib import Path

from settings import DEFAULT_DATA_FILE_PATH


def resolve_data_file(raw: str | Path | None = None) -> Path:
    # Relative paths are taken from the working directory the server was started in.
    path = Path(raw or DEFAULT_DATA_FILE_PATH).expanduser()
    if not path.is_absolute():
        path = Path.cwd() / path
    return path
