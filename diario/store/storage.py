"""Key-value storage facilities for the persisted snapshot."""

import os
import tempfile
from pathlib import Path
from typing import Protocol


def get_xdg_data_home() -> Path:
    """Get XDG data directory, with fallback to ~/.local/share."""
    xdg_data = os.environ.get("XDG_DATA_HOME")
    if xdg_data:
        return Path(xdg_data)
    return Path.home() / ".local" / "share"


def get_data_dir() -> Path:
    """Get the default data directory (XDG compliant)."""
    return get_xdg_data_home() / "diario"


class KeyValueStorage(Protocol):
    """Minimal string key-value facility."""

    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...


class MemoryStorage:
    """In-process storage, for tests and dry runs."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self.values: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self.values.get(key)

    def set(self, key: str, value: str) -> None:
        self.values[key] = value


class FileStorage:
    """Storage keeping each key in its own file, <directory>/<key>.json.

    Writes go to a temporary file that is then moved into place, so a
    snapshot on disk is always complete.
    """

    def __init__(self, directory: Path) -> None:
        self.directory = directory

    def path_for(self, key: str) -> Path:
        return self.directory / f"{key}.json"

    def get(self, key: str) -> str | None:
        """Read the value stored under key.

        Raises:
            OSError: If the file exists but cannot be read.
        """
        path = self.path_for(key)
        if not path.exists():
            return None
        return path.read_text(encoding="utf-8")

    def set(self, key: str, value: str) -> None:
        """Replace the value stored under key.

        Raises:
            OSError: If the directory or file cannot be written.
        """
        self.directory.mkdir(parents=True, exist_ok=True)
        path = self.path_for(key)

        fd, tmp_name = tempfile.mkstemp(dir=self.directory, prefix=f".{key}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(value)
            os.replace(tmp_name, path)
        except OSError:
            Path(tmp_name).unlink(missing_ok=True)
            raise
