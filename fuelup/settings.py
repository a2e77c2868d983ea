"""The user's fuelup settings file."""

from __future__ import annotations

import os
import tomllib
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import asdict, dataclass, replace
from pathlib import Path

import tomli_w


@dataclass
class Settings:
    """Contents of ``settings.toml``."""

    default_toolchain: str | None = None

    @classmethod
    def parse(cls, text: str) -> Settings:
        data = tomllib.loads(text)
        default = data.get("default_toolchain")
        if default is not None and not isinstance(default, str):
            raise ValueError(
                f"invalid type for default_toolchain: expected a string, "
                f"got {type(default).__name__}"
            )
        return cls(default_toolchain=default)

    def dumps(self) -> str:
        return tomli_w.dumps({k: v for k, v in asdict(self).items() if v is not None})


class SettingsFile:
    """A settings file on disk, loaded lazily and created with defaults if absent."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.path = Path(path)
        self._cache: Settings | None = None

    def _load(self) -> Settings:
        if self._cache is None:
            if self.path.is_file():
                self._cache = Settings.parse(self.path.read_text(encoding="utf-8"))
            else:
                self._cache = Settings()
                self._save()
        return self._cache

    def _save(self) -> None:
        assert self._cache is not None
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(self._cache.dumps(), encoding="utf-8")

    def read(self) -> Settings:
        """Return a copy of the current settings."""
        return replace(self._load())

    @contextmanager
    def edit(self) -> Iterator[Settings]:
        """Yield settings to change; they are saved when the block ends without error."""
        settings = replace(self._load())
        yield settings
        self._cache = settings
        self._save()