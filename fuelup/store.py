"""The store holding every downloaded component version."""

from __future__ import annotations

import os
from pathlib import Path

from semver import Version

from fuelup.paths import ensure_dir_exists, store_dir

FUELS_VERSION_FILE = "fuels_version"


def component_dirname(component_name: str, version: Version | str) -> str:
    return f"{component_name}-{version}"


class Store:
    """Components live in ``<store>/<name>-<version>``, e.g. ``fuel-core-0.15.1``."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.path = Path(path)

    @classmethod
    def from_env(cls) -> Store:
        path = store_dir()
        ensure_dir_exists(path)
        return cls(path)

    def has_component(self, component_name: str, version: Version | str) -> bool:
        return self.component_dir_path(component_name, version).exists()

    def component_dir_path(self, component_name: str, version: Version | str) -> Path:
        return self.path / component_dirname(component_name, version)

    def get_cached_fuels_version(self, name: str, version: Version | str) -> str:
        """Read the cached fuels version for a component; raises OSError if absent."""
        cached = self.component_dir_path(name, version) / FUELS_VERSION_FILE
        return cached.read_text(encoding="utf-8")