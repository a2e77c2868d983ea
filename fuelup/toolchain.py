"""Installed toolchains under the fuelup home directory."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from fuelup.paths import settings_file, toolchain_bin_dir, toolchain_dir, toolchains_dir
from fuelup.settings import SettingsFile
from fuelup.target_triple import TargetTriple

LATEST = "latest"
NIGHTLY = "nightly"
TESTNET = "testnet"
MAINNET = "mainnet"
STABLE = "stable"
IGNITION = "ignition"

# Stable and ignition are reserved, although currently unused.
RESERVED_TOOLCHAIN_NAMES = (LATEST, NIGHTLY, TESTNET, MAINNET, STABLE, IGNITION)

_NO_DEFAULT_MESSAGE = (
    "No default toolchain detected. Please install or create a toolchain first."
)


@dataclass
class Toolchain:
    """A toolchain directory and the directory of its executables."""

    name: str
    path: Path
    bin_path: Path

    @classmethod
    def new(cls, name: str) -> Toolchain:
        """Return the toolchain ``<name>-<host target>``."""
        target = TargetTriple.from_host()
        return cls.from_path(f"{name}-{target}")

    @classmethod
    def all(cls) -> list[str]:
        """Return the names of all installed toolchains."""
        root = toolchains_dir()
        if not root.is_dir():
            return []
        return sorted(entry.name for entry in root.iterdir() if entry.is_dir())

    @classmethod
    def from_path(cls, toolchain: str) -> Toolchain:
        return cls(
            name=toolchain,
            path=toolchain_dir(toolchain),
            bin_path=toolchain_bin_dir(toolchain),
        )

    @classmethod
    def from_settings(cls) -> Toolchain:
        """Return the default toolchain recorded in the settings file.

        Raises LookupError when no default toolchain is set.
        """
        path = settings_file()
        if path.exists():
            default = SettingsFile(path).read().default_toolchain
            if default is not None:
                return cls.from_path(default)
        raise LookupError(_NO_DEFAULT_MESSAGE)

    def is_distributed(self) -> bool:
        """Tell whether the name starts with a reserved channel name."""
        return self.name.split("-", 1)[0] in RESERVED_TOOLCHAIN_NAMES

    def exists(self) -> bool:
        return self.path.is_dir()