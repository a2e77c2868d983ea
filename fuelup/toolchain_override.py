"""The ``fuel-toolchain.toml`` file that pins a project's toolchain."""

from __future__ import annotations

import datetime as _dt
import logging
import os
import re
import tomllib
from dataclasses import dataclass
from pathlib import Path

import tomli_w
from semver import Version

from fuelup.component_spec import ComponentSpec
from fuelup.description import DistToolchainDescription
from fuelup.paths import FUEL_TOOLCHAIN_TOML_FILE, get_fuel_toolchain_toml

logger = logging.getLogger(__name__)

LATEST = "latest"
NIGHTLY = "nightly"
TESTNET = "testnet"
MAINNET = "mainnet"

_DATELESS_CHANNELS = (TESTNET, MAINNET)
_DATE_RE = re.compile(r"\d{4}-\d{2}-\d{2}")
_EXPECTED_CHANNEL = "one of <latest-YYYY-MM-DD|nightly-YYYY-MM-DD|testnet|mainnet>"


def _parse_date(text: str) -> _dt.date | None:
    if not _DATE_RE.fullmatch(text):
        return None
    try:
        return _dt.date.fromisoformat(text)
    except ValueError:
        return None


@dataclass(frozen=True)
class Channel:
    """The channel named in the ``[toolchain]`` table, with an optional date."""

    name: str
    date: _dt.date | None = None

    @classmethod
    def parse(cls, text: str) -> Channel:
        if text in _DATELESS_CHANNELS:
            return cls(name=text, date=None)
        name, sep, rest = text.partition("-")
        if sep:
            return cls(name=name, date=_parse_date(rest))
        if text in (LATEST, NIGHTLY):
            raise ValueError(f"'{text}' without date specifier is forbidden")
        raise ValueError(f"Invalid str for channel: '{text}'")

    def __str__(self) -> str:
        if self.date is not None:
            return f"{self.name}-{self.date.isoformat()}"
        return self.name


@dataclass
class ToolchainCfg:
    """The ``[toolchain]`` table."""

    channel: Channel


@dataclass
class OverrideCfg:
    """The whole contents of ``fuel-toolchain.toml``."""

    toolchain: ToolchainCfg
    components: dict[str, ComponentSpec] | None = None

    @classmethod
    def from_toml(cls, text: str) -> OverrideCfg:
        """Parse and check the text of an override file; raises ValueError."""
        data = tomllib.loads(text)

        table = data.get("toolchain")
        if table is None:
            raise ValueError("missing field `toolchain`")
        if not isinstance(table, dict):
            raise ValueError("invalid type for `toolchain`: expected a table")
        raw_channel = table.get("channel")
        if raw_channel is None:
            raise ValueError("missing field `channel`")
        if not isinstance(raw_channel, str):
            raise ValueError("invalid type for `channel`: expected a string")
        try:
            channel = Channel.parse(raw_channel)
        except ValueError as exc:
            raise ValueError(
                f'invalid value: string "{raw_channel}", expected {_EXPECTED_CHANNEL}'
            ) from exc

        components: dict[str, ComponentSpec] | None = None
        raw_components = data.get("components")
        if raw_components is not None:
            if not isinstance(raw_components, dict):
                raise ValueError("invalid type for `components`: expected a table")
            components = {}
            for name, value in raw_components.items():
                if not isinstance(value, str):
                    raise ValueError(
                        f"invalid type for component '{name}': expected a string"
                    )
                components[name] = ComponentSpec.parse(value)

        try:
            DistToolchainDescription.parse(str(channel))
        except ValueError as exc:
            raise ValueError(f"Invalid channel '{channel}'") from exc

        if components is not None and not components:
            raise ValueError("'[components]' table is declared with no components")

        return cls(toolchain=ToolchainCfg(channel=channel), components=components)

    def _as_dict(self) -> dict[str, dict[str, str]]:
        document: dict[str, dict[str, str]] = {
            "toolchain": {"channel": str(self.toolchain.channel)}
        }
        if self.components is not None:
            document["components"] = {
                name: str(spec) for name, spec in self.components.items()
            }
        return document

    def to_string_pretty(self) -> str:
        return tomli_w.dumps(self._as_dict())


@dataclass
class ToolchainOverride:
    """An override configuration together with the file it came from."""

    cfg: OverrideCfg
    path: Path

    def __post_init__(self) -> None:
        if not isinstance(self.path, Path):
            self.path = Path(self.path)

    @classmethod
    def from_path(cls, path: str | os.PathLike[str]) -> ToolchainOverride:
        path = Path(path)
        text = path.read_text(encoding="utf-8")
        return cls(cfg=OverrideCfg.from_toml(text), path=path)

    def to_toml(self) -> str:
        """Return the TOML text of this override."""
        return self.cfg.to_string_pretty()

    @classmethod
    def from_project_root(cls) -> ToolchainOverride | None:
        """Load the nearest override file above the working directory, if any."""
        found = get_fuel_toolchain_toml()
        if found is None:
            return None
        try:
            return cls.from_path(found)
        except (OSError, ValueError) as exc:
            logger.warning(
                "warning: invalid '%s' in project root: %s", FUEL_TOOLCHAIN_TOML_FILE, exc
            )
            return None

    def get_component_spec(self, component: str) -> ComponentSpec | None:
        if self.cfg.components is None:
            return None
        return self.cfg.components.get(component)

    def get_component_version(self, component: str) -> Version | None:
        spec = self.get_component_spec(component)
        return spec.version if spec is not None else None

    def base_dir(self) -> Path:
        """Return the directory that relative component paths are taken from."""
        parent = self.path.parent
        if parent != self.path:
            return parent
        return self.path if self.path.is_dir() else Path(".")

    def get_component_path(self, component: str) -> Path | None:
        spec = self.get_component_spec(component)
        if spec is None:
            return None
        return spec.resolve_path(self.base_dir())

    def validate_local_components(self) -> None:
        """Raise ValueError if any local path component is not an executable file."""
        if self.cfg.components is None:
            return
        base_dir = self.base_dir()
        for name, spec in self.cfg.components.items():
            try:
                spec.validate_binary(base_dir)
            except (OSError, ValueError) as exc:
                raise ValueError(
                    f"Invalid local binary for component '{name}': {exc}"
                ) from exc