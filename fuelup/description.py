"""Names and descriptions of distributable toolchains."""

from __future__ import annotations

import datetime as _dt
import re
from dataclasses import dataclass
from enum import Enum

from fuelup.target_triple import TargetTriple

_DATE_RE = re.compile(r"\d{4}-\d{2}-\d{2}")


class DistToolchainName(Enum):
    """Channels that are published as ready-made toolchains."""

    LATEST = "latest"
    NIGHTLY = "nightly"
    TESTNET = "testnet"
    MAINNET = "mainnet"

    @classmethod
    def parse(cls, text: str) -> DistToolchainName:
        for member in cls:
            if member.value == text:
                return member
        raise ValueError(f"Unknown name for toolchain: {text}")

    def __str__(self) -> str:
        return self.value


def _host_or_none() -> TargetTriple | None:
    try:
        return TargetTriple.from_host()
    except ValueError:
        return None


def _parse_date(text: str) -> _dt.date | None:
    if not _DATE_RE.fullmatch(text):
        return None
    try:
        return _dt.date.fromisoformat(text)
    except ValueError:
        return None


def extract_date(parts: list[str]) -> _dt.date | None:
    """Parse a ``YYYY-MM-DD`` date from the last three parts, removing them on success."""
    if len(parts) < 3:
        return None
    date = _parse_date("-".join(parts[-3:]))
    if date is not None:
        del parts[-3:]
    return date


def extract_target(parts: list[str]) -> TargetTriple | None:
    """Parse a target triple from the last three or four parts, removing them on success."""
    for count in (3, 4):
        if len(parts) < count:
            continue
        try:
            target = TargetTriple("-".join(parts[-count:]))
        except ValueError:
            continue
        del parts[-count:]
        return target
    return None


@dataclass
class DistToolchainDescription:
    """A distributable toolchain: channel, optional date and target."""

    name: DistToolchainName
    date: _dt.date | None = None
    target: TargetTriple | None = None

    @classmethod
    def parse(cls, text: str) -> DistToolchainDescription:
        """Parse one of these forms, reading from the end of the string::

            <channel>
            <channel>-<target>
            <channel>-<YYYY-MM-DD>
            <channel>-<YYYY-MM-DD>-<target>
            <channel>-<target>-<YYYY-MM-DD>
        """
        if text.endswith("-") and text.count("-") == 1:
            raise ValueError(f"Invalid distributable toolchain name '{text}'")

        parts = text.split("-")
        if len(parts) == 1:
            return cls(
                name=DistToolchainName.parse(parts[0]),
                date=None,
                target=_host_or_none(),
            )

        date = extract_date(parts)
        target = extract_target(parts)
        if date is None and target is not None:
            date = extract_date(parts)

        name = DistToolchainName.parse("-".join(parts))
        return cls(
            name=name,
            date=date,
            target=target if target is not None else _host_or_none(),
        )

    def __str__(self) -> str:
        host = _host_or_none()
        target = str(host) if host is not None else ""
        if self.date is not None:
            return f"{self.name}-{self.date.isoformat()}-{target}"
        return f"{self.name}-{target}"