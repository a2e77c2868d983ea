"""Target triples naming the platforms toolchains are built for."""

from __future__ import annotations

import platform
from functools import total_ordering

_ARCHITECTURES = ("aarch64", "x86_64")
_VENDORS = ("apple", "unknown")
_OSES = ("darwin", "linux-gnu")
_MACHINE_ALIASES = {"arm64": "aarch64", "amd64": "x86_64"}


@total_ordering
class TargetTriple:
    """A validated ``<arch>-<vendor>-<os>`` string."""

    __slots__ = ("value",)

    def __init__(self, value: str) -> None:
        architecture, sep, rest = value.partition("-")
        if not sep:
            raise ValueError("missing vendor-os specifier")
        vendor, sep, os_name = rest.partition("-")
        if not sep:
            raise ValueError("missing os specifier")
        if architecture not in _ARCHITECTURES:
            raise ValueError(f"Unsupported architecture: '{architecture}'")
        if vendor not in _VENDORS:
            raise ValueError(f"Unsupported vendor: '{vendor}'")
        if os_name not in _OSES:
            raise ValueError(f"Unsupported os: '{os_name}'")
        self.value = value

    @classmethod
    def from_host(cls) -> TargetTriple:
        """Return the triple of the machine this runs on."""
        machine = platform.machine().lower()
        architecture = _MACHINE_ALIASES.get(machine, machine)
        if architecture not in _ARCHITECTURES:
            raise ValueError(f"Unsupported architecture: {architecture}")
        system = platform.system()
        vendor = "apple" if system == "Darwin" else "unknown"
        if system == "Darwin":
            os_name = "darwin"
        elif system == "Linux":
            os_name = "linux-gnu"
        else:
            raise ValueError(f"Unsupported os: {system.lower()}")
        return cls(f"{architecture}-{vendor}-{os_name}")

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"TargetTriple({self.value!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TargetTriple):
            return NotImplemented
        return self.value == other.value

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, TargetTriple):
            return NotImplemented
        return self.value < other.value

    def __hash__(self) -> int:
        return hash(self.value)