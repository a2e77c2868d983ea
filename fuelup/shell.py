"""Shells whose startup files fuelup knows about."""

from __future__ import annotations

from enum import Enum
from pathlib import Path


class Shell(Enum):
    POSIX = "posix"
    BASH = "bash"
    ZSH = "zsh"
    FISH = "fish"

    @classmethod
    def all(cls) -> list[Shell]:
        return list(cls)

    def does_exist(self) -> bool:
        return True

    def rc_files(self) -> list[Path]:
        """Return the startup files of this shell in the user's home directory."""
        home = Path.home()
        match self:
            case Shell.BASH:
                names = [".bash_profile", ".bash_login", ".bashrc"]
            case Shell.ZSH:
                names = [".zshenv", ".zprofile", ".zshrc", ".zlogin"]
            case Shell.POSIX:
                names = [".profile"]
            case Shell.FISH:
                names = [".config/fish/config.fish"]
        return [home / name for name in names]