"""Platform-specific executable detection and config directory lookup."""

import os
from abc import ABC, abstractmethod
from pathlib import Path


class Platform(ABC):
    """Capabilities the config loader needs from the host OS."""

    @abstractmethod
    def is_executable_candidate(self, path: str) -> bool:
        """Return whether argv0 names a launcher file relative to the cwd."""

    @abstractmethod
    def user_config_dir(self) -> Path:
        """Return the per-user configuration root."""


class PosixPlatform(Platform):
    def is_executable_candidate(self, path: str) -> bool:
        return os.path.isfile(path)

    def user_config_dir(self) -> Path:
        xdg = os.environ.get("XDG_CONFIG_HOME", "")
        if xdg:
            return Path(xdg)
        home = os.environ.get("HOME", "")
        return Path(home) / ".config" if home else Path.home() / ".config"


class WindowsPlatform(Platform):
    def is_executable_candidate(self, path: str) -> bool:
        # argv0 usually arrives without the .exe suffix.
        return os.path.isfile(path) or os.path.isfile(path + ".exe")

    def user_config_dir(self) -> Path:
        return Path(os.environ.get("APPDATA", ""))


def get_platform() -> Platform:
    """Return the capability implementation for the running OS."""
    if os.name == "nt":
        return WindowsPlatform()
    return PosixPlatform()
