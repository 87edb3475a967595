"""Error types raised by the gola core and reported by the CLI."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class GolaError(Exception):
    message: str
    detail: str | None = None

    def __str__(self) -> str:
        if self.detail:
            return f"{self.message} ({self.detail})"
        return self.message


class TargetNotFoundError(GolaError):
    """Neither the target nor any redirected container member is a file."""


class ConfigError(GolaError):
    """The configuration file could not be located, read, or parsed."""


class ScriptFormatError(GolaError):
    """The script could not be opened, is too short, or is a broken archive."""


@dataclass
class ResolutionError(GolaError):
    """No usable interpreter mapping for the script's shebang."""

    keyword: str | None = None


class LaunchError(GolaError):
    """The resolved interpreter could not be started or did not exit normally."""
