"""Launch target model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class LaunchTarget:
    """A script resolved to a regular file, plus the extension the user gave."""

    name: str
    ext: str
