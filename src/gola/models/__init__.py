"""Model package for gola."""

from gola.models.gola_config import GolaConfig
from gola.models.launch_target import LaunchTarget

__all__ = [
    "GolaConfig",
    "LaunchTarget",
]
