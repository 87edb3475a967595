"""Core logic for gola."""

import logging
import os
from collections.abc import Sequence

from gola.config import load_config
from gola.dispatch import build_command, dispatch
from gola.errors import ResolutionError, TargetNotFoundError
from gola.models import GolaConfig, LaunchTarget
from gola.platforms import Platform
from gola.resolver import extension, resolve_interpreter
from gola.shebang import parse_shebang, read_shebang

log = logging.getLogger(__name__)


def locate_target(name: str, config: GolaConfig) -> LaunchTarget:
    """Resolve a script name to a regular file.

    When ``name`` is not a file, each configured container member is tried
    as ``name/member``; the first file found is used instead.
    """
    ext = extension(name)
    if os.path.isfile(name):
        return LaunchTarget(name=name, ext=ext)
    for member in config.container_members:
        candidate = os.path.join(name, member)
        if os.path.isfile(candidate):
            log.debug("redirecting %s to %s", name, candidate)
            return LaunchTarget(name=candidate, ext=ext)
    raise TargetNotFoundError(f"'{name}' is not a file")


class Gola:
    """Launch one script with the interpreter its shebang maps to."""

    def __init__(self, target: LaunchTarget, config: GolaConfig) -> None:
        self.target = target
        self.config = config

    def load_script(self) -> tuple[str, list[str]]:
        """Return the interpreter keyword and the resolved argv (empty if none)."""
        line = read_shebang(self.target.name, self.config.container_members)
        log.debug("shebang of %s: %r", self.target.name, line)
        argv = parse_shebang(line)
        keyword, argv = resolve_interpreter(argv, self.config.interpreter_map, self.target.ext)
        log.debug("keyword=%r argv=%s", keyword, argv)
        return keyword, argv

    def command(self, args: Sequence[str] = ()) -> list[str]:
        """Return the full command line for the script, or raise ResolutionError."""
        keyword, argv = self.load_script()
        if not argv:
            raise ResolutionError(
                f"could not find interpreter[{keyword}] for '{self.target.name}'",
                keyword=keyword,
            )
        return build_command(argv, args)

    def exec(self, args: Sequence[str] = ()) -> int:
        """Run the script and return the interpreter's exit code."""
        return dispatch(self.command(args))


def new_gola(argv0: str, name: str, platform: Platform | None = None) -> Gola:
    """Load configuration for ``argv0`` and locate the script ``name``."""
    config = load_config(argv0, platform)
    target = locate_target(name, config)
    return Gola(target, config)
