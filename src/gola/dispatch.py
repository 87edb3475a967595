"""Run the resolved interpreter as a child process."""

import logging
import shlex
import subprocess
from collections.abc import Sequence

from gola.errors import LaunchError

log = logging.getLogger(__name__)


def build_command(argv: Sequence[str], args: Sequence[str]) -> list[str]:
    """Append the launcher's trailing arguments to the resolved argv."""
    return [*argv, *args]


def dispatch(argv: Sequence[str], args: Sequence[str] = ()) -> int:
    """Run the command with inherited stdio and return its exit code."""
    command = build_command(argv, args)
    log.debug("exec: %s", shlex.join(command))
    try:
        result = subprocess.run(command, check=False)
    except OSError as e:
        raise LaunchError(f"could not start '{command[0]}'", e.strerror or str(e)) from e
    if result.returncode < 0:
        raise LaunchError(f"'{command[0]}' terminated by signal {-result.returncode}")
    return result.returncode
