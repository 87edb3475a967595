"""Configuration file discovery and loading for gola."""

import logging
import os
import shutil
from pathlib import Path

from pydantic import ValidationError

from gola.errors import ConfigError
from gola.models import GolaConfig
from gola.platforms import Platform, get_platform

log = logging.getLogger(__name__)

APP_NAME = "gola"
SETTINGS_FILE = "settings.json"


def resolve_argv0(argv0: str, platform: Platform) -> str:
    """Return an absolute path for the launcher's own invocation name."""
    if os.path.isabs(argv0):
        return argv0
    if platform.is_executable_candidate(argv0):
        return os.path.abspath(os.path.normpath(argv0))
    found = shutil.which(argv0)
    if found is None:
        raise ConfigError(f"could not find '{argv0}' in $PATH")
    return os.path.abspath(found)


def find_config_file(argv0: str, platform: Platform) -> Path:
    """Return the config path to use, preferring one next to the launcher."""
    path = resolve_argv0(argv0, platform)
    adjacent = Path(os.path.splitext(path)[0] + ".json")
    if adjacent.is_file():
        return adjacent
    return platform.user_config_dir() / APP_NAME / SETTINGS_FILE


def parse_config(text: str | bytes, source: Path | str = "<string>") -> GolaConfig:
    """Parse a JSON document into a GolaConfig."""
    try:
        return GolaConfig.model_validate_json(text)
    except ValidationError as e:
        errors = "; ".join(
            f"{'.'.join(str(p) for p in err['loc']) or '<root>'}: {err['msg']}"
            for err in e.errors()
        )
        raise ConfigError(f"could not parse '{source}'", errors) from e


def load_config(argv0: str, platform: Platform | None = None) -> GolaConfig:
    """Locate and load the configuration; a missing file yields an empty config."""
    platform = platform or get_platform()
    path = find_config_file(argv0, platform)
    if not path.is_file():
        log.debug("no config at %s, using defaults", path)
        return GolaConfig()
    log.debug("loading config from %s", path)
    try:
        data = path.read_bytes()
    except OSError as e:
        raise ConfigError(f"could not read '{path}'", str(e)) from e
    return parse_config(data, path)
