"""Read and tokenize the shebang line of a script or zipped script."""

import logging
import os
import re
import zipfile
import zlib
from collections.abc import Sequence

from gola.errors import ScriptFormatError

log = logging.getLogger(__name__)

SHEBANG_MAGIC = b"#!"
ZIP_MAGIC = b"PK"

# "/usr/bin/env" or "C:/Python/python.exe" once backslashes are normalized.
ABSOLUTE_PATH_RE = re.compile(r"^(?:[A-Za-z]:)?/")


def read_shebang(path: str, container_members: Sequence[str] = ()) -> str:
    """Return the first line of a script, or of the first matching zip member.

    A plain file is only read when it starts with ``#!``. A zip archive is
    searched for the configured member names in order; the first present one
    is read. Anything else, or an archive with none of the members, yields an
    empty string. At most one line is read and the trailing newline is kept.
    """
    try:
        f = open(path, "rb")
    except OSError as e:
        raise ScriptFormatError(f"could not open '{path}'", e.strerror) from e
    with f:
        try:
            magic = f.read(len(SHEBANG_MAGIC))
        except OSError as e:
            raise ScriptFormatError(f"could not read from '{path}'", e.strerror) from e
        if len(magic) != len(SHEBANG_MAGIC):
            raise ScriptFormatError(f"could not read {len(SHEBANG_MAGIC)} bytes from '{path}'")

        if magic == SHEBANG_MAGIC:
            f.seek(0)
            return os.fsdecode(f.readline())
        if magic == ZIP_MAGIC:
            f.seek(0)
            return _read_zip_shebang(f, path, container_members)
    log.debug("%s has no shebang signature", path)
    return ""


def _read_zip_shebang(f, path: str, container_members: Sequence[str]) -> str:
    try:
        zf = zipfile.ZipFile(f)
    except (zipfile.BadZipFile, zipfile.LargeZipFile, EOFError, OSError) as e:
        raise ScriptFormatError(f"could not open zip file '{path}'", str(e)) from e
    with zf:
        names = set(zf.namelist())
        for member in container_members:
            if member not in names:
                continue
            log.debug("reading shebang from %s in %s", member, path)
            try:
                with zf.open(member) as fp:
                    return os.fsdecode(fp.readline())
            except (
                zipfile.BadZipFile,
                NotImplementedError,
                RuntimeError,
                zlib.error,
                EOFError,
                OSError,
            ) as e:
                # Encrypted members raise RuntimeError, corrupt deflate data zlib.error.
                raise ScriptFormatError(f"could not open '{member}' in '{path}'", str(e)) from e
    log.debug("no container member of %s matched %s", path, list(container_members))
    return ""


def is_absolute(token: str) -> bool:
    """Return whether a normalized shebang token is an absolute path."""
    return ABSOLUTE_PATH_RE.match(token) is not None


def parse_shebang(line: str) -> list[str]:
    """Split a shebang line into an argument vector.

    Backslashes become forward slashes. While only the interpreter token has
    been collected, a following relative token containing ``/`` is joined to
    it with a space, so ``#!C:/Program Files/Python/python.exe`` stays one
    argument.
    """
    if not line.startswith("#!"):
        return []
    argv: list[str] = []
    for token in line[2:].replace("\\", "/").split():
        if len(argv) == 1 and is_absolute(argv[0]) and not is_absolute(token) and "/" in token:
            argv[0] += " " + token
        else:
            argv.append(token)
    return argv
