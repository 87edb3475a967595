"""Map a tokenized shebang onto a configured interpreter."""

import logging
import os
import posixpath
from collections.abc import Mapping, Sequence

log = logging.getLogger(__name__)

ENV_NAMES = {"env", "env.exe"}
# env flags that take a separate argument.
ENV_FLAGS_WITH_ARG = {"-u"}


def extension(name: str) -> str:
    """Return the suffix from the last ``.`` of the base name, or ``""``."""
    base = os.path.basename(name)
    dot = base.rfind(".")
    return base[dot:] if dot >= 0 else ""


def _skip_env(argv: Sequence[str], i: int) -> int:
    """Return the index of the real interpreter after ``env`` at ``argv[i]``."""
    i += 1
    while i < len(argv) and argv[i].startswith("-"):
        i += 2 if argv[i] in ENV_FLAGS_WITH_ARG else 1
    while i < len(argv) and "=" in argv[i]:
        i += 1
    return i


def normalize_keyword(keyword: str, interpreter_map: Mapping[str, object]) -> str:
    """Strip extensions from keyword until it names a mapping entry or has none left."""
    while keyword not in interpreter_map:
        ext = extension(keyword)
        if not ext:
            break
        keyword = keyword[: -len(ext)]
    return keyword


def resolve_interpreter(
    argv: Sequence[str],
    interpreter_map: Mapping[str, Mapping[str, str]],
    ext: str,
) -> tuple[str, list[str]]:
    """Return (keyword, argv) with the interpreter substituted.

    The returned argv starts at the interpreter token; any ``env`` prefix,
    its flags and NAME=VALUE assignments are dropped. An empty argv means no
    interpreter could be resolved; the keyword is still reported.
    """
    if not argv:
        return "", []
    argv = list(argv)
    i = 0
    keyword = posixpath.basename(argv[i])
    if keyword in ENV_NAMES:
        i = _skip_env(argv, i)
        if i >= len(argv):
            log.debug("env without an interpreter: %s", argv)
            return "", []
        keyword = posixpath.basename(argv[i])

    keyword = normalize_keyword(keyword, interpreter_map)
    variants = interpreter_map.get(keyword)
    if variants is None:
        log.debug("no mapping for keyword %r", keyword)
        return keyword, []
    if ext in variants:
        argv[i] = variants[ext]
    elif "" in variants:
        argv[i] = variants[""]
    else:
        log.debug("no mapping for keyword %r and extension %r", keyword, ext)
        return keyword, []
    return keyword, argv[i:]
