"""Command-line interface for gola."""

import argparse
import logging
import sys

from gola import __version__
from gola.errors import GolaError
from gola.gola import new_gola

log = logging.getLogger("gola")


def build_parser() -> argparse.ArgumentParser:
    """Build parser for the launcher's own options and the script name."""
    parser = argparse.ArgumentParser(
        prog="gola",
        description="Run a script with the interpreter mapped from its shebang",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument("-d", "--debug", action="store_true", help="Enable debug logging")
    parser.add_argument("script", help="Script file, zip archive, or directory to launch")
    parser.add_argument(
        "args",
        nargs="*",
        help="Arguments passed through to the script unchanged",
    )
    return parser


def split_argv(argv: list[str]) -> tuple[list[str], list[str]]:
    """Split argv into launcher options and [script, *pass-through args].

    The script is the first token that is not an option, or the token after
    a ``--`` that precedes it. Nothing after the script is interpreted.
    """
    for i, arg in enumerate(argv):
        if arg == "--":
            return argv[:i], argv[i + 1 :]
        if arg == "-" or not arg.startswith("-"):
            return argv[:i], argv[i:]
    return argv, []


def main(argv: list[str] | None = None, argv0: str | None = None) -> int:
    """Launch a script and return its exit code."""
    options, rest = split_argv(list(sys.argv[1:] if argv is None else argv))
    parser = build_parser()
    args = parser.parse_args([*options, "--", rest[0]] if rest else options)
    passthrough = rest[1:]
    if argv0 is None:
        argv0 = sys.argv[0]

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(name)s %(levelname)s: %(message)s",
    )
    log.debug("argv0=%s script=%s args=%s", argv0, args.script, passthrough)

    try:
        gola = new_gola(argv0, args.script)
        # The interpreter receives the script as given, not the redirected member.
        return gola.exec([args.script, *passthrough])
    except GolaError as e:
        print(f"gola: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        return 130


def entrypoint() -> None:
    raise SystemExit(main())
