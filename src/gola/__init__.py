"""gola: launch scripts through the interpreter named in their shebang."""

__version__ = "0.1.0"
