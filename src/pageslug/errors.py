"""Error taxonomy.

Every fatal condition is a ``PageSlugError``; the command line entry point
turns those into a logged message and a non-zero exit code. Missing optional
inputs are not errors, they are recorded as ``MissingInputWarning``.
"""

from __future__ import annotations

import os


class PageSlugError(Exception):
    """Base class for all fatal pageslug errors."""


class FileAccessError(PageSlugError):
    """A required path could not be read, written, renamed, stat'ed or watched."""

    def __init__(self, path: str | os.PathLike, message: str):
        self.path = os.fspath(path)
        super().__init__(f"{message}: {self.path!r}")


class TemplateError(PageSlugError):
    """The template document is malformed or references unbound names."""

    def __init__(self, message: str, lineno: int | None = None):
        self.lineno = lineno
        if lineno is not None:
            message = f"{message} (line {lineno})"
        super().__init__(message)


class RenderError(PageSlugError):
    """Executing a parsed template failed."""


class ArgumentError(PageSlugError):
    """A required argument or flag was not supplied."""


class MissingInputWarning(UserWarning):
    """An optional input file does not exist and was skipped."""

    def __init__(self, path: str | os.PathLike):
        self.path = os.fspath(path)
        super().__init__(f"Skipping missing file {self.path!r}")
