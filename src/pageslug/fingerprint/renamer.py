"""Fingerprint Renamer — embed a file's content hash in its name."""

from __future__ import annotations

import logging
import os
import shutil
from pathlib import Path

from pageslug.errors import FileAccessError
from pageslug.manifest.slug import insert_fingerprint
from pageslug.utils.hashing import hash_file

logger = logging.getLogger(__name__)


def fingerprint_name(template_path: str | os.PathLike, fingerprint: str) -> Path:
    """Target path for a fingerprinted file.

    Keeps the directory of ``template_path`` and swaps any slug in its base
    name for ``fingerprint``: ("dist/app-11111111.js", "22222222") ->
    "dist/app-22222222.js".
    """
    directory, base_name = os.path.split(os.fspath(template_path))
    return Path(directory) / insert_fingerprint(base_name, fingerprint)


def fingerprint_file(src: str | os.PathLike, out: str | os.PathLike | None = None) -> Path:
    """Hash ``src`` and move it to its fingerprinted name.

    ``out`` is an optional path template; by default the file is renamed
    alongside itself. Returns the new path.
    """
    fingerprint = hash_file(src)
    target = fingerprint_name(out or src, fingerprint)

    logger.info("Renaming %r -> %r", os.fspath(src), str(target))
    try:
        shutil.move(os.fspath(src), target)
    except OSError as e:
        raise FileAccessError(src, f"Cannot rename to {str(target)!r} ({e.strerror or e})") from e
    return target
