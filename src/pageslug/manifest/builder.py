"""Fingerprint Manifest Builder.

Build pipelines leave stale fingerprinted files from earlier builds next to
the fresh ones. The builder groups candidates by logical key and keeps the
most recently modified file for each, so callers can pass a whole output
directory without pre-filtering it.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable

from pageslug.errors import FileAccessError, MissingInputWarning
from pageslug.manifest.models import Manifest, ManifestEntry
from pageslug.manifest.slug import canonicalize

logger = logging.getLogger(__name__)


class ManifestBuilder:
    """Accumulates candidate files and resolves them into a Manifest."""

    def __init__(self):
        self._entries: dict[str, ManifestEntry] = {}
        self._warnings: list[MissingInputWarning] = []
        self._finalized = False

    def feed(self, path: str | os.PathLike) -> ManifestEntry | None:
        """Consider one candidate file.

        Returns the entry now stored for the candidate's logical key, or
        ``None`` if the file is missing. Equal modification times resolve to
        the candidate fed last.
        """
        if self._finalized:
            raise RuntimeError("Manifest already built; create a new builder")

        path = os.fspath(path)
        try:
            st = os.stat(path)
        except FileNotFoundError:
            warning = MissingInputWarning(path)
            self._warnings.append(warning)
            logger.warning("%s", warning)
            return None
        except OSError as e:
            raise FileAccessError(path, f"Error on input file ({e.strerror or e})") from e

        name = os.path.basename(path)
        key = canonicalize(name)
        current = self._entries.get(key)

        # only replace if this one is at least as new, or first time
        if current is None or st.st_mtime_ns >= current.modified_ns:
            current = ManifestEntry(
                logical_key=key,
                name=name,
                path=path,
                modified_ns=st.st_mtime_ns,
            )
            self._entries[key] = current
        else:
            logger.debug("Ignoring older duplicate %r for %r (keeping %r)", path, key, current.path)

        return current

    def feed_all(self, paths: Iterable[str | os.PathLike]) -> None:
        for path in paths:
            self.feed(path)

    def build(self) -> Manifest:
        """Finalize and return the immutable manifest."""
        self._finalized = True
        return Manifest(self._entries, tuple(self._warnings))


def build_manifest(paths: Iterable[str | os.PathLike]) -> Manifest:
    """Build a manifest from candidate paths in the given order."""
    builder = ManifestBuilder()
    builder.feed_all(paths)
    return builder.build()
