"""Manifest Lookup — the query surface handed to page templates.

Templates only ever see the two operations of ``ManifestLookup``; the
renderer depends on the protocol, not on the manifest itself.
"""

from __future__ import annotations

import logging
from typing import Protocol, runtime_checkable

from pageslug.manifest.models import Manifest

logger = logging.getLogger(__name__)


@runtime_checkable
class ManifestLookup(Protocol):
    """Read-only name resolution consumed by the template renderer."""

    def resolve_name(self, *key_parts: str) -> str: ...

    def exists(self, *key_parts: str) -> bool: ...


class ManifestIndex:
    """``ManifestLookup`` over a built Manifest.

    Key parts are concatenated without a separator, so a template asks for
    ``("index", ".css")`` to find the file stored under ``"index.css"``.
    Absence is a normal outcome: ``resolve_name`` returns ``""``.
    """

    def __init__(self, manifest: Manifest, verbose: bool = False):
        self.manifest = manifest
        self.verbose = verbose

    def resolve_name(self, *key_parts: str) -> str:
        key = "".join(key_parts)
        entry = self.manifest.get(key)
        name = entry.name if entry is not None else ""
        if self.verbose:
            logger.debug("file_name %r returning %r", key, name)
        return name

    def exists(self, *key_parts: str) -> bool:
        key = "".join(key_parts)
        found = key in self.manifest
        if self.verbose:
            logger.debug("file_exists %r returning %r", key, found)
        return found
