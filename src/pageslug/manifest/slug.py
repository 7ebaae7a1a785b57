"""Slug Canonicalizer — recover logical asset names from fingerprinted ones."""

from __future__ import annotations

import os
import re

# separator, 8 lowercase hex digits, then the extension dot
SLUG_PATTERN = re.compile(r"[_-][a-f0-9]{8}\.")
FINGERPRINT_PATTERN = re.compile(r"[a-f0-9]{8}")


def canonicalize(base_name: str) -> str:
    """Strip fingerprint slugs from a file name.

    "whatever-abcd1234.css" -> "whatever.css". Every occurrence is replaced,
    names without a slug come back unchanged. Uppercase hex and short slugs
    are deliberately not treated as fingerprints.

    Substitution repeats until nothing matches: removing one slug can expose
    another ("a-deadbeef-cafebabe.css"), and the result must be a fixed point.
    """
    stripped, count = SLUG_PATTERN.subn(".", base_name)
    while count:
        stripped, count = SLUG_PATTERN.subn(".", stripped)
    return stripped


def is_fingerprint(value: str) -> bool:
    """Check whether ``value`` is an 8-digit lowercase hex fingerprint."""
    return FINGERPRINT_PATTERN.fullmatch(value) is not None


def insert_fingerprint(name: str, fingerprint: str) -> str:
    """Embed ``fingerprint`` before the extension of ``name``.

    Any slug already present is removed first, so re-fingerprinting a file
    replaces its old hash: ("app-11111111.js", "22222222") -> "app-22222222.js".
    """
    if not is_fingerprint(fingerprint):
        raise ValueError(f"Invalid fingerprint {fingerprint!r} (want 8 lowercase hex digits)")
    stem, ext = os.path.splitext(canonicalize(name))
    return f"{stem}-{fingerprint}{ext}"
