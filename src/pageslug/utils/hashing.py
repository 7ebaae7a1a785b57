"""Content hashing for asset fingerprints.

Fingerprints are 32-bit FNV-1a hashes of a file's bytes, rendered as
8 lowercase hex characters. FNV-1a is not cryptographic; it only has to be
stable across runs and cheap to compute on build output.
"""

from __future__ import annotations

import os

from pageslug.config import get_config
from pageslug.errors import FileAccessError

FNV32_OFFSET_BASIS = 0x811C9DC5
FNV32_PRIME = 0x01000193
_MASK32 = 0xFFFFFFFF


class Fnv1a32:
    """Incremental 32-bit FNV-1a hash with a hashlib-style interface."""

    name = "fnv1a_32"
    digest_size = 4

    def __init__(self, data: bytes = b""):
        self._value = FNV32_OFFSET_BASIS
        if data:
            self.update(data)

    def update(self, data: bytes) -> None:
        value = self._value
        for byte in data:
            value = ((value ^ byte) * FNV32_PRIME) & _MASK32
        self._value = value

    def intdigest(self) -> int:
        return self._value

    def digest(self) -> bytes:
        return self._value.to_bytes(self.digest_size, "big")

    def hexdigest(self) -> str:
        return f"{self._value:08x}"

    def copy(self) -> "Fnv1a32":
        clone = Fnv1a32()
        clone._value = self._value
        return clone


def hash_bytes(data: bytes) -> str:
    """Return the 8-hex-digit fingerprint of ``data``."""
    return Fnv1a32(data).hexdigest()


def hash_file(path: str | os.PathLike, chunk_size: int | None = None) -> str:
    """Return the 8-hex-digit fingerprint of a file's contents.

    The file is streamed so large bundles are not read into memory at once.
    """
    chunk_size = chunk_size or get_config().hash.chunk_size_bytes
    hasher = Fnv1a32()
    try:
        with open(path, "rb") as f:
            while chunk := f.read(chunk_size):
                hasher.update(chunk)
    except OSError as e:
        raise FileAccessError(path, f"Cannot read file ({e.strerror or e})") from e
    return hasher.hexdigest()
