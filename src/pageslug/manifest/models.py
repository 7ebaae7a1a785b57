"""Manifest Data Models — resolved fingerprinted assets."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from datetime import datetime, timezone
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, Field

from pageslug.errors import MissingInputWarning


class ManifestEntry(BaseModel):
    """The file chosen to represent one logical asset name."""
    model_config = ConfigDict(frozen=True)

    logical_key: str = Field(..., description="Slug-free name, e.g. 'style.css'")
    name: str = Field(..., description="File base name, e.g. 'style-deadbeef.css'")
    path: str = Field(..., description="Path as given on the command line")
    modified_ns: int = Field(..., description="Modification time in nanoseconds")

    @property
    def modified_at(self) -> datetime:
        return datetime.fromtimestamp(self.modified_ns / 1_000_000_000, tz=timezone.utc)


class Manifest(Mapping[str, ManifestEntry]):
    """Read-only mapping of logical key -> ManifestEntry.

    Built once by ``ManifestBuilder`` and never mutated afterwards.
    """

    def __init__(
        self,
        entries: Mapping[str, ManifestEntry] | None = None,
        warnings: tuple[MissingInputWarning, ...] = (),
    ):
        self._entries = MappingProxyType(dict(entries or {}))
        self.warnings = tuple(warnings)

    def __getitem__(self, key: str) -> ManifestEntry:
        return self._entries[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        names = ", ".join(f"{k!r}: {e.name!r}" for k, e in self._entries.items())
        return f"Manifest({{{names}}})"

    @property
    def skipped_paths(self) -> list[str]:
        return [w.path for w in self.warnings]
