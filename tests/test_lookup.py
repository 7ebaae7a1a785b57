"""Tests for the manifest lookup facade."""

from __future__ import annotations

import logging

import pytest

from pageslug.manifest.builder import build_manifest
from pageslug.manifest.lookup import ManifestIndex, ManifestLookup
from pageslug.manifest.models import Manifest


@pytest.fixture
def index(make_asset) -> ManifestIndex:
    manifest = build_manifest([
        make_asset("homepage-0a1b2c3d.css", mtime=1),
        make_asset("index-cafe1234.js", mtime=1),
    ])
    return ManifestIndex(manifest)


class TestManifestIndex:
    """Tests for exists() and resolve_name()."""

    def test_satisfies_protocol(self, index):
        assert isinstance(index, ManifestLookup)

    def test_present_key(self, index):
        assert index.exists("homepage.css") is True
        assert index.resolve_name("homepage.css") == "homepage-0a1b2c3d.css"

    def test_parts_are_concatenated(self, index):
        assert index.exists("homepage", ".css")
        assert index.resolve_name("index", ".js") == "index-cafe1234.js"
        assert index.resolve_name("in", "dex", ".", "js") == "index-cafe1234.js"

    def test_absent_key(self, index):
        assert index.exists("missing.css") is False
        assert index.resolve_name("missing.css") == ""

    def test_no_separator_is_inserted(self, index):
        assert not index.exists("homepage", "css")

    def test_no_parts(self, index):
        assert index.resolve_name() == ""
        assert index.exists() is False

    def test_calls_do_not_interact(self, index):
        results = [index.resolve_name("index.js") for _ in range(3)]
        assert results == ["index-cafe1234.js"] * 3
        assert index.exists("index.js") and not index.exists("nope")
        assert index.resolve_name("index.js") == "index-cafe1234.js"

    def test_verbose_logs_calls(self, index, caplog):
        index.verbose = True
        with caplog.at_level(logging.DEBUG, logger="pageslug.manifest.lookup"):
            index.resolve_name("index", ".js")
            index.exists("nope.css")
        assert "file_name 'index.js' returning 'index-cafe1234.js'" in caplog.text
        assert "file_exists 'nope.css' returning False" in caplog.text

    def test_quiet_by_default(self, index, caplog):
        with caplog.at_level(logging.DEBUG, logger="pageslug.manifest.lookup"):
            index.resolve_name("index.js")
        assert caplog.text == ""

    def test_empty_manifest(self):
        index = ManifestIndex(Manifest())
        assert index.resolve_name("index.js") == ""
        assert not index.exists("index.js")
