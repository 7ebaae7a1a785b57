"""Tests for fingerprint renaming."""

from __future__ import annotations

from pathlib import Path

import pytest

from pageslug.errors import FileAccessError
from pageslug.fingerprint.renamer import fingerprint_file, fingerprint_name
from pageslug.utils.hashing import hash_bytes


class TestFingerprintName:

    def test_keeps_directory(self):
        assert fingerprint_name("dist/app.js", "deadbeef") == Path("dist/app-deadbeef.js")

    def test_swaps_existing_slug(self):
        assert fingerprint_name("dist/app-11111111.js", "22222222") == Path("dist/app-22222222.js")

    def test_bare_name(self):
        assert fingerprint_name("style.css", "0a0b0c0d") == Path("style-0a0b0c0d.css")


class TestFingerprintFile:

    def test_renames_in_place(self, make_asset, asset_dir):
        src = make_asset("app.js", "let x = 1;")
        expected = asset_dir / f"app-{hash_bytes(b'let x = 1;')}.js"

        target = fingerprint_file(src)

        assert target == expected
        assert target.read_text(encoding="utf-8") == "let x = 1;"
        assert not src.exists()

    def test_rehash_replaces_old_slug(self, make_asset, asset_dir):
        src = make_asset("app-11111111.js", "v2")
        target = fingerprint_file(src)
        assert target.name == f"app-{hash_bytes(b'v2')}.js"

    def test_out_template(self, make_asset, tmp_path):
        src = make_asset("build.css", "body{}")
        out_dir = tmp_path / "dist"
        out_dir.mkdir()

        target = fingerprint_file(src, out_dir / "site.css")

        assert target == out_dir / f"site-{hash_bytes(b'body{}')}.css"
        assert target.exists()
        assert not src.exists()

    def test_missing_input(self, asset_dir):
        with pytest.raises(FileAccessError):
            fingerprint_file(asset_dir / "nope.js")

    def test_unwritable_target(self, make_asset, tmp_path):
        src = make_asset("app.js", "x")
        with pytest.raises(FileAccessError):
            fingerprint_file(src, tmp_path / "no" / "such" / "dir" / "app.js")
        assert src.exists()
