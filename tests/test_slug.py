"""Tests for fingerprint slug canonicalization and insertion."""

from __future__ import annotations

import pytest

from pageslug.manifest.slug import canonicalize, insert_fingerprint, is_fingerprint


class TestCanonicalize:
    """Tests for canonicalize()."""

    @pytest.mark.parametrize(
        "name, expected",
        [
            ("whatever-abcd1234.css", "whatever.css"),
            ("whatever_abcd1234.css", "whatever.css"),
            ("vendor.bundle-0123abcd.js", "vendor.bundle.js"),
            ("main-deadbeef.wasm", "main.wasm"),
        ],
    )
    def test_strips_slug(self, name, expected):
        assert canonicalize(name) == expected

    @pytest.mark.parametrize(
        "name",
        [
            "style.css",
            "style-abc123.css",        # too short
            "style-ABCD1234.css",      # uppercase hex
            "style-abcd1234",          # no extension dot
            "style.abcd1234.css",      # dot is not a separator
            "style-abcd123g.css",      # not hex
            "",
        ],
    )
    def test_leaves_non_slugs_alone(self, name):
        assert canonicalize(name) == name

    def test_replaces_every_occurrence(self):
        assert canonicalize("a-11111111.b_22222222.css") == "a.b.css"

    def test_nested_slugs_reach_fixed_point(self):
        assert canonicalize("a-deadbeef-cafebabe.css") == "a.css"

    @pytest.mark.parametrize(
        "name",
        ["x-12345678.css", "a-deadbeef-cafebabe.css", "plain.txt", "y_00000000.tar.gz", "z-1234.js"],
    )
    def test_idempotent(self, name):
        once = canonicalize(name)
        assert canonicalize(once) == once


class TestInsertFingerprint:
    """Tests for insert_fingerprint() and is_fingerprint()."""

    def test_inserts_before_extension(self):
        assert insert_fingerprint("style.css", "deadbeef") == "style-deadbeef.css"

    def test_replaces_existing_slug(self):
        assert insert_fingerprint("app-11111111.js", "22222222") == "app-22222222.js"

    def test_only_last_extension_counts(self):
        assert insert_fingerprint("data.tar.gz", "0badcafe") == "data.tar-0badcafe.gz"

    @pytest.mark.parametrize("logical", ["style.css", "index.js", "main.wasm", "vendor.bundle.js"])
    @pytest.mark.parametrize("fingerprint", ["00000000", "deadbeef", "1a2b3c4d"])
    def test_canonicalize_undoes_insert(self, logical, fingerprint):
        assert canonicalize(insert_fingerprint(logical, fingerprint)) == logical

    @pytest.mark.parametrize("bad", ["DEADBEEF", "abc", "deadbeef0", "zzzzzzzz", ""])
    def test_rejects_invalid_fingerprint(self, bad):
        assert not is_fingerprint(bad)
        with pytest.raises(ValueError):
            insert_fingerprint("style.css", bad)
