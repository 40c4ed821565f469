"""Tests for pkg_templates_yo.licenses."""

from __future__ import annotations

import pytest

from pkg_templates_yo.errors import UnknownLicenseError
from pkg_templates_yo.licenses import DEFAULT_LICENSES, LICENSE_DIR, LICENSE_NAMES, LicenseStore


class TestShippedLicenses:
    def test_every_named_license_ships(self):
        for license_id in LICENSE_NAMES:
            assert (LICENSE_DIR / license_id).is_file()
            assert DEFAULT_LICENSES.exists(license_id)

    def test_available_sorted(self):
        ids = [i for i, _ in DEFAULT_LICENSES.available()]
        assert ids == sorted(ids)
        assert ("MIT", 'MIT "Expat" License') in DEFAULT_LICENSES.available()

    def test_text_has_no_trailing_newline(self):
        text = DEFAULT_LICENSES.text("MIT")
        assert text
        assert not text.endswith("\n")


class TestLookup:
    @pytest.mark.parametrize("license_id", ["", "NOPE", "../licenses/MIT", ".hidden", "a/b"])
    def test_not_found(self, license_id):
        assert not DEFAULT_LICENSES.exists(license_id)
        with pytest.raises(UnknownLicenseError):
            DEFAULT_LICENSES.text(license_id)

    def test_custom_directory(self, tmp_path):
        (tmp_path / "Mine").write_text("my terms\n\n")
        store = LicenseStore(tmp_path, names={"Mine": "My License"})
        assert store.exists("Mine")
        assert not store.exists("MIT")
        assert store.text("Mine") == "my terms"
        assert store.available() == [("Mine", "My License")]

    def test_unnamed_license_lists_id(self, tmp_path):
        (tmp_path / "Other").write_text("x")
        (tmp_path / "subdir").mkdir()
        assert LicenseStore(tmp_path, names={}).available() == [("Other", "Other")]
