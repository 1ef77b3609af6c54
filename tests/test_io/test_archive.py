"""Tests for ijroi.io.archive."""

from __future__ import annotations

import zipfile
from pathlib import Path

import pytest

from ijroi.core.exceptions import ArchiveError
from ijroi.core.models import ArchiveMember
from ijroi.io.archive import iter_zip_entries, list_zip


@pytest.fixture
def roi_zip(tmp_path: Path, make_roi, make_zip) -> Path:
    return make_zip(tmp_path / "RoiSet.zip", [
        ("b.roi", make_roi(1)),
        ("a.roi", make_roi(0, xs=[1, 2, 3], ys=[4, 5, 6])),
    ])


class TestListZip:
    def test_members_in_archive_order(self, roi_zip: Path):
        members = list_zip(roi_zip)
        assert [m.name for m in members] == ["b.roi", "a.roi"]
        assert all(isinstance(m, ArchiveMember) for m in members)

    def test_sizes(self, roi_zip: Path):
        members = list_zip(roi_zip)
        assert members[0].file_size == 64
        assert members[1].file_size == 64 + 12
        assert members[0].compressed_size > 0

    def test_directories_skipped(self, tmp_path: Path, make_roi):
        path = tmp_path / "nested.zip"
        with zipfile.ZipFile(path, "w") as zf:
            zf.writestr("rois/", b"")
            zf.writestr("rois/x.roi", make_roi(1))
        assert [m.name for m in list_zip(path)] == ["rois/x.roi"]

    def test_not_a_zip(self, tmp_path: Path):
        path = tmp_path / "fake.zip"
        path.write_bytes(b"definitely not a zip")
        with pytest.raises(ArchiveError, match="fake.zip"):
            list_zip(path)

    def test_missing_archive(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            list_zip(tmp_path / "missing.zip")


class TestIterZipEntries:
    def test_yields_names_and_bytes(self, roi_zip: Path, make_roi):
        entries = list(iter_zip_entries(roi_zip))
        assert [name for name, _ in entries] == ["b.roi", "a.roi"]
        assert entries[0][1] == make_roi(1)

    def test_not_a_zip(self, tmp_path: Path):
        path = tmp_path / "fake.zip"
        path.write_bytes(b"PK nothing")
        with pytest.raises(ArchiveError):
            list(iter_zip_entries(path))
