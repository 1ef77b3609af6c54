"""Shared fixtures for CLI module tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner


@pytest.fixture
def runner() -> CliRunner:
    """Create a Click test runner."""
    return CliRunner()


@pytest.fixture
def roi_file(tmp_path: Path, make_roi) -> Path:
    """A single polygon ROI on disk."""
    path = tmp_path / "cell-7.roi"
    path.write_bytes(make_roi(
        0, top=10, left=20, bottom=14, right=23, xs=[0, 3, 1], ys=[0, 2, 4], position=2,
    ))
    return path


@pytest.fixture
def roi_archive(tmp_path: Path, make_roi, make_zip) -> Path:
    """A ROI Manager archive with three rectangles and a line."""
    return make_zip(tmp_path / "RoiSet.zip", [
        ("0001.roi", make_roi(1, right=10, bottom=10)),
        ("0002.roi", make_roi(1, right=5, bottom=5)),
        ("0003.roi", make_roi(3, line=(0.0, 0.0, 4.0, 4.0))),
        ("0004.roi", make_roi(1, right=2, bottom=2)),
    ])


@pytest.fixture
def broken_archive(tmp_path: Path, make_roi, make_zip) -> Path:
    """An archive whose last member is not a ROI."""
    return make_zip(tmp_path / "Broken.zip", [
        ("good.roi", make_roi(1)),
        ("notes.roi", b"\x00\x00 plain text"),
    ])
