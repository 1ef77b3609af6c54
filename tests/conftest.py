"""Shared test fixtures for ijroi."""

from __future__ import annotations

import struct
import zipfile
from pathlib import Path
from typing import Callable, Sequence

import pytest


def _short(value: int) -> bytes:
    """Pack a signed or unsigned 16-bit value big-endian."""
    return struct.pack(">H", value & 0xFFFF)


def build_roi(
    roi_type: int = 1,
    *,
    version: int = 228,
    top: int = 0,
    left: int = 0,
    bottom: int = 0,
    right: int = 0,
    n_coordinates: int | None = None,
    line: tuple[float, float, float, float] = (0.0, 0.0, 0.0, 0.0),
    stroke_width: int = 0,
    shape_roi_size: int = 0,
    stroke_color: int = 0,
    fill_color: int = 0,
    subtype: int = 0,
    options: int = 0,
    arrow_style: int = 0,
    arrow_head_size: int = 0,
    arc_size: int = 0,
    aspect_ratio: float | None = None,
    position: int = 0,
    xs: Sequence[int] = (),
    ys: Sequence[int] = (),
    trailing: bytes = b"",
) -> bytes:
    """Build the bytes of a ROI file with the given header fields."""
    n = len(xs) if n_coordinates is None else n_coordinates
    header = b"Iout" + _short(version) + bytes([roi_type, 0])
    header += b"".join(_short(v) for v in (top, left, bottom, right, n))
    header += struct.pack(">ffff", *line)
    header += _short(stroke_width)
    header += struct.pack("<iii", shape_roi_size, stroke_color, fill_color)
    header += _short(subtype) + _short(options)
    if aspect_ratio is not None:
        header += struct.pack(">f", aspect_ratio)
    else:
        header += bytes([arrow_style, arrow_head_size]) + _short(arc_size)
    header += struct.pack("<i", position) + b"\x00" * 4
    assert len(header) == 64

    body = b"".join(_short(v) for v in xs) + b"".join(_short(v) for v in ys)
    return header + body + trailing


def build_zip(path: Path, members: Sequence[tuple[str, bytes]]) -> Path:
    """Write ``(name, content)`` members to a zip archive, in order."""
    with zipfile.ZipFile(path, "w") as zf:
        for name, content in members:
            zf.writestr(name, content)
    return path


@pytest.fixture
def make_roi() -> Callable[..., bytes]:
    """Factory for ROI file bytes."""
    return build_roi


@pytest.fixture
def make_zip() -> Callable[[Path, Sequence[tuple[str, bytes]]], Path]:
    """Factory for ROI zip archives."""
    return build_zip
