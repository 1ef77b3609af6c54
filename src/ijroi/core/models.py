"""Data models for the ijroi core module."""

from __future__ import annotations

import enum
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from typing import Any, Union

import numpy as np


class RoiType(enum.IntEnum):
    """ROI shape classification, stored as one byte at offset 6."""

    POLYGON = 0
    RECT = 1
    OVAL = 2
    LINE = 3
    FREELINE = 4
    POLYLINE = 5
    NO_ROI = 6
    FREEHAND = 7
    TRACED = 8
    ANGLE = 9
    POINT = 10

    @property
    def str_type(self) -> str:
        """Lowercase type name used for synthesized collection keys."""
        return self.name.lower().replace("_", "")

    @property
    def has_coordinates(self) -> bool:
        """Whether the type stores x/y deltas after the header."""
        return self in _COORDINATE_TYPES


_COORDINATE_TYPES = frozenset({
    RoiType.POLYGON,
    RoiType.FREEHAND,
    RoiType.TRACED,
    RoiType.POLYLINE,
    RoiType.FREELINE,
    RoiType.ANGLE,
    RoiType.POINT,
})


class RoiSubtype(enum.IntEnum):
    """Secondary classification modifying how a type's fields are read."""

    TEXT = 1
    ARROW = 2
    ELLIPSE = 3
    IMAGE = 4


class RoiOptions(enum.IntFlag):
    """Option bits stored in the 16-bit options field."""

    SPLINE_FIT = 0x01
    DOUBLE_HEADED = 0x02
    OUTLINE = 0x04


@dataclass(frozen=True)
class ArrowParams:
    """Arrow style, head size and rounded-rect arc size (offsets 52-55)."""

    arrow_style: int
    arrow_head_size: int
    arc_size: int


@dataclass(frozen=True)
class EllipseParams:
    """Aspect ratio of an ellipse stored as a Freehand ROI (offsets 52-55)."""

    aspect_ratio: float


ShapeParams = Union[ArrowParams, EllipseParams]


def argb_to_rgba(value: int) -> tuple[int, int, int, int] | None:
    """Split a packed ARGB color into ``(r, g, b, a)``.

    A stored value of 0 means the color was never set and returns None.
    """
    if value == 0:
        return None
    value &= 0xFFFFFFFF
    return (
        (value >> 16) & 0xFF,
        (value >> 8) & 0xFF,
        value & 0xFF,
        (value >> 24) & 0xFF,
    )


# eq=False: coordinates is a numpy array, so records compare by identity.
@dataclass(frozen=True, eq=False)
class RoiRecord:
    """One decoded ImageJ ROI.

    ``roi_type`` (together with ``subtype``) decides which of the optional
    fields are meaningful: ``options`` is None for plain lines, and
    ``shape_params`` is an :class:`EllipseParams` only for Freehand ROIs
    with the Ellipse subtype and an :class:`ArrowParams` otherwise.

    ``coordinates`` is a read-only ``(N, 2)`` array of absolute x/y image
    coordinates. It is empty for Rect, Oval and NoRoi, which are fully
    described by their bounds.
    """

    roi_type: RoiType
    version: int
    top: int
    left: int
    bottom: int
    right: int
    line_endpoints: tuple[float, float, float, float]
    stroke_width: int
    shape_roi_size: int
    stroke_color: int
    fill_color: int
    subtype_code: int
    options: RoiOptions | None
    shape_params: ShapeParams
    position: int
    coordinates: np.ndarray = field(repr=False)
    name: str | None = None

    @property
    def width(self) -> int:
        return self.right - self.left

    @property
    def height(self) -> int:
        return self.bottom - self.top

    @property
    def subtype(self) -> RoiSubtype | None:
        """The subtype, or None when unset (0) or not a known code."""
        try:
            return RoiSubtype(self.subtype_code) if self.subtype_code else None
        except ValueError:
            return None

    @property
    def str_type(self) -> str:
        return self.roi_type.str_type

    @property
    def str_subtype(self) -> str | None:
        subtype = self.subtype
        return subtype.name if subtype is not None else None

    @property
    def n_coordinates(self) -> int:
        return len(self.coordinates)

    @property
    def arrow_style(self) -> int | None:
        if isinstance(self.shape_params, ArrowParams):
            return self.shape_params.arrow_style
        return None

    @property
    def arrow_head_size(self) -> int | None:
        if isinstance(self.shape_params, ArrowParams):
            return self.shape_params.arrow_head_size
        return None

    @property
    def arc_size(self) -> int | None:
        if isinstance(self.shape_params, ArrowParams):
            return self.shape_params.arc_size
        return None

    @property
    def aspect_ratio(self) -> float | None:
        if isinstance(self.shape_params, EllipseParams):
            return self.shape_params.aspect_ratio
        return None

    @property
    def is_arrow(self) -> bool:
        return self.roi_type == RoiType.LINE and self.subtype == RoiSubtype.ARROW

    @property
    def double_headed(self) -> bool | None:
        """Double-headed arrow flag; None unless this is an arrow."""
        if not self.is_arrow or self.options is None:
            return None
        return bool(self.options & RoiOptions.DOUBLE_HEADED)

    @property
    def outline(self) -> bool | None:
        """Outlined arrow flag; None unless this is an arrow."""
        if not self.is_arrow or self.options is None:
            return None
        return bool(self.options & RoiOptions.OUTLINE)

    @property
    def spline_fit(self) -> bool | None:
        if self.options is None:
            return None
        return bool(self.options & RoiOptions.SPLINE_FIT)

    @property
    def stroke_rgba(self) -> tuple[int, int, int, int] | None:
        return argb_to_rgba(self.stroke_color)

    @property
    def fill_rgba(self) -> tuple[int, int, int, int] | None:
        return argb_to_rgba(self.fill_color)

    @property
    def x_range(self) -> tuple[Any, Any] | None:
        """``(min, max)`` of x, from bounds for Rect/Oval, else from coordinates."""
        if self.roi_type in (RoiType.RECT, RoiType.OVAL):
            return (min(self.left, self.right), max(self.left, self.right))
        return self._coordinate_range(0)

    @property
    def y_range(self) -> tuple[Any, Any] | None:
        """``(min, max)`` of y, from bounds for Rect/Oval, else from coordinates."""
        if self.roi_type in (RoiType.RECT, RoiType.OVAL):
            return (min(self.top, self.bottom), max(self.top, self.bottom))
        return self._coordinate_range(1)

    def _coordinate_range(self, axis: int) -> tuple[Any, Any] | None:
        if self.coordinates.size == 0:
            return None
        column = self.coordinates[:, axis]
        return (column.min().item(), column.max().item())

    def to_dict(self) -> dict[str, Any]:
        """Plain-Python view of the record, for JSON output."""
        return {
            "name": self.name,
            "type": self.str_type,
            "subtype": self.str_subtype,
            "version": self.version,
            "top": self.top,
            "left": self.left,
            "bottom": self.bottom,
            "right": self.right,
            "width": self.width,
            "height": self.height,
            "line_endpoints": list(self.line_endpoints),
            "stroke_width": self.stroke_width,
            "stroke_color": self.stroke_color,
            "fill_color": self.fill_color,
            "options": int(self.options) if self.options is not None else None,
            "arrow_style": self.arrow_style,
            "arrow_head_size": self.arrow_head_size,
            "arc_size": self.arc_size,
            "aspect_ratio": self.aspect_ratio,
            "position": self.position,
            "coordinates": self.coordinates.tolist(),
            "x_range": list(self.x_range) if self.x_range else None,
            "y_range": list(self.y_range) if self.y_range else None,
        }


class RoiCollection(Mapping[str, RoiRecord]):
    """Read-only mapping of collection key to record, in archive order."""

    def __init__(self, records: Mapping[str, RoiRecord] | None = None) -> None:
        self._records: dict[str, RoiRecord] = dict(records or {})

    def __getitem__(self, key: str) -> RoiRecord:
        return self._records[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __repr__(self) -> str:
        return f"RoiCollection({list(self._records)!r})"

    def records(self) -> list[RoiRecord]:
        return list(self._records.values())

    def summary_rows(self) -> list[dict[str, Any]]:
        """One row per record for tabular display."""
        return [
            {
                "key": key,
                "type": rec.str_type,
                "subtype": rec.str_subtype or "",
                "left": rec.left,
                "top": rec.top,
                "width": rec.width,
                "height": rec.height,
                "points": rec.n_coordinates,
                "position": rec.position,
            }
            for key, rec in self._records.items()
        ]


@dataclass(frozen=True)
class ArchiveMember:
    """A member of a ROI archive as reported by the listing mode."""

    name: str
    compressed_size: int
    file_size: int
