"""RoiDecoder — decode one ImageJ ``.roi`` file into a RoiRecord.

Header layout (64 bytes, offsets in bytes)::

    0-1     signature "Io"
    2-3     unused
    4-5     version
    6       roi type (one byte), 7 unused
    8-15    top, left, bottom, right
    16-17   NCoordinates
    18-33   x1, y1, x2, y2 (float)
    34-35   stroke width
    36-39   ShapeRoi size (composite ROI when > 0)
    40-47   stroke color, fill color
    48-49   subtype
    50-51   options
    52-55   arrow style, arrow head size, arc size | ellipse aspect ratio
    56-59   position
    60-63   reserved
    64-     x deltas (NCoordinates shorts), then y deltas

Shorts and floats are big-endian, ints are little-endian.
"""

from __future__ import annotations

import logging
import struct
from pathlib import Path, PurePosixPath

import numpy as np

from ijroi.core.exceptions import (
    InvalidSignatureError,
    RoiTooLargeError,
    TruncatedHeaderError,
    UnrecognizedRoiTypeError,
    UnsupportedCompositeRoiError,
    UnsupportedVersionError,
)
from ijroi.core.models import (
    ArrowParams,
    EllipseParams,
    RoiOptions,
    RoiRecord,
    RoiSubtype,
    RoiType,
)
from ijroi.io.config import MODERN_VERSION, ReaderConfig

logger = logging.getLogger(__name__)

SIGNATURE = b"Io"
HEADER_SIZE = 64
ROI_SUFFIX = ".roi"

# A signed short below this is re-read as unsigned. NCoordinates and
# coordinate deltas can exceed 32767 and the format gives no other hint.
UNSIGNED_SHORT_THRESHOLD = -5000

_SHORT = struct.Struct(">h")
_INT = struct.Struct("<i")
_FLOAT = struct.Struct(">f")


def reinterpret_short(value: int) -> int:
    """Apply the signed-to-unsigned rule to one signed 16-bit value."""
    if value < UNSIGNED_SHORT_THRESHOLD:
        return value & 0xFFFF
    return value


class _RoiCursor:
    """Sequential reader over the bytes of one ROI file."""

    def __init__(self, data: bytes) -> None:
        self._data = data
        self.pos = 0

    @property
    def remaining(self) -> int:
        return len(self._data) - self.pos

    def _take(self, n: int) -> bytes:
        if self.remaining < n:
            raise TruncatedHeaderError(self.pos + n, len(self._data))
        chunk = self._data[self.pos:self.pos + n]
        self.pos += n
        return chunk

    def skip(self, n: int) -> None:
        self._take(n)

    def read_byte(self) -> int:
        pos = self.pos
        value = self._take(1)[0]
        logger.debug("Pos %d: Byte %d", pos, value)
        return value

    def read_short(self) -> int:
        pos = self.pos
        value = reinterpret_short(_SHORT.unpack(self._take(2))[0])
        logger.debug("Pos %d: Short %d", pos, value)
        return value

    def read_int(self) -> int:
        pos = self.pos
        value = _INT.unpack(self._take(4))[0]
        logger.debug("Pos %d: Integer %d", pos, value)
        return value

    def read_float(self) -> float:
        pos = self.pos
        value = _FLOAT.unpack(self._take(4))[0]
        logger.debug("Pos %d: Float %s", pos, value)
        return value

    def read_shorts(self, count: int) -> np.ndarray:
        """Read ``count`` shorts as an int32 array, applying the unsigned rule."""
        raw = np.frombuffer(self._take(2 * count), dtype=">i2").astype(np.int32)
        raw[raw < UNSIGNED_SHORT_THRESHOLD] += 0x10000
        return raw


def roi_name(file_name: str | None) -> str | None:
    """Derive a ROI name from a file or archive member name.

    The base name is used with its trailing ``.roi`` removed. Names
    without that suffix give None.
    """
    if not file_name:
        return None
    base = PurePosixPath(file_name.replace("\\", "/")).name
    if base.endswith(ROI_SUFFIX) and len(base) > len(ROI_SUFFIX):
        return base[: -len(ROI_SUFFIX)]
    return None


def decode_roi(
    data: bytes,
    name: str | None = None,
    config: ReaderConfig | None = None,
) -> RoiRecord:
    """Decode the bytes of one ``.roi`` file.

    Args:
        data: Full content of the file.
        name: Optional file or archive member name; used for the record
            name and the size guard.
        config: Reader settings. Uses defaults if not provided.

    Returns:
        The decoded, immutable RoiRecord.

    Raises:
        InvalidSignatureError: If the data does not start with ``Io``.
        TruncatedHeaderError: If the header or coordinate block is short.
        UnsupportedCompositeRoiError: If the ShapeRoi size is positive.
        UnrecognizedRoiTypeError: If the type byte is not a known type.
        UnsupportedVersionError: If the version is below
            ``config.min_version``.
        RoiTooLargeError: If ``name`` does not end in ``.roi`` and the data
            exceeds ``config.max_file_size``.
    """
    config = config or ReaderConfig()
    data = bytes(data)

    if not (name or "").endswith(ROI_SUFFIX) and len(data) > config.max_file_size:
        raise RoiTooLargeError(len(data), config.max_file_size)

    if len(data) < len(SIGNATURE):
        raise TruncatedHeaderError(HEADER_SIZE, len(data))
    if data[:2] != SIGNATURE:
        raise InvalidSignatureError(data[:2])
    if len(data) < HEADER_SIZE:
        raise TruncatedHeaderError(HEADER_SIZE, len(data))

    cur = _RoiCursor(data)
    cur.skip(4)  # signature + unused
    version = cur.read_short()
    if version < config.min_version:
        raise UnsupportedVersionError(version, config.min_version)
    if version < MODERN_VERSION:
        logger.warning(
            "ROI %s has version %d (< %d); stroke, subtype and option fields "
            "may not be meaningful",
            name or "<bytes>", version, MODERN_VERSION,
        )

    type_code = cur.read_byte()
    try:
        roi_type = RoiType(type_code)
    except ValueError:
        raise UnrecognizedRoiTypeError(type_code) from None
    cur.skip(1)

    top = cur.read_short()
    left = cur.read_short()
    bottom = cur.read_short()
    right = cur.read_short()
    n_coordinates = cur.read_short()

    x1 = cur.read_float()
    y1 = cur.read_float()
    x2 = cur.read_float()
    y2 = cur.read_float()

    stroke_width = cur.read_short()
    shape_roi_size = cur.read_int()
    if shape_roi_size > 0:
        raise UnsupportedCompositeRoiError(shape_roi_size)

    stroke_color = cur.read_int()
    fill_color = cur.read_int()
    subtype_code = cur.read_short()

    options: RoiOptions | None
    if roi_type == RoiType.LINE and subtype_code != RoiSubtype.ARROW:
        options = None
        cur.skip(2)
    else:
        options = RoiOptions(cur.read_short() & 0xFFFF)

    shape_params: ArrowParams | EllipseParams
    if roi_type == RoiType.FREEHAND and subtype_code == RoiSubtype.ELLIPSE:
        shape_params = EllipseParams(aspect_ratio=cur.read_float())
    else:
        arrow_style = cur.read_byte()
        arrow_head_size = cur.read_byte()
        shape_params = ArrowParams(arrow_style, arrow_head_size, cur.read_short())

    position = cur.read_int()
    cur.skip(4)  # reserved

    if roi_type.has_coordinates and n_coordinates > 0:
        xs = np.maximum(cur.read_shorts(n_coordinates), 0) + left
        ys = np.maximum(cur.read_shorts(n_coordinates), 0) + top
        coordinates = np.column_stack((xs, ys)).astype(np.int32)
    elif roi_type == RoiType.LINE:
        coordinates = np.array([[x1, y1], [x2, y2]], dtype=np.float64)
    else:
        coordinates = np.empty((0, 2), dtype=np.int32)
    coordinates.setflags(write=False)

    return RoiRecord(
        roi_type=roi_type,
        version=version,
        top=top,
        left=left,
        bottom=bottom,
        right=right,
        line_endpoints=(x1, y1, x2, y2),
        stroke_width=stroke_width,
        shape_roi_size=shape_roi_size,
        stroke_color=stroke_color,
        fill_color=fill_color,
        subtype_code=subtype_code,
        options=options,
        shape_params=shape_params,
        position=position,
        coordinates=coordinates,
        name=roi_name(name),
    )


def read_roi(path: Path, config: ReaderConfig | None = None) -> RoiRecord:
    """Read and decode a ``.roi`` file from disk.

    Args:
        path: Path to the ``.roi`` file.
        config: Reader settings. Uses defaults if not provided.

    Returns:
        The decoded RoiRecord, named after the file.

    Raises:
        FileNotFoundError: If the path does not exist.
        RoiDecodeError: If the content cannot be decoded.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"ROI file not found: {path}")

    with open(path, "rb") as f:
        data = f.read()
    return decode_roi(data, name=path.name, config=config)
