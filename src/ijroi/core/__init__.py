"""ijroi Core — ROI record models and exceptions."""

from ijroi.core.exceptions import (
    ArchiveError,
    CollectionEntryError,
    DuplicateKeyError,
    InvalidSignatureError,
    RoiDecodeError,
    RoiError,
    RoiTooLargeError,
    TruncatedHeaderError,
    UnrecognizedRoiTypeError,
    UnsupportedCompositeRoiError,
    UnsupportedVersionError,
)
from ijroi.core.models import (
    ArchiveMember,
    ArrowParams,
    EllipseParams,
    RoiCollection,
    RoiOptions,
    RoiRecord,
    RoiSubtype,
    RoiType,
)

__all__ = [
    "ArchiveMember",
    "ArrowParams",
    "EllipseParams",
    "RoiCollection",
    "RoiOptions",
    "RoiRecord",
    "RoiSubtype",
    "RoiType",
    "RoiError",
    "RoiDecodeError",
    "InvalidSignatureError",
    "TruncatedHeaderError",
    "UnsupportedCompositeRoiError",
    "UnrecognizedRoiTypeError",
    "UnsupportedVersionError",
    "RoiTooLargeError",
    "DuplicateKeyError",
    "CollectionEntryError",
    "ArchiveError",
]
