"""ijroi — read ImageJ ROI files and ROI Manager archives."""

from ijroi.core import (
    CollectionEntryError,
    RoiCollection,
    RoiDecodeError,
    RoiError,
    RoiRecord,
    RoiSubtype,
    RoiType,
)
from ijroi.io import (
    ReaderConfig,
    decode_roi,
    list_zip,
    read_collection,
    read_roi,
    read_zip,
)

__all__ = [
    "CollectionEntryError",
    "ReaderConfig",
    "RoiCollection",
    "RoiDecodeError",
    "RoiError",
    "RoiRecord",
    "RoiSubtype",
    "RoiType",
    "decode_roi",
    "list_zip",
    "read_collection",
    "read_roi",
    "read_zip",
]
