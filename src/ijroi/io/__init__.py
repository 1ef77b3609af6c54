"""ijroi IO — ROI decoder, collection reader and archive access."""

from __future__ import annotations

from ijroi.io.archive import iter_zip_entries, list_zip
from ijroi.io.collection import RoiCollectionReader, read_collection, read_zip
from ijroi.io.config import ReaderConfig
from ijroi.io.decoder import decode_roi, read_roi, roi_name

__all__ = [
    "ReaderConfig",
    "RoiCollectionReader",
    "decode_roi",
    "iter_zip_entries",
    "list_zip",
    "read_collection",
    "read_roi",
    "read_zip",
    "roi_name",
]
