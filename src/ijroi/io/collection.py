"""RoiCollectionReader — decode every entry of a ROI set into one collection."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from contextlib import closing
from pathlib import Path
from typing import BinaryIO, Union

from ijroi.core.exceptions import CollectionEntryError, DuplicateKeyError, RoiError
from ijroi.core.models import RoiCollection, RoiRecord
from ijroi.io.archive import iter_zip_entries
from ijroi.io.config import ReaderConfig
from ijroi.io.decoder import decode_roi

logger = logging.getLogger(__name__)

EntryContent = Union[bytes, BinaryIO]


def _read_content(content: EntryContent) -> bytes:
    """Return the bytes of an entry, consuming and closing a stream."""
    if isinstance(content, (bytes, bytearray, memoryview)):
        return bytes(content)
    with content:
        return content.read()


class RoiCollectionReader:
    """Decodes an ordered list of named ROI entries.

    The read is all-or-nothing: the first entry that fails aborts the
    whole collection with a CollectionEntryError naming that entry.
    """

    def __init__(self, config: ReaderConfig | None = None) -> None:
        self.config = config or ReaderConfig()

    def read(
        self,
        entries: Iterable[tuple[str, EntryContent]],
        use_names: bool = True,
    ) -> RoiCollection:
        """Decode all entries in order.

        Args:
            entries: ``(name, content)`` pairs in archive order. Content is
                bytes or a readable binary stream.
            use_names: Key records by their file stem. When False, keys are
                ``<type>.<ordinal>`` with a 1-based running ordinal.

        Returns:
            RoiCollection preserving the entry order.

        Raises:
            CollectionEntryError: On the first entry that fails to decode or
                (with ``on_duplicate="error"``) repeats an existing key.
        """
        records: dict[str, RoiRecord] = {}

        for ordinal, (name, content) in enumerate(entries, start=1):
            try:
                record = decode_roi(_read_content(content), name=name, config=self.config)
            except RoiError as e:
                logger.error("Failed to decode ROI entry %r: %s", name, e)
                raise CollectionEntryError(name, e) from e

            if use_names:
                key = record.name or name
            else:
                key = f"{record.str_type}.{ordinal}"

            if key in records:
                policy = self.config.on_duplicate
                if policy == "error":
                    dup = DuplicateKeyError(key)
                    raise CollectionEntryError(name, dup) from dup
                logger.warning(
                    "Duplicate ROI key %r from entry %r; keeping the %s entry",
                    key, name, policy,
                )
                if policy == "first":
                    continue
            records[key] = record

        logger.info("Read %d ROIs", len(records))
        return RoiCollection(records)


def read_collection(
    entries: Iterable[tuple[str, EntryContent]],
    use_names: bool = True,
    config: ReaderConfig | None = None,
) -> RoiCollection:
    """Decode ``(name, content)`` entries into a RoiCollection. Convenience wrapper."""
    return RoiCollectionReader(config).read(entries, use_names=use_names)


def read_zip(
    path: Path,
    use_names: bool = True,
    config: ReaderConfig | None = None,
) -> RoiCollection:
    """Read every ROI stored in a ``.zip`` archive.

    Args:
        path: Path to the archive.
        use_names: Key records by member stem instead of ``<type>.<ordinal>``.
        config: Reader settings. Uses defaults if not provided.

    Returns:
        RoiCollection in archive order.
    """
    with closing(iter_zip_entries(path)) as entries:
        return read_collection(entries, use_names=use_names, config=config)
