"""Zip archive access for ROI sets saved by the ImageJ ROI Manager."""

from __future__ import annotations

import logging
import zipfile
from collections.abc import Iterator
from pathlib import Path

from ijroi.core.exceptions import ArchiveError
from ijroi.core.models import ArchiveMember

logger = logging.getLogger(__name__)


def _open_zip(path: Path) -> zipfile.ZipFile:
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"ROI archive not found: {path}")
    try:
        return zipfile.ZipFile(path)
    except zipfile.BadZipFile as e:
        raise ArchiveError(str(path), str(e)) from e


def list_zip(path: Path) -> list[ArchiveMember]:
    """List the file members of a ROI archive without decoding them.

    Args:
        path: Path to the ``.zip`` archive.

    Returns:
        One ArchiveMember per file member, in archive order.

    Raises:
        FileNotFoundError: If the archive does not exist.
        ArchiveError: If the file is not a valid zip archive.
    """
    with _open_zip(path) as zf:
        return [
            ArchiveMember(
                name=info.filename,
                compressed_size=info.compress_size,
                file_size=info.file_size,
            )
            for info in zf.infolist()
            if not info.is_dir()
        ]


def iter_zip_entries(path: Path) -> Iterator[tuple[str, bytes]]:
    """Yield ``(member_name, content)`` for each file member, in archive order.

    The archive stays open until the iterator is exhausted or closed.

    Raises:
        FileNotFoundError: If the archive does not exist.
        ArchiveError: If the file is not a valid zip archive or a member
            cannot be read.
    """
    with _open_zip(path) as zf:
        infos = [info for info in zf.infolist() if not info.is_dir()]
        logger.debug("Archive %s: %d members", path, len(infos))
        for info in infos:
            try:
                with zf.open(info) as member:
                    content = member.read()
            except (zipfile.BadZipFile, OSError) as e:
                raise ArchiveError(str(path), f"{info.filename}: {e}") from e
            yield info.filename, content
