"""Exception classes for the ijroi core module."""


class RoiError(Exception):
    """Base exception for all ROI reading errors."""


class RoiDecodeError(RoiError):
    """Raised when a single ROI file cannot be decoded."""


class InvalidSignatureError(RoiDecodeError):
    """Raised when the data does not start with the ``Io`` signature."""

    def __init__(self, found: bytes | None = None) -> None:
        if found is not None:
            msg = f"Not an ImageJ ROI: expected signature b'Io', got {found!r}"
        else:
            msg = "Not an ImageJ ROI: signature mismatch"
        super().__init__(msg)
        self.found = found


class TruncatedHeaderError(RoiDecodeError):
    """Raised when the data ends before the header or coordinate block."""

    def __init__(self, needed: int | None = None, available: int | None = None) -> None:
        if needed is not None and available is not None:
            msg = f"Truncated ROI data: needed {needed} bytes, only {available} available"
        else:
            msg = "Truncated ROI data"
        super().__init__(msg)
        self.needed = needed
        self.available = available


class UnsupportedCompositeRoiError(RoiDecodeError):
    """Raised for composite (ShapeRoi) ROIs, which are not supported."""

    def __init__(self, shape_roi_size: int | None = None) -> None:
        msg = "Composite ROIs not supported"
        if shape_roi_size is not None:
            msg = f"{msg} (shape ROI size {shape_roi_size})"
        super().__init__(msg)
        self.shape_roi_size = shape_roi_size


class UnrecognizedRoiTypeError(RoiDecodeError):
    """Raised when the type byte is not a known ROI type."""

    def __init__(self, code: int | None = None) -> None:
        msg = f"Unrecognized ROI type: {code}" if code is not None else "Unrecognized ROI type"
        super().__init__(msg)
        self.code = code


class UnsupportedVersionError(RoiDecodeError):
    """Raised when the file version is below the configured minimum."""

    def __init__(self, version: int | None = None, min_version: int | None = None) -> None:
        if version is not None and min_version is not None:
            msg = f"ROI version {version} is older than the minimum supported {min_version}"
        else:
            msg = "Unsupported ROI version"
        super().__init__(msg)
        self.version = version
        self.min_version = min_version


class RoiTooLargeError(RoiDecodeError):
    """Raised when a file without a ``.roi`` suffix exceeds the size limit."""

    def __init__(self, size: int | None = None, limit: int | None = None) -> None:
        if size is not None and limit is not None:
            msg = f"This is not an ROI or file size > {limit} bytes (got {size})"
        else:
            msg = "This is not an ROI or file is too large"
        super().__init__(msg)
        self.size = size
        self.limit = limit


class DuplicateKeyError(RoiError):
    """Raised when two collection entries map to the same key."""

    def __init__(self, key: str | None = None) -> None:
        msg = f"Duplicate collection key: {key}" if key else "Duplicate collection key"
        super().__init__(msg)
        self.key = key


class CollectionEntryError(RoiError):
    """Raised when one entry of a collection fails; aborts the whole read."""

    def __init__(self, name: str, cause: Exception) -> None:
        super().__init__(f"Failed to read ROI entry {name!r}: {cause}")
        self.name = name
        self.cause = cause


class ArchiveError(RoiError):
    """Raised when a ROI archive cannot be opened or listed."""

    def __init__(self, path: str | None = None, reason: str | None = None) -> None:
        msg = f"Cannot read ROI archive: {path}" if path else "Cannot read ROI archive"
        if reason:
            msg = f"{msg} ({reason})"
        super().__init__(msg)
        self.path = path
        self.reason = reason
