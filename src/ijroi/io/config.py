"""Reader configuration."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

_VALID_DUPLICATE_POLICIES = frozenset({"first", "last", "error"})

# Files older than ImageJ 1.43i carry no stroke/subtype/options fields.
MODERN_VERSION = 218


@dataclass(frozen=True)
class ReaderConfig:
    """Settings shared by the decoder and the collection reader.

    Attributes:
        min_version: Reject files whose header version is lower than this.
            0 accepts every version.
        max_file_size: Inputs not named ``*.roi`` larger than this many
            bytes are rejected before decoding.
        on_duplicate: What to do when two entries map to the same
            collection key: ``"last"`` (later entry replaces earlier),
            ``"first"`` (later entry is dropped) or ``"error"``.
    """

    min_version: int = 0
    max_file_size: int = 5 * 1024 * 1024
    on_duplicate: str = "last"

    def __post_init__(self) -> None:
        """Validate settings at construction time."""
        if self.min_version < 0:
            raise ValueError(f"min_version must be >= 0, got {self.min_version}")
        if self.max_file_size < 0:
            raise ValueError(f"max_file_size must be >= 0, got {self.max_file_size}")
        if self.on_duplicate not in _VALID_DUPLICATE_POLICIES:
            raise ValueError(
                f"Invalid on_duplicate policy: {self.on_duplicate!r}. "
                f"Must be one of {sorted(_VALID_DUPLICATE_POLICIES)}"
            )

    def to_yaml(self, path: Path) -> None:
        """Serialize this config to a YAML file."""
        from ijroi.io.serialization import config_to_yaml

        config_to_yaml(self, path)

    @classmethod
    def from_yaml(cls, path: Path) -> ReaderConfig:
        """Deserialize a ReaderConfig from a YAML file."""
        from ijroi.io.serialization import config_from_yaml

        return config_from_yaml(path)
