"""YAML serialization for ReaderConfig.

Requires pyyaml. Raises ImportError with clear install instructions
if pyyaml is not available.
"""

from __future__ import annotations

from dataclasses import fields
from pathlib import Path
from typing import Any

from ijroi.io.config import ReaderConfig


def _require_yaml() -> Any:
    """Import and return the yaml module, or raise a helpful error."""
    try:
        import yaml

        return yaml
    except ImportError:
        raise ImportError(
            "pyyaml is required for reader config serialization. "
            "Install it with: pip install pyyaml"
        ) from None


def config_to_yaml(config: ReaderConfig, path: Path) -> None:
    """Serialize a ReaderConfig to a YAML file.

    Args:
        config: The config to serialize.
        path: File path to write.
    """
    yaml = _require_yaml()

    data: dict[str, Any] = {
        "min_version": config.min_version,
        "max_file_size": config.max_file_size,
        "on_duplicate": config.on_duplicate,
    }

    with open(path, "w") as f:
        yaml.dump(data, f, default_flow_style=False, sort_keys=False)


def config_from_yaml(path: Path) -> ReaderConfig:
    """Deserialize a ReaderConfig from a YAML file.

    Missing keys fall back to the defaults. An empty file gives the
    default config.

    Args:
        path: Path to the YAML file.

    Returns:
        Reconstructed ReaderConfig.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the YAML is not a mapping, has unknown keys, or
            holds invalid values.
    """
    yaml = _require_yaml()

    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Reader config not found: {path}")

    with open(path) as f:
        data = yaml.safe_load(f)

    if data is None:
        return ReaderConfig()
    if not isinstance(data, dict):
        raise ValueError(
            f"Reader config must be a mapping, got {type(data).__name__}"
        )

    known = {f.name for f in fields(ReaderConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ValueError(f"Unknown reader config keys: {unknown}")

    kwargs: dict[str, Any] = {}
    for key in ("min_version", "max_file_size"):
        if key in data:
            try:
                kwargs[key] = int(data[key])
            except (TypeError, ValueError) as e:
                raise ValueError(f"Invalid value for {key!r}: {data[key]!r}") from e
    if "on_duplicate" in data:
        kwargs["on_duplicate"] = str(data["on_duplicate"])

    return ReaderConfig(**kwargs)
