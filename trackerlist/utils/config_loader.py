from __future__ import annotations

from pathlib import Path
from typing import List

import yaml

from ..errors import ConfigError
from ..models import SourceDescriptor

__all__ = ["ConfigError", "load_sources_config", "parse_sources_document"]


def parse_sources_document(data: object) -> List[SourceDescriptor]:
    """Turn a decoded sources document into descriptors.

    Expected structure: a mapping whose ``trackers`` key is a list of
    non-empty strings. Each string is either a tracker (ends with
    ``announce``) or the URL of a tracker list. Unknown top-level keys are
    ignored for forward compatibility.
    """
    if not isinstance(data, dict):
        raise ConfigError("Sources document must be a mapping with a 'trackers' key")

    raw = data.get("trackers")
    if not isinstance(raw, list):
        raise ConfigError("'trackers' must be a list in the YAML configuration")

    sources: List[SourceDescriptor] = []
    for item in raw:
        if not isinstance(item, str):
            raise ConfigError(f"Each tracker entry must be a string, got: {type(item)}")
        value = item.strip()
        if not value:
            raise ConfigError("Tracker entries must not be empty")
        sources.append(SourceDescriptor(value))
    return sources


def load_sources_config(path: Path | str) -> List[SourceDescriptor]:
    """Load ``trackers.yaml`` into ``SourceDescriptor`` instances."""
    config_path = Path(path)
    if not config_path.exists():
        raise ConfigError(f"Config file not found: {config_path}")

    with config_path.open("r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise ConfigError(f"Invalid YAML in {config_path}: {exc}") from exc

    return parse_sources_document(data)
