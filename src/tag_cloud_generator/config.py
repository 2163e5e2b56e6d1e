from __future__ import annotations

from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, List, Mapping, MutableMapping

import yaml

from .fonts import MAX_FONT, MIN_FONT
from .tokenization import SEPARATORS

DEFAULT_STYLESHEETS = [
    "doc/tagcloud.css",
    "http://web.cse.ohio-state.edu/software/2231/web-sw2/assignments/projects/"
    "tag-cloud-generator/data/tagcloud.css",
]


@dataclass(slots=True)
class TagCloudConfig:
    """Configuration options for tag cloud generation."""

    min_font: int = MIN_FONT
    max_font: int = MAX_FONT
    font_class_prefix: str = "f"
    separators: str = "".join(sorted(SEPARATORS))
    stylesheets: List[str] = field(default_factory=lambda: list(DEFAULT_STYLESHEETS))
    encoding: str = "utf-8"

    @property
    def separator_set(self) -> frozenset[str]:
        return frozenset(self.separators)

    def to_dict(self) -> dict[str, Any]:
        """Return a mutable dictionary representation of the configuration."""
        return dict(asdict(self))


def config_from_dict(data: Mapping[str, Any] | None) -> TagCloudConfig:
    """Build a TagCloudConfig from a dictionary-like input."""
    if data is None:
        return TagCloudConfig()
    allowed = {item.name for item in fields(TagCloudConfig)}
    config = TagCloudConfig(**{key: data[key] for key in data if key in allowed})
    if config.min_font > config.max_font:
        raise ValueError(
            f"min_font ({config.min_font}) must not exceed max_font ({config.max_font})."
        )
    return config


def config_from_yaml(path: str | Path) -> TagCloudConfig:
    """Read font range, separators and stylesheets from a YAML mapping."""
    with Path(path).open("r", encoding="utf-8") as handle:
        parsed = yaml.safe_load(handle) or {}
    if not isinstance(parsed, MutableMapping):
        raise ValueError(f"Cloud configuration {path} must be a YAML mapping.")
    return config_from_dict(parsed)


def load_config(path: str | Path | None = None) -> TagCloudConfig:
    """Return run settings, falling back to the 11-48 scale without a file."""
    return TagCloudConfig() if path is None else config_from_yaml(path)
