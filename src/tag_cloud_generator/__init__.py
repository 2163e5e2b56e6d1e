"""
tag_cloud_generator package exports convenience helpers for library consumers.
"""

from __future__ import annotations

from .config import TagCloudConfig, config_from_dict, config_from_yaml, load_config
from .frequencies import count_words
from .pipeline import (
    InputUnreadableError,
    OutputUnwritableError,
    TagCloudError,
    generate_tag_cloud,
)
from .rendering import render_tag_cloud
from .selection import select_top_words
from .tokenization import next_word_or_separator

__all__ = [
    "TagCloudConfig",
    "config_from_dict",
    "config_from_yaml",
    "load_config",
    "count_words",
    "select_top_words",
    "render_tag_cloud",
    "next_word_or_separator",
    "generate_tag_cloud",
    "TagCloudError",
    "InputUnreadableError",
    "OutputUnwritableError",
]

__version__ = "0.1.0"
