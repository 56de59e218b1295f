"""Configuration package for the tailspin highlighter.

Main components:
- model.py: Typed, immutable configuration schema (styles and groups)
- config.py: Resolver choosing between an explicit file, the user file and the bundled default
- bootstrap.py: Writes the bundled default to the user's config directory
- paths.py: Home directory and conventional path helpers
"""
from __future__ import annotations

from .model import (
    Color,
    Config,
    Date,
    FilePath,
    Groups,
    Ip,
    Keyword,
    Number,
    Quotes,
    Style,
    Url,
    Uuid,
)
from .config import ConfigLoader, load_config, parse_config, default_config_text
from .bootstrap import DefaultConfigGenerator, generate_default_config

__all__ = [
    "Color",
    "Config",
    "Date",
    "FilePath",
    "Groups",
    "Ip",
    "Keyword",
    "Number",
    "Quotes",
    "Style",
    "Url",
    "Uuid",
    "ConfigLoader",
    "load_config",
    "parse_config",
    "default_config_text",
    "DefaultConfigGenerator",
    "generate_default_config",
]
