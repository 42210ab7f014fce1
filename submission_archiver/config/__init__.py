"""Configuration namespace for the submission archiver."""

from __future__ import annotations

from .app import DEFAULT_STATE_DIR, RootConfig
from .atcoder import ArchiveTargets, AtCoderConfig, OutFormat
from .base import (
    BaseConfig,
    ConfigError,
    ConfigParseError,
    ConfigReadError,
    dump_config,
    load_config,
    load_config_text,
)
from .git import TEMPLATE_PLACEHOLDERS, CommitMode, GitConfig
from .languages import DEFAULT_LANGUAGES, LangRule, match_language

__all__ = [
    "BaseConfig",
    "RootConfig",
    "DEFAULT_STATE_DIR",
    "AtCoderConfig",
    "OutFormat",
    "ArchiveTargets",
    "GitConfig",
    "CommitMode",
    "TEMPLATE_PLACEHOLDERS",
    "LangRule",
    "DEFAULT_LANGUAGES",
    "match_language",
    "ConfigError",
    "ConfigReadError",
    "ConfigParseError",
    "load_config",
    "load_config_text",
    "dump_config",
]
