"""Application-level configuration models."""

from __future__ import annotations

from pathlib import Path

from pydantic import Field

from submission_archiver.config.atcoder import AtCoderConfig
from submission_archiver.config.base import BaseConfig

DEFAULT_STATE_DIR = Path(".submission-archiver/state")


class RootConfig(BaseConfig):
    """Top-level configuration for the submission archiver."""

    state_dir: Path = Field(DEFAULT_STATE_DIR, description="Directory holding resumable archiver state")
    atcoder: AtCoderConfig = Field(
        default_factory=lambda: AtCoderConfig(user_id=""),
        description="AtCoder platform configuration",
    )

    def platforms(self) -> dict[str, AtCoderConfig]:
        """Return every platform table keyed by its TOML name."""

        return {"atcoder": self.atcoder}

    def enabled_platforms(self) -> dict[str, AtCoderConfig]:
        return {name: cfg for name, cfg in self.platforms().items() if cfg.enable}


__all__ = ["RootConfig", "DEFAULT_STATE_DIR"]
