"""Git commit batching configuration."""

from __future__ import annotations

from enum import Enum
from typing import assert_never

from pydantic import Field

from submission_archiver.config.base import BaseConfig

TEMPLATE_PLACEHOLDERS: frozenset[str] = frozenset(
    {"platform", "kind", "contest_id", "problem_id", "id", "count", "last_id", "total_files"}
)


class CommitMode(str, Enum):
    """How archived files are grouped into commits."""

    PER_FILE = "per_file"
    PER_CHUNK = "per_chunk"
    ONCE = "once"
    NONE = "none"


class GitConfig(BaseConfig):
    """Commit granularity and message templates for the archive repository."""

    mode: CommitMode = Field(CommitMode.NONE, description="Commit granularity: per_file, per_chunk, once or none")
    chunk_size: int = Field(
        50,
        ge=0,
        strict=True,
        description="Number of archived files per commit when mode is per_chunk",
    )
    per_file_template: str = Field(
        "[{platform}] archive({kind}): {contest_id}/{problem_id} ({id})",
        description="Commit message used for each archived file",
    )
    per_chunk_template: str = Field(
        "[{platform}] archive chunk: {count} files up to {last_id}",
        description="Commit message used for each chunk of archived files",
    )
    once_template: str = Field(
        "[{platform}] archive done: {total_files} files",
        description="Commit message used for a single commit after the whole run",
    )

    def active_template(self) -> str | None:
        """Return the message template used by the configured ``mode``."""

        if self.mode is CommitMode.PER_FILE:
            return self.per_file_template
        if self.mode is CommitMode.PER_CHUNK:
            return self.per_chunk_template
        if self.mode is CommitMode.ONCE:
            return self.once_template
        if self.mode is CommitMode.NONE:
            return None
        assert_never(self.mode)

    def templates(self) -> dict[str, str]:
        return {
            "per_file_template": self.per_file_template,
            "per_chunk_template": self.per_chunk_template,
            "once_template": self.once_template,
        }


__all__ = ["CommitMode", "GitConfig", "TEMPLATE_PLACEHOLDERS"]
