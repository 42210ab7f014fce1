"""AtCoder platform configuration models."""

from __future__ import annotations

from datetime import timedelta
from enum import Enum
from pathlib import Path

from pydantic import Field

from submission_archiver.config.base import BaseConfig
from submission_archiver.config.git import GitConfig
from submission_archiver.config.languages import DEFAULT_LANGUAGES, LangRule, match_language


class OutFormat(str, Enum):
    """On-disk shape of a single archived submission."""

    FILE = "file"
    DIRECTORY = "directory"


class ArchiveTargets(str, Enum):
    """Which submissions are fetched for archiving.

    Attributes:
        ALL: Every submission in every contest.
        AC_ALL: Every accepted submission.
        AC_LATEST: Only the latest accepted submission per problem.
        DEFAULT: The archiver's built-in selection.
    """

    ALL = "all"
    AC_ALL = "ac_all"
    AC_LATEST = "ac_latest"
    DEFAULT = "default"


class AtCoderConfig(BaseConfig):
    """Settings for archiving submissions from AtCoder."""

    enable: bool = Field(False, strict=True, description="Whether AtCoder archiving is active")
    user_id: str = Field(..., description="AtCoder account whose submissions are archived")
    out_dir: Path = Field(Path("archive/atcoder"), description="Directory the archive is written to")
    out_format: OutFormat = Field(OutFormat.FILE, description="Write each submission as a file or a directory")
    use_index: bool = Field(False, strict=True, description="Also write a per-submission index artifact")
    archive_targets: ArchiveTargets = Field(
        ArchiveTargets.DEFAULT,
        description="Submission subset to fetch: all, ac_all, ac_latest or default",
    )
    request_interval_ms: int = Field(
        400,
        ge=0,
        strict=True,
        description="Minimum delay between requests to AtCoder, in milliseconds",
    )
    git: GitConfig = Field(default_factory=GitConfig, description="Commit batching for the archive repository")
    languages: tuple[LangRule, ...] = Field(
        default_factory=lambda: DEFAULT_LANGUAGES,
        description="Language rules, first matching prefix wins; replaces the built-in table",
    )

    @property
    def request_interval(self) -> timedelta:
        return timedelta(milliseconds=self.request_interval_ms)

    def resolve_language(self, reported_name: str) -> LangRule | None:
        """Classify a judge-reported language name using ``languages``."""

        return match_language(self.languages, reported_name)


__all__ = ["OutFormat", "ArchiveTargets", "AtCoderConfig"]
