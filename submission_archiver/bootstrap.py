"""Startup sequence: load configuration and prepare the state directory."""

from __future__ import annotations

from pathlib import Path

from loguru import logger

from submission_archiver.config import RootConfig, load_config
from submission_archiver.config.inspector import collect_warnings


class BootstrapError(RuntimeError):
    """Startup failed after the configuration was loaded."""


class StateDirError(BootstrapError):
    """The state directory could not be created."""

    def __init__(self, path: Path, reason: OSError | ValueError) -> None:
        super().__init__(f"Cannot create state directory {path}: {reason}")
        self.path = path
        self.reason = reason


def prepare_state_dir(path: Path) -> Path:
    """Create ``path`` and any missing parents; calling it again is a no-op."""

    try:
        path.mkdir(parents=True, exist_ok=True)
    except (OSError, ValueError) as exc:
        raise StateDirError(path, exc) from exc
    logger.debug("State directory ready at {}", path)
    return path


def run(config_path: Path) -> RootConfig:
    """Load the configuration at ``config_path`` and prepare the archiver.

    :class:`~submission_archiver.config.ConfigError` propagates unchanged and
    leaves the filesystem untouched. The returned config is what the fetch,
    archive and commit stages consume.
    """

    logger.info("Loading configuration from {}", config_path)
    config = load_config(RootConfig, config_path)

    for warning in collect_warnings(config):
        logger.warning(warning)

    prepare_state_dir(config.state_dir)

    enabled = config.enabled_platforms()
    if not enabled:
        logger.info("No platforms enabled; nothing to archive")
    for name, platform in enabled.items():
        logger.info(
            "Platform {} enabled for user '{}' (targets={}, format={}, commit mode={})",
            name,
            platform.user_id,
            platform.archive_targets.value,
            platform.out_format.value,
            platform.git.mode.value,
        )
    return config


__all__ = ["BootstrapError", "StateDirError", "prepare_state_dir", "run"]
