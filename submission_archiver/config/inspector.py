"""Diagnostics for configurations that load but will likely misbehave."""

from __future__ import annotations

from string import Formatter

from .app import RootConfig
from .git import TEMPLATE_PLACEHOLDERS, CommitMode
from .languages import find_shadowed_rules


def collect_warnings(config: RootConfig) -> list[str]:
    """Report settings that load fine but will likely misbehave downstream."""

    warnings: list[str] = []

    for name, platform in config.platforms().items():
        if platform.enable and not platform.user_id.strip():
            warnings.append(f"'{name}.enable' is true but '{name}.user_id' is empty; archiving will refuse to run")

        git = platform.git
        if git.mode is CommitMode.PER_CHUNK and git.chunk_size == 0:
            warnings.append(f"'{name}.git.mode' is per_chunk but '{name}.git.chunk_size' is 0")

        for key, template in git.templates().items():
            fields = _template_fields(template)
            if fields is None:
                warnings.append(f"'{name}.git.{key}' is not a valid format template")
                continue
            unknown = sorted(fields - TEMPLATE_PLACEHOLDERS)
            if unknown:
                warnings.append(f"'{name}.git.{key}' uses unknown placeholders: {', '.join(unknown)}")

        if not platform.languages:
            warnings.append(f"'{name}.languages' is empty; no submission language can be classified")
        for earlier, later in find_shadowed_rules(platform.languages):
            warnings.append(
                f"'{name}.languages' rule '{later.prefix}' is unreachable after earlier rule '{earlier.prefix}'"
            )

    return warnings


def _template_fields(template: str) -> set[str] | None:
    try:
        parsed = list(Formatter().parse(template))
    except ValueError:
        return None
    return {name.split(".")[0].split("[")[0] for _, name, _, _ in parsed if name}


__all__ = ["collect_warnings"]
