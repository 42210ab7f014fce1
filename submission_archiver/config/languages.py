"""Language classification rules for archived submissions."""

from __future__ import annotations

from typing import Iterable

from pydantic import Field

from submission_archiver.config.base import BaseConfig


class LangRule(BaseConfig):
    """Maps a reported language-name prefix to an identifier and extension."""

    prefix: str = Field(
        ...,
        description="Prefix of the language name reported by the judge (e.g. 'PyPy')",
        validation_alias="match",
        serialization_alias="match",
    )
    id: str = Field(..., description="Short language identifier (e.g. 'py')")
    ext: str = Field(..., description="File extension used for archived sources, without the dot")

    def matches(self, reported_name: str) -> bool:
        return reported_name.startswith(self.prefix)


def _rule(prefix: str, lang_id: str, ext: str | None = None) -> LangRule:
    return LangRule(prefix=prefix, id=lang_id, ext=ext or lang_id)


# Order matters: "C++" and "C#" must come before the bare "C" rule.
DEFAULT_LANGUAGES: tuple[LangRule, ...] = (
    _rule("TypeScript", "ts"),
    _rule("JavaScript", "js"),
    _rule("C#", "cs"),
    _rule("C++", "cpp"),
    _rule("Python", "py"),
    _rule("PyPy", "py"),
    _rule("Rust", "rs"),
    _rule("Go", "go"),
    _rule("Java", "java"),
    _rule("Kotlin", "kt"),
    _rule("Ruby", "rb"),
    _rule("Swift", "swift"),
    _rule("Haskell", "hs"),
    _rule("OCaml", "ml"),
    _rule("C", "c"),
)


def match_language(rules: Iterable[LangRule], reported_name: str) -> LangRule | None:
    """Return the first rule whose prefix matches ``reported_name``."""

    for rule in rules:
        if rule.matches(reported_name):
            return rule
    return None


def find_shadowed_rules(rules: Iterable[LangRule]) -> list[tuple[LangRule, LangRule]]:
    """List ``(earlier, later)`` pairs where ``later`` can never match.

    A rule is unreachable when an earlier rule's prefix is a prefix of its own
    (e.g. ``"Java"`` placed before ``"JavaScript"``).
    """

    shadowed: list[tuple[LangRule, LangRule]] = []
    seen: list[LangRule] = []
    for rule in rules:
        blocker = match_language(seen, rule.prefix)
        if blocker is not None:
            shadowed.append((blocker, rule))
        seen.append(rule)
    return shadowed


__all__ = ["LangRule", "DEFAULT_LANGUAGES", "match_language", "find_shadowed_rules"]
