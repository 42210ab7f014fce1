"""Base configuration model and TOML loading helpers."""

from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Any, TypeVar

import tomli_w
from pydantic import BaseModel, ConfigDict, ValidationError

T = TypeVar("T", bound="BaseConfig")


class BaseConfig(BaseModel):
    """Common settings shared by every configuration model.

    Unknown keys are ignored and instances are immutable once validated.
    """

    model_config = ConfigDict(extra="ignore", frozen=True, validate_by_name=True, validate_by_alias=True)


class ConfigError(RuntimeError):
    """Configuration loading or validation error."""

    def __init__(self, message: str, *, path: Path) -> None:
        super().__init__(message)
        self.path = path


class ConfigReadError(ConfigError):
    """The configuration file could not be read."""

    def __init__(self, path: Path, reason: OSError) -> None:
        super().__init__(f"Cannot read config file {path}: {reason}", path=path)
        self.reason = reason


class ConfigParseError(ConfigError):
    """The configuration document is malformed or does not match the schema."""

    def __init__(self, message: str, *, path: Path, details: list[dict[str, str]] | None = None) -> None:
        super().__init__(message, path=path)
        self.details = details or []


def _format_location(location: tuple[int | str, ...]) -> str:
    return ".".join(str(part) for part in location)


def _validate(model_cls: type[T], data: dict[str, Any], source: Path) -> T:
    try:
        # Documents must use the TOML key names (e.g. ``match``), not attribute names.
        return model_cls.model_validate(data, by_alias=True, by_name=False)
    except ValidationError as exc:
        details = [
            {
                "loc": _format_location(err["loc"]),
                "message": err["msg"],
                "type": err["type"],
            }
            for err in exc.errors()
        ]
        raise ConfigParseError(
            f"Invalid configuration in {source}: {exc.error_count()} validation error(s)",
            path=source,
            details=details,
        ) from exc


def load_config_text(model_cls: type[T], text: str, *, source: str | Path = "<string>") -> T:
    """Parse and validate an in-memory TOML document."""

    source = Path(source)
    try:
        data = tomllib.loads(text)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigParseError(f"Invalid TOML syntax in {source}: {exc}", path=source) from exc
    return _validate(model_cls, data, source)


def load_config(model_cls: type[T], path: str | Path) -> T:
    """Load ``model_cls`` from the TOML file at ``path``.

    The file is read exactly once. Read failures raise :class:`ConfigReadError`
    with the original :class:`OSError` chained; syntax and schema failures
    raise :class:`ConfigParseError`. Missing optional fields are filled from
    the model defaults, so the returned instance is always complete.
    """

    path = Path(path)
    try:
        raw = path.read_bytes()
    except OSError as exc:
        raise ConfigReadError(path, exc) from exc

    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise ConfigParseError(f"Config file {path} is not valid UTF-8: {exc}", path=path) from exc
    return load_config_text(model_cls, text, source=path)


def dump_config(config: BaseConfig) -> str:
    """Serialise a configuration model back to TOML.

    Field aliases are applied so that the output can be fed to
    :func:`load_config` again and produce an equal model.
    """

    data = config.model_dump(mode="json", by_alias=True)
    return tomli_w.dumps(data)


__all__ = [
    "BaseConfig",
    "ConfigError",
    "ConfigReadError",
    "ConfigParseError",
    "load_config",
    "load_config_text",
    "dump_config",
]
