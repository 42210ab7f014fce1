from __future__ import annotations

from pathlib import Path

import pytest

from submission_archiver import bootstrap
from submission_archiver.bootstrap import BootstrapError, StateDirError, prepare_state_dir
from submission_archiver.config import ConfigParseError, ConfigReadError, RootConfig


def test_run_creates_state_dir_with_parents(write_config, tmp_path: Path) -> None:
    state_dir = tmp_path / "deep" / "nested" / "state"
    path = write_config(f'state_dir = "{state_dir.as_posix()}"')

    config = bootstrap.run(path)

    assert isinstance(config, RootConfig)
    assert state_dir.is_dir()


def test_run_is_idempotent(write_config, tmp_path: Path) -> None:
    state_dir = tmp_path / "state"
    path = write_config(f'state_dir = "{state_dir.as_posix()}"')

    first = bootstrap.run(path)
    second = bootstrap.run(path)

    assert first == second
    assert state_dir.is_dir()


def test_run_uses_default_state_dir_relative_to_cwd(write_config, tmp_path: Path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)
    path = write_config("")

    bootstrap.run(path)

    assert (tmp_path / ".submission-archiver" / "state").is_dir()


def test_run_missing_config_creates_nothing(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)

    with pytest.raises(ConfigReadError):
        bootstrap.run(tmp_path / "config.toml")

    assert list(tmp_path.iterdir()) == []


def test_run_invalid_config_creates_nothing(write_config, tmp_path: Path) -> None:
    state_dir = tmp_path / "state"
    path = write_config(f'state_dir = "{state_dir.as_posix()}"\n[atcoder]\nuser_id = "a"\nout_format = "zip"')

    with pytest.raises(ConfigParseError):
        bootstrap.run(path)

    assert not state_dir.exists()


def test_run_state_dir_collides_with_file(write_config, tmp_path: Path) -> None:
    occupied = tmp_path / "occupied"
    occupied.write_text("not a directory", encoding="utf-8")
    path = write_config(f'state_dir = "{occupied.as_posix()}"')

    with pytest.raises(StateDirError) as excinfo:
        bootstrap.run(path)

    assert isinstance(excinfo.value, BootstrapError)
    assert excinfo.value.path == occupied
    assert isinstance(excinfo.value.__cause__, OSError)
    assert str(occupied) in str(excinfo.value)


def test_prepare_state_dir_below_file_fails(tmp_path: Path) -> None:
    blocker = tmp_path / "file"
    blocker.write_text("x", encoding="utf-8")

    with pytest.raises(StateDirError):
        prepare_state_dir(blocker / "state")


def test_run_returns_config_for_pipeline(write_config, tmp_path: Path) -> None:
    path = write_config(
        f"""
        state_dir = "{(tmp_path / 'state').as_posix()}"

        [atcoder]
        enable = true
        user_id = "alice"
        archive_targets = "ac_latest"
        """
    )

    config = bootstrap.run(path)

    assert config.enabled_platforms()["atcoder"].user_id == "alice"
    assert not config.atcoder.out_dir.is_absolute()


def test_run_state_dir_with_nul_byte(write_config) -> None:
    path = write_config('state_dir = "state\\u0000dir"')

    with pytest.raises(StateDirError) as excinfo:
        bootstrap.run(path)

    assert isinstance(excinfo.value.__cause__, ValueError)
