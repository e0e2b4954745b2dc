from pathlib import Path

import pytest
from pydantic import ValidationError

import core.config as config
from core.config import AppSettings, write_user_env_vars


def test_defaults():
    settings = AppSettings(_env_file=None)
    assert settings.match_threshold == 60.0
    assert settings.match_limit == 12
    assert settings.ratio_precision == 2
    assert settings.palette_size == 5
    assert settings.reports_dir == Path("reports")
    assert settings.log_level == "WARNING"


def test_env_prefix_overrides(monkeypatch):
    monkeypatch.setenv("PALETTE_LENS_MATCH_THRESHOLD", "75")
    monkeypatch.setenv("PALETTE_LENS_LOG_LEVEL", "debug")
    settings = AppSettings(_env_file=None)
    assert settings.match_threshold == 75.0
    assert settings.log_level == "DEBUG"


def test_dotenv_in_working_directory(tmp_path):
    env = tmp_path / ".env"
    env.write_text("PALETTE_LENS_PALETTE_SIZE=8\n", encoding="utf-8")
    settings = AppSettings(_env_file=str(env))
    assert settings.palette_size == 8


@pytest.mark.parametrize(
    "key, value",
    [
        ("PALETTE_LENS_MATCH_THRESHOLD", "101"),
        ("PALETTE_LENS_MATCH_LIMIT", "0"),
        ("PALETTE_LENS_LOG_LEVEL", "LOUD"),
    ],
)
def test_invalid_values_rejected(monkeypatch, key, value):
    monkeypatch.setenv(key, value)
    with pytest.raises(ValidationError):
        AppSettings(_env_file=None)


def test_write_user_env_vars_merges(monkeypatch, tmp_path):
    monkeypatch.setattr(config, "get_user_config_dir", lambda: tmp_path / "cfg")

    write_user_env_vars({"PALETTE_LENS_MATCH_LIMIT": "3"})
    path = write_user_env_vars({"PALETTE_LENS_MATCH_THRESHOLD": "70"})

    assert path == tmp_path / "cfg" / ".env"
    lines = path.read_text(encoding="utf-8").splitlines()
    assert lines[0].startswith("#")
    assert "PALETTE_LENS_MATCH_LIMIT=3" in lines
    assert "PALETTE_LENS_MATCH_THRESHOLD=70" in lines


def test_write_user_env_vars_keeps_existing_entries(monkeypatch, tmp_path):
    monkeypatch.setattr(config, "get_user_config_dir", lambda: tmp_path / "cfg")
    env = tmp_path / "cfg" / ".env"
    env.parent.mkdir()
    env.write_text('# notes\nPALETTE_LENS_REPORTS_DIR="out dir"\nnot a setting\n', encoding="utf-8")

    write_user_env_vars({"PALETTE_LENS_MATCH_LIMIT": "7", "PALETTE_LENS_PALETTE_SIZE": None})

    lines = env.read_text(encoding="utf-8").splitlines()
    assert lines[1:] == ["PALETTE_LENS_MATCH_LIMIT=7", "PALETTE_LENS_REPORTS_DIR=out dir"]
