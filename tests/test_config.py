"""Tests for configuration loading."""
from pathlib import Path

from eventprogress.core.config import Config, get_config, set_config


def test_defaults(tmp_path):
    config = Config(base_dir=tmp_path)
    assert config.logs_dir == tmp_path / "logs"
    assert config.log.level == "INFO"
    assert config.tracker.unknown_name == "<unknown>"
    assert config.tracker.job_description_key == "spark.job.description"


def test_environment_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("EVENTPROGRESS_LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("EVENTPROGRESS_LOGS_DIR", str(tmp_path / "elsewhere"))
    monkeypatch.setenv("EVENTPROGRESS_UNKNOWN_NAME", "n/a")
    monkeypatch.setenv("EVENTPROGRESS_JOB_DESCRIPTION_KEY", "desc")

    config = Config(base_dir=tmp_path)
    assert config.log.level == "DEBUG"
    assert config.logs_dir == Path(tmp_path / "elsewhere")
    assert config.tracker.unknown_name == "n/a"
    assert config.tracker.job_description_key == "desc"


def test_ensure_directories(tmp_path):
    config = Config(base_dir=tmp_path)
    config.ensure_directories()
    assert (tmp_path / "logs").is_dir()


def test_global_config_round_trip(tmp_path):
    first = get_config()
    assert get_config() is first

    custom = Config(base_dir=tmp_path)
    set_config(custom)
    assert get_config() is custom


def test_tracker_config_copy_is_independent():
    config = Config()
    copy = config.tracker.copy()
    copy.unknown_name = "changed"
    assert config.tracker.unknown_name == "<unknown>"
