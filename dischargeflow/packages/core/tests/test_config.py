"""Configuration and logging setup tests"""

import logging
from pathlib import Path

import structlog
from dischargeflow.core.config import (
    DEFAULT_URGENT_WINDOW_HOURS,
    CoreConfig,
    get_tasks_path,
    load_core_config,
)
from dischargeflow.core.logging_config import build_renderer, setup_logging

ENV_VARS = (
    "DISCHARGEFLOW_DATA_DIR",
    "DISCHARGEFLOW_TASKS_PATH",
    "DISCHARGEFLOW_URGENT_WINDOW_HOURS",
    "DISCHARGEFLOW_LOG_FORMAT",
    "DISCHARGEFLOW_LOG_LEVEL",
)


def _clear_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


class TestLoadCoreConfig:
    def test_default_when_no_env(self, monkeypatch):
        _clear_env(monkeypatch)
        config = load_core_config()
        assert config.tasks_path == Path("data") / "tasks.json"
        assert config.urgent_window_hours == DEFAULT_URGENT_WINDOW_HOURS

    def test_data_dir_from_env(self, monkeypatch, tmp_path):
        _clear_env(monkeypatch)
        monkeypatch.setenv("DISCHARGEFLOW_DATA_DIR", str(tmp_path))
        assert get_tasks_path() == tmp_path / "tasks.json"

    def test_tasks_path_overrides_data_dir(self, monkeypatch, tmp_path):
        _clear_env(monkeypatch)
        monkeypatch.setenv("DISCHARGEFLOW_DATA_DIR", str(tmp_path / "ignored"))
        monkeypatch.setenv("DISCHARGEFLOW_TASKS_PATH", str(tmp_path / "custom.json"))
        assert load_core_config().tasks_path == tmp_path / "custom.json"

    def test_urgent_window_from_env(self, monkeypatch):
        _clear_env(monkeypatch)
        monkeypatch.setenv("DISCHARGEFLOW_URGENT_WINDOW_HOURS", "6.5")
        assert load_core_config().urgent_window_hours == 6.5

    def test_invalid_urgent_window_falls_back(self, monkeypatch):
        _clear_env(monkeypatch)
        monkeypatch.setenv("DISCHARGEFLOW_URGENT_WINDOW_HOURS", "soon")
        assert load_core_config().urgent_window_hours == DEFAULT_URGENT_WINDOW_HOURS

    def test_negative_urgent_window_falls_back(self, monkeypatch):
        _clear_env(monkeypatch)
        monkeypatch.setenv("DISCHARGEFLOW_URGENT_WINDOW_HOURS", "-2")
        assert load_core_config().urgent_window_hours == DEFAULT_URGENT_WINDOW_HOURS


class TestLogConfig:
    """Log format/level loaded through CoreConfig"""

    def test_log_defaults(self, monkeypatch):
        _clear_env(monkeypatch)
        config = load_core_config()
        assert config.log_format == "dev"
        assert config.log_level == "INFO"

    def test_log_settings_from_env(self, monkeypatch):
        _clear_env(monkeypatch)
        monkeypatch.setenv("DISCHARGEFLOW_LOG_FORMAT", "JSON")
        monkeypatch.setenv("DISCHARGEFLOW_LOG_LEVEL", "debug")
        config = load_core_config()
        assert config.log_format == "json"
        assert config.log_level == "DEBUG"
        assert config.log_level_number == logging.DEBUG

    def test_invalid_log_settings_fall_back(self, monkeypatch):
        _clear_env(monkeypatch)
        monkeypatch.setenv("DISCHARGEFLOW_LOG_FORMAT", "xml")
        monkeypatch.setenv("DISCHARGEFLOW_LOG_LEVEL", "loud")
        config = load_core_config()
        assert config.log_format == "dev"
        assert config.log_level == "INFO"


class TestSetupLogging:
    """Renderer and level selection"""

    def test_json_renderer(self):
        renderer = build_renderer(CoreConfig(log_format="json"))
        assert isinstance(renderer, structlog.processors.JSONRenderer)

    def test_dev_renderer(self):
        renderer = build_renderer(CoreConfig(log_format="dev"))
        assert isinstance(renderer, structlog.dev.ConsoleRenderer)

    def test_setup_applies_config(self):
        root = logging.getLogger()
        saved_handlers, saved_level = root.handlers[:], root.level
        try:
            setup_logging(CoreConfig(log_format="json", log_level="WARNING"))
            assert root.level == logging.WARNING
            assert len(root.handlers) == 1
            assert isinstance(
                root.handlers[0].formatter, structlog.stdlib.ProcessorFormatter
            )
        finally:
            root.handlers[:] = saved_handlers
            root.setLevel(saved_level)
