"""Configuration -- loaded from environment variables

Data locations, dashboard thresholds and log output settings.
"""

import logging
import os
from pathlib import Path
from typing import Literal

import structlog
from pydantic import BaseModel, Field

log = structlog.get_logger()

DEFAULT_URGENT_WINDOW_HOURS: float = 4.0
DEFAULT_LOG_FORMAT = "dev"
DEFAULT_LOG_LEVEL = "INFO"
LOG_FORMATS = ("dev", "json")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _get_base_dir() -> Path:
    """Project data base directory"""
    return Path(os.environ.get("DISCHARGEFLOW_DATA_DIR", "data"))


def get_tasks_path() -> Path:
    """Path of the JSON task file used by the CLI"""
    return Path(
        os.environ.get(
            "DISCHARGEFLOW_TASKS_PATH",
            str(_get_base_dir() / "tasks.json"),
        )
    )


class CoreConfig(BaseModel):
    """Core package configuration

    Environment variables:
        DISCHARGEFLOW_DATA_DIR: data directory (default "data")
        DISCHARGEFLOW_TASKS_PATH: task file (default <data>/tasks.json)
        DISCHARGEFLOW_URGENT_WINDOW_HOURS: urgency threshold in hours (default 4)
        DISCHARGEFLOW_LOG_FORMAT: "dev" console output or "json" (default dev)
        DISCHARGEFLOW_LOG_LEVEL: root log level name (default INFO)
    """

    tasks_path: Path = Field(
        default_factory=get_tasks_path,
        description="JSON file holding the task collection",
    )
    urgent_window_hours: float = Field(
        default=DEFAULT_URGENT_WINDOW_HOURS,
        ge=0,
        description="Open tasks due within this many hours count as urgent",
    )
    log_format: Literal["dev", "json"] = Field(
        default=DEFAULT_LOG_FORMAT,
        description="Log renderer: dev console or structured JSON",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default=DEFAULT_LOG_LEVEL,
        description="Root log level",
    )

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level)


def load_core_config() -> CoreConfig:
    """Load the core configuration from environment variables

    Invalid values are logged and replaced by their defaults.

    Returns:
        CoreConfig instance
    """
    kwargs: dict = {"tasks_path": get_tasks_path()}

    if val := os.environ.get("DISCHARGEFLOW_URGENT_WINDOW_HOURS"):
        try:
            hours = float(val)
            if hours < 0:
                raise ValueError(val)
            kwargs["urgent_window_hours"] = hours
        except ValueError:
            log.warning(
                "invalid_urgent_window_config",
                env_var="DISCHARGEFLOW_URGENT_WINDOW_HOURS",
                value=val,
                fallback=DEFAULT_URGENT_WINDOW_HOURS,
            )

    if val := os.environ.get("DISCHARGEFLOW_LOG_FORMAT"):
        if val.lower() in LOG_FORMATS:
            kwargs["log_format"] = val.lower()
        else:
            log.warning(
                "invalid_log_format_config",
                env_var="DISCHARGEFLOW_LOG_FORMAT",
                value=val,
                fallback=DEFAULT_LOG_FORMAT,
            )

    if val := os.environ.get("DISCHARGEFLOW_LOG_LEVEL"):
        if val.upper() in LOG_LEVELS:
            kwargs["log_level"] = val.upper()
        else:
            log.warning(
                "invalid_log_level_config",
                env_var="DISCHARGEFLOW_LOG_LEVEL",
                value=val,
                fallback=DEFAULT_LOG_LEVEL,
            )

    return CoreConfig(**kwargs)
