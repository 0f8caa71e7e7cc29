"""
Configuration management for eventprogress.

Uses environment variables and sensible defaults.
"""
import os
from pathlib import Path
from dataclasses import dataclass, field, replace
from typing import Optional


@dataclass
class LogConfig:
    """Logging configuration."""
    level: str = "INFO"
    max_file_size: int = 10 * 1024 * 1024  # 10 MB
    backup_count: int = 5


@dataclass
class TrackerConfig:
    """Naming rules used by the progress tracker."""
    unknown_name: str = "<unknown>"                      # Fallback job description
    job_description_key: str = "spark.job.description"   # Job property holding the description

    def copy(self) -> "TrackerConfig":
        return replace(self)


@dataclass
class Config:
    """Main application configuration."""
    # Directories
    base_dir: Path = field(default_factory=Path.cwd)
    logs_dir: Path = field(default=None)

    # Sub-configs
    log: LogConfig = field(default_factory=LogConfig)
    tracker: TrackerConfig = field(default_factory=TrackerConfig)

    def __post_init__(self):
        """Initialize derived paths."""
        if self.logs_dir is None:
            self.logs_dir = self.base_dir / "logs"

        # Load from environment
        self._load_from_env()

    def _load_from_env(self):
        """Load configuration from environment variables."""
        if os.environ.get("EVENTPROGRESS_LOG_LEVEL"):
            self.log.level = os.environ["EVENTPROGRESS_LOG_LEVEL"]
        if os.environ.get("EVENTPROGRESS_LOGS_DIR"):
            self.logs_dir = Path(os.environ["EVENTPROGRESS_LOGS_DIR"])
        if os.environ.get("EVENTPROGRESS_UNKNOWN_NAME"):
            self.tracker.unknown_name = os.environ["EVENTPROGRESS_UNKNOWN_NAME"]
        if os.environ.get("EVENTPROGRESS_JOB_DESCRIPTION_KEY"):
            self.tracker.job_description_key = os.environ["EVENTPROGRESS_JOB_DESCRIPTION_KEY"]

    def ensure_directories(self):
        """Create all required directories."""
        self.logs_dir.mkdir(parents=True, exist_ok=True)


# Global config instance
_config: Optional[Config] = None


def get_config() -> Config:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = Config()
    return _config


def set_config(config: Optional[Config]):
    """Set the global configuration instance (None resets to defaults)."""
    global _config
    _config = config
