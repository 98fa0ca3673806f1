"""Configuration management for the task tracker."""

import logging
import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Optional

import yaml


logger = logging.getLogger(__name__)

DATA_DIR_ENV = "TASK_TRACKER_DATA_DIR"


@dataclass
class ConfigModel:
    """Global configuration model for the task tracker."""

    # File paths
    data_dir: str = "~/.task_tracker"
    tasks_file: str = "tasks.md"

    # Logging
    log_level: str = "INFO"

    # Display preferences
    use_symbols: bool = True  # ✓/✘ done markers, otherwise X/space
    boxed_output: bool = True
    show_banner: bool = True
    no_color: bool = False

    def __post_init__(self):
        """Expand user paths and make sure the data directory exists."""
        self.data_dir = os.path.expanduser(self.data_dir)
        Path(self.data_dir).mkdir(parents=True, exist_ok=True)

    def to_yaml(self) -> str:
        """Serialize config to YAML."""
        return yaml.dump(_as_dict(self), default_flow_style=False, allow_unicode=True)

    @classmethod
    def from_yaml(cls, yaml_str: str) -> "ConfigModel":
        """Deserialize config from YAML, ignoring keys this version does not know."""
        data = yaml.safe_load(yaml_str) or {}
        if not isinstance(data, dict):
            raise ValueError("Configuration must be a YAML mapping")

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            logger.warning("Ignoring unknown configuration keys: %s", ", ".join(unknown))

        return cls(**{key: value for key, value in data.items() if key in known})

    def get_tasks_path(self) -> Path:
        """Get the task file path."""
        return Path(self.data_dir) / self.tasks_file

    def get_config_path(self) -> Path:
        """Get the config file path."""
        return Path(self.data_dir) / "config.yaml"

    def get_log_path(self) -> Path:
        """Get the log file path."""
        return Path(self.data_dir) / "task_tracker.log"


class Config:
    """Configuration manager for the task tracker."""

    _instance: Optional[ConfigModel] = None

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> ConfigModel:
        """Load configuration from file or create default."""
        if cls._instance is not None:
            return cls._instance

        env_data_dir = os.getenv(DATA_DIR_ENV)
        config = ConfigModel(data_dir=env_data_dir) if env_data_dir else ConfigModel()

        if config_path is None:
            config_path = config.get_config_path()

        if config_path.exists():
            try:
                with open(config_path, "r", encoding="utf-8") as f:
                    config = ConfigModel.from_yaml(f.read())
                logger.info("Loaded configuration from %s", config_path)
            except (OSError, ValueError, TypeError, yaml.YAMLError) as e:
                logger.warning("Failed to load config from %s: %s; using defaults", config_path, e)
            if env_data_dir:
                config = ConfigModel(**{**_as_dict(config), "data_dir": env_data_dir})
        else:
            cls.save(config, config_path)

        cls._instance = config
        return config

    @classmethod
    def save(cls, config: ConfigModel, config_path: Optional[Path] = None) -> None:
        """Save configuration to file."""
        if config_path is None:
            config_path = config.get_config_path()

        try:
            config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(config_path, "w", encoding="utf-8") as f:
                f.write(config.to_yaml())
            logger.info("Configuration saved to %s", config_path)
        except OSError as e:
            logger.error("Failed to save config to %s: %s", config_path, e)

    @classmethod
    def get(cls) -> ConfigModel:
        """Get the current configuration instance."""
        if cls._instance is None:
            cls._instance = cls.load()
        return cls._instance

    @classmethod
    def reload(cls, config_path: Optional[Path] = None) -> ConfigModel:
        """Reload configuration from file."""
        cls._instance = None
        return cls.load(config_path)


def _as_dict(config: ConfigModel) -> dict:
    return {f.name: getattr(config, f.name) for f in fields(config)}


def get_config() -> ConfigModel:
    """Get the current configuration."""
    return Config.get()


def load_config(config_path: Optional[Path] = None) -> ConfigModel:
    """Load configuration from file."""
    return Config.load(config_path)


def save_config(config: ConfigModel, config_path: Optional[Path] = None) -> None:
    """Save configuration to file."""
    Config.save(config, config_path)
