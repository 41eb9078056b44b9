"""Configuration management for Buddy."""

import logging
import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Optional

import yaml

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path("~/.buddy/config.yaml")


@dataclass
class ConfigModel:
    """Global configuration model for Buddy."""

    # Storage
    data_file: str = "./data/tasks.txt"

    # Logging
    log_dir: str = "~/.buddy/logs"
    log_level: str = "WARNING"

    # UI
    no_color: bool = False
    show_banner: bool = True

    def __post_init__(self):
        """Post-initialization setup."""
        self.data_file = os.path.expanduser(str(self.data_file))
        self.log_dir = os.path.expanduser(str(self.log_dir))
        self.log_level = str(self.log_level).upper()
        if logging.getLevelName(self.log_level) == f"Level {self.log_level}":
            logger.warning(f"Unknown log level {self.log_level!r}, using WARNING")
            self.log_level = "WARNING"

    def to_yaml(self) -> str:
        """Serialize config to YAML."""
        data = {
            "data_file": self.data_file,
            "log_dir": self.log_dir,
            "log_level": self.log_level,
            "no_color": self.no_color,
            "show_banner": self.show_banner,
        }
        return yaml.dump(data, default_flow_style=False)

    @classmethod
    def from_yaml(cls, yaml_str: str) -> "ConfigModel":
        """Deserialize config from YAML. Unknown keys are ignored."""
        data = yaml.safe_load(yaml_str) or {}
        if not isinstance(data, dict):
            raise ValueError("Configuration must be a mapping")

        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            logger.warning(f"Ignoring unknown config keys: {', '.join(sorted(unknown))}")

        return cls(**{k: v for k, v in data.items() if k in known})

    def get_data_path(self) -> Path:
        """Get the task data file path."""
        return Path(self.data_file)

    def get_log_dir(self) -> Path:
        return Path(self.log_dir)


def load_config(config_path: Optional[Path] = None) -> ConfigModel:
    """Load configuration from file or create default."""
    if config_path is None:
        config_path = DEFAULT_CONFIG_PATH
    config_path = Path(config_path).expanduser()

    if not config_path.exists():
        config = ConfigModel()
        try:
            save_config(config, config_path)
            logger.info(f"Created default configuration at {config_path}")
        except OSError as e:
            logger.warning(f"Could not create default config at {config_path}: {e}")
        return config

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            yaml_content = f.read()
        config = ConfigModel.from_yaml(yaml_content)
        logger.debug(f"Loaded configuration from {config_path}")
        return config
    except (OSError, ValueError, TypeError, yaml.YAMLError) as e:
        logger.warning(f"Failed to load config from {config_path}: {e}. Using default configuration.")
        return ConfigModel()


def save_config(config: ConfigModel, config_path: Optional[Path] = None) -> None:
    """Save configuration to file.

    Raises:
        OSError: If the file cannot be written
    """
    if config_path is None:
        config_path = DEFAULT_CONFIG_PATH
    config_path = Path(config_path).expanduser()

    config_path.parent.mkdir(parents=True, exist_ok=True)
    with open(config_path, "w", encoding="utf-8") as f:
        f.write(config.to_yaml())
    logger.debug(f"Configuration saved to {config_path}")
