"""Configuration management for the enrollment statistics tool."""

import os
import yaml
from pathlib import Path
from typing import Dict, Any
from dotenv import load_dotenv


DEFAULT_CONFIG = {
    'courses': {'path': 'data/courses.yaml'},
    'monitoring': {'interval_minutes': 5},
    'logging': {'level': 'INFO', 'file': 'logs/enrollment.log'},
}


class Config:
    """Configuration handler for the enrollment statistics tool."""

    def __init__(self, config_path: str = "config.yaml"):
        """Initialize configuration.

        Args:
            config_path: Path to the YAML configuration file
        """
        load_dotenv()

        self.config_path = Path(config_path)
        self.config_data = self._load_config()
        self._apply_env_overrides()

    def _load_config(self) -> Dict[str, Any]:
        """Load configuration from YAML file on top of the defaults.

        Returns:
            Dictionary containing configuration data
        """
        if not self.config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {self.config_path}")

        with open(self.config_path, 'r', encoding='utf-8') as f:
            loaded = yaml.safe_load(f) or {}

        config = {section: dict(values) for section, values in DEFAULT_CONFIG.items()}
        for section, values in loaded.items():
            if section in DEFAULT_CONFIG:
                # An empty section keeps its defaults
                if values is None:
                    continue
                if not isinstance(values, dict):
                    raise ValueError(f"Configuration section '{section}' must be a mapping in {self.config_path}")
                config[section].update(values)
            else:
                config[section] = values

        return config

    def _apply_env_overrides(self):
        """Apply environment variable overrides to configuration."""
        if os.getenv('COURSES_FILE'):
            self.config_data['courses']['path'] = os.getenv('COURSES_FILE')

        if os.getenv('MONITORING_INTERVAL_MINUTES'):
            self.config_data['monitoring']['interval_minutes'] = int(os.getenv('MONITORING_INTERVAL_MINUTES'))

        if os.getenv('LOG_LEVEL'):
            self.config_data['logging']['level'] = os.getenv('LOG_LEVEL')

        if os.getenv('LOG_FILE'):
            self.config_data['logging']['file'] = os.getenv('LOG_FILE')

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value by key.

        Args:
            key: Configuration key (supports nested keys with dot notation)
            default: Default value if key not found

        Returns:
            Configuration value
        """
        keys = key.split('.')
        value = self.config_data

        for k in keys:
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default

        return value

    @property
    def courses_path(self) -> Path:
        """Get course snapshot file path, relative to the config file."""
        path = Path(self.get('courses.path', 'data/courses.yaml'))
        if not path.is_absolute():
            path = self.config_path.parent / path
        return path

    @property
    def monitoring_interval(self) -> int:
        """Get monitoring interval in minutes."""
        return self.get('monitoring.interval_minutes', 5)

    @property
    def log_level(self) -> str:
        """Get logging level."""
        return self.get('logging.level', 'INFO')

    @property
    def log_file(self) -> Path:
        """Get log file path, relative to the config file."""
        path = Path(self.get('logging.file', 'logs/enrollment.log'))
        if not path.is_absolute():
            path = self.config_path.parent / path
        return path
