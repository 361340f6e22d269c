"""Simple YAML configuration loader for Voice2Text."""

import copy
import os
import yaml
from pathlib import Path
from typing import Dict, Any, Optional
import logging

from ..exceptions import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILENAME = "voice2text.yaml"
API_KEY_ENV_VAR = "OPENAI_API_KEY"
API_KEY_PLACEHOLDER = "YOUR_OPENAI_API_KEY_HERE"

DEFAULTS: Dict[str, Any] = {
    "openai": {
        "api_key": None,
        "base_url": "https://api.openai.com/v1",
        "transcription_model": "gpt-4o-mini-transcribe",
        "summary_model": "gpt-4.1-mini",
        "summary_temperature": 0.3,
    },
    "processing": {
        "auto_summarize": False,
    },
    "storage": {
        "data_directory": "data",
    },
    "logging": {
        "level": "INFO",
        "file_path": "data/logs/voice2text.log",
        "console_output": True,
    },
}


def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Recursively merge override into a copy of base."""
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


class Voice2TextConfig:
    """Voice2Text configuration loader."""

    def __init__(self, config_path: Optional[str] = None):
        """Initialize configuration loader.

        Args:
            config_path: Path to YAML config file. If None, uses voice2text.yaml
                        in the current directory when present, else built-in defaults.
        """
        if config_path:
            self.config_file: Optional[Path] = Path(config_path)
            if not self.config_file.exists():
                raise FileNotFoundError(f"Configuration file not found: {self.config_file}")
        else:
            candidate = Path.cwd() / DEFAULT_CONFIG_FILENAME
            self.config_file = candidate if candidate.exists() else None

        if self.config_file is None:
            logger.info("No configuration file found, using defaults")
            self.config = copy.deepcopy(DEFAULTS)
        else:
            logger.info(f"Loading configuration from: {self.config_file}")
            self.config = self._load_config()

    def _load_config(self) -> Dict[str, Any]:
        """Load and parse YAML configuration file."""
        try:
            with open(self.config_file, 'r', encoding='utf-8') as f:
                loaded = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in configuration file: {e}")

        if loaded is None:
            loaded = {}
        if not isinstance(loaded, dict):
            raise ValueError("Configuration file must contain a mapping")

        config = _merge(DEFAULTS, loaded)

        # Resolve relative paths
        self._resolve_paths(config)

        logger.info("Configuration loaded successfully")
        return config

    def _resolve_paths(self, config: Dict[str, Any]) -> None:
        """Resolve relative paths in configuration relative to config file location."""
        config_dir = self.config_file.parent

        data_dir = config['storage'].get('data_directory')
        if data_dir and not os.path.isabs(data_dir):
            config['storage']['data_directory'] = str(config_dir / data_dir)

        log_path = config['logging'].get('file_path')
        if log_path and not os.path.isabs(log_path):
            config['logging']['file_path'] = str(config_dir / log_path)

    def get(self, key_path: str, default: Any = None) -> Any:
        """Get configuration value using dot notation (e.g., 'openai.base_url').

        Args:
            key_path: Dot-separated key path (e.g., 'openai.summary_model')
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        keys = key_path.split('.')
        value = self.config

        for key in keys:
            if isinstance(value, dict) and key in value:
                value = value[key]
            else:
                return default

        return value

    def set(self, key_path: str, value: Any) -> None:
        """Set configuration value using dot notation.

        Args:
            key_path: Dot-separated path to config value (e.g., 'processing.auto_summarize')
            value: Value to set
        """
        keys = key_path.split('.')
        config_dict = self.config

        # Navigate to the parent dictionary
        for key in keys[:-1]:
            if key not in config_dict:
                config_dict[key] = {}
            config_dict = config_dict[key]

        # Set the final value
        config_dict[keys[-1]] = value
        logger.debug(f"Configuration key '{key_path}' set")

    def get_openai_api_key(self) -> str:
        """Get the OpenAI API key, preferring the environment over the file.

        Raises:
            ConfigurationError: If the key is missing or still the placeholder
        """
        api_key = (os.environ.get(API_KEY_ENV_VAR) or self.get('openai.api_key') or "").strip()
        if not api_key or api_key == API_KEY_PLACEHOLDER:
            raise ConfigurationError(
                f"Set {API_KEY_ENV_VAR} or openai.api_key in {DEFAULT_CONFIG_FILENAME} before using transcription."
            )
        return api_key

    def has_api_key(self) -> bool:
        try:
            self.get_openai_api_key()
        except ConfigurationError:
            return False
        return True

    def get_data_directory(self) -> str:
        """Get data directory path."""
        data_dir = self.get('storage.data_directory', 'data')
        return str(Path(data_dir).absolute())
