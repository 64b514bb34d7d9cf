"""Configuration loader with YAML parsing and environment variable substitution"""

import os
import re
import yaml
from typing import Any, Dict, List, Optional
from pathlib import Path
from dotenv import load_dotenv

from ..models.config import (
    AppConfig,
    CompletionDefaults,
    ProviderConfig,
    SystemConfig,
)


class ConfigLoader:
    """Load and parse configuration from YAML files with environment variable support"""

    def __init__(self, config_path: str = "config/config.yaml"):
        """
        Initialize configuration loader

        Args:
            config_path: Path to the YAML configuration file
        """
        self.config_path = Path(config_path)
        load_dotenv()

    def _substitute_env_vars(self, value: Any) -> Any:
        """
        Recursively substitute ${VAR_NAME} references with environment values

        Raises:
            ValueError: If a referenced variable is not set
        """
        if isinstance(value, str):
            pattern = r'\$\{([^}]+)\}'

            def replace_env_var(match):
                var_name = match.group(1)
                env_value = os.getenv(var_name)
                if env_value is None:
                    raise ValueError(f"Environment variable '{var_name}' is not set")
                return env_value

            return re.sub(pattern, replace_env_var, value)

        elif isinstance(value, dict):
            return {k: self._substitute_env_vars(v) for k, v in value.items()}

        elif isinstance(value, list):
            return [self._substitute_env_vars(item) for item in value]

        else:
            return value

    def load_yaml(self) -> Dict[str, Any]:
        """
        Load YAML configuration file

        Raises:
            FileNotFoundError: If configuration file doesn't exist
            ValueError: If the file is empty or not valid YAML
        """
        if not self.config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {self.config_path}")

        with open(self.config_path, 'r', encoding='utf-8') as f:
            try:
                config_data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ValueError(f"Failed to parse YAML configuration: {e}")

        if not config_data:
            raise ValueError("Configuration file is empty")

        return config_data

    def _parse_system_config(self, data: Dict[str, Any]) -> SystemConfig:
        system_data = dict(data.get('system') or {})

        # Environment overrides
        if os.getenv('COMPLETION_PORT'):
            system_data['port'] = int(os.getenv('COMPLETION_PORT'))
        if os.getenv('COMPLETION_LOG_LEVEL'):
            system_data['log_level'] = os.getenv('COMPLETION_LOG_LEVEL')

        return SystemConfig(**system_data)

    def _parse_completion_defaults(self, data: Dict[str, Any]) -> CompletionDefaults:
        return CompletionDefaults(**(data.get('completion') or {}))

    def _parse_providers(self, data: Dict[str, Any]) -> List[ProviderConfig]:
        providers_data = data.get('providers', [])

        if not providers_data:
            raise ValueError("No providers configured")

        return [
            ProviderConfig(**self._substitute_env_vars(provider_data))
            for provider_data in providers_data
        ]

    def load(self) -> AppConfig:
        """
        Load and parse complete application configuration

        Raises:
            FileNotFoundError: If configuration file doesn't exist
            ValueError: If configuration is invalid
        """
        raw_config = self.load_yaml()

        return AppConfig(
            system=self._parse_system_config(raw_config),
            completion=self._parse_completion_defaults(raw_config),
            providers=self._parse_providers(raw_config),
        )


def load_config(config_path: Optional[str] = None) -> AppConfig:
    """
    Convenience function to load configuration

    Args:
        config_path: Path to configuration file (defaults to COMPLETION_CONFIG_PATH env var or config/config.yaml)
    """
    if config_path is None:
        config_path = os.getenv('COMPLETION_CONFIG_PATH', 'config/config.yaml')

    loader = ConfigLoader(config_path)
    return loader.load()
