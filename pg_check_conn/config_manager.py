"""
Configuration Manager Module
Handles loading and accessing probe configuration from YAML files and environment variables.
"""

import os
import re
from pathlib import Path
from typing import Dict, Optional

import yaml
from dotenv import find_dotenv, load_dotenv

CONFIG_FILENAME = 'pg_check_conn.yaml'


class ConfigManager:
    """Manages probe configuration from YAML files and environment variables."""

    _instance = None
    _config: Dict = None

    def __new__(cls):
        """Singleton pattern for configuration."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        """Initialize configuration if not already loaded."""
        if self._config is None:
            self._load_configuration()

    def _load_configuration(self) -> None:
        """Load the configuration file, if there is one."""
        # PGPASSWORD may live in .env next to the caller; libpq picks it up
        # from the environment
        load_dotenv(find_dotenv(usecwd=True))

        self._config_dir = self._find_config_dir()
        if self._config_dir is None:
            self._config = {}
            return

        self._config = self._load_yaml_with_env(self._config_dir / CONFIG_FILENAME)

    def _find_config_dir(self) -> Optional[Path]:
        """Find the configuration directory, or None when there is none."""
        env_config_dir = os.getenv('PG_CHECK_CONN_CONFIG_DIR')
        if env_config_dir:
            return Path(env_config_dir)

        # The working directory is never searched
        possible_paths = [
            Path(__file__).parent.parent / 'config',  # Source checkout
            Path('/etc/pg_check_conn'),
        ]

        for path in possible_paths:
            if (path / CONFIG_FILENAME).exists():
                return path

        return None

    def _load_yaml_with_env(self, file_path: Path) -> Dict:
        """
        Load YAML file with environment variable substitution.

        Supports ${VAR_NAME} and ${VAR_NAME:-default} syntax.
        """
        if not file_path.exists():
            return {}

        with open(file_path, 'r', encoding='utf-8') as f:
            content = f.read()

        content = self._substitute_env_vars(content)

        return yaml.safe_load(content) or {}

    def _substitute_env_vars(self, content: str) -> str:
        """
        Substitute environment variables in string.

        Supports:
        - ${VAR_NAME} - Required variable
        - ${VAR_NAME:-default} - Variable with default value
        """
        pattern = r'\$\{([A-Z_][A-Z0-9_]*)(?::-([^}]*))?\}'

        def replacer(match):
            var_name = match.group(1)
            default_value = match.group(2)

            value = os.getenv(var_name)
            if value is not None:
                return value
            elif default_value is not None:
                return default_value
            else:
                return match.group(0)  # Return original if not found

        return re.sub(pattern, replacer, content)

    # ========================================
    # Configuration Getters
    # ========================================

    def get_logging_config(self) -> Dict:
        """Get logging configuration."""
        return self._config.get('logging') or {}

    def get_probe_config(self) -> Dict:
        """Get connection probe configuration."""
        return self._config.get('probe') or {}

    def reload(self) -> None:
        """Reload configuration from files."""
        self._config = None
        self._load_configuration()


# Convenience function
def get_config() -> ConfigManager:
    """Get the singleton configuration manager instance."""
    return ConfigManager()
