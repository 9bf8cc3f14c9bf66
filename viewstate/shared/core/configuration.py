"""
Configuration Management System for ViewState

This module provides a centralized configuration system that supports a 4-tier
precedence hierarchy: environment → project → user → system defaults.
"""

import logging
import os
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

logger = logging.getLogger(__name__)


class ValidationLevel(Enum):
    """Configuration validation strictness levels"""
    STRICT = "strict"      # Fail fast on validation errors
    LENIENT = "lenient"    # Log warnings, use defaults


class RepositoryConfig(BaseModel):
    """Mock data source configuration"""
    model_config = ConfigDict(extra='forbid')

    delay_seconds: float = Field(default=4.0, ge=0.0, le=60.0, description="Simulated network delay (seconds)")
    user_name: str = Field(default="John Doe", description="Name returned by a successful fetch")
    fail: bool = Field(default=False, description="Make every fetch fail")
    error_message: str = Field(default="An error occurred.", description="Message carried by a failed fetch")


class LoggingConfig(BaseModel):
    """Logging configuration"""
    model_config = ConfigDict(extra='forbid')

    level: str = Field(default="INFO", description="Root log level")
    log_file: Optional[str] = Field(default=None, description="Rotating log file path")
    log_state_changes: bool = Field(default=True, description="Log every accepted state change at DEBUG")


class UIConfig(BaseModel):
    """Console UI configuration"""
    model_config = ConfigDict(extra='forbid')

    user_title: str = Field(default="User Info", description="Title of the user screen")
    counter_title: str = Field(default="Counter with selector", description="Title of the counter screen")
    notice_seconds: float = Field(default=3.0, ge=0.0, le=30.0, description="How long a refresh notice stays up")


class SystemConfig(BaseModel):
    """Complete system configuration"""
    model_config = ConfigDict(extra='forbid')

    repository: RepositoryConfig = Field(default_factory=RepositoryConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    ui: UIConfig = Field(default_factory=UIConfig)

    # Metadata
    schema_version: int = Field(default=1, description="Configuration schema version")


# Environment variable → (section, key, converter)
_ENV_MAP = {
    'VIEWSTATE_FETCH_DELAY': ('repository', 'delay_seconds', float),
    'VIEWSTATE_USER_NAME': ('repository', 'user_name', str),
    'VIEWSTATE_FETCH_FAIL': ('repository', 'fail', bool),
    'VIEWSTATE_ERROR_MESSAGE': ('repository', 'error_message', str),
    'LOG_LEVEL': ('logging', 'level', str),
    'VIEWSTATE_LOG_FILE': ('logging', 'log_file', str),
    'VIEWSTATE_LOG_STATE_CHANGES': ('logging', 'log_state_changes', bool),
}


class ConfigManager:
    """Centralized configuration manager with 4-tier precedence hierarchy"""

    def __init__(self, config_dir: Optional[Path] = None):
        self.config_dir = Path(config_dir) if config_dir else Path.cwd() / "config"
        self._system_config: Optional[SystemConfig] = None
        self._user_config: Optional[Dict[str, Any]] = None
        self._project_config: Optional[Dict[str, Any]] = None

    def _load_yaml_file(self, file_path: Path) -> Dict[str, Any]:
        """Load YAML configuration file"""
        if not file_path.exists():
            return {}

        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            logger.warning(f"Failed to load {file_path}: {e}")
            return {}

        if data is None:
            return {}
        if not isinstance(data, dict):
            logger.warning(f"Ignoring {file_path}: expected a mapping, got {type(data).__name__}")
            return {}
        return data

    def _save_yaml_file(self, file_path: Path, data: Dict[str, Any]) -> bool:
        """Save configuration to YAML file"""
        try:
            file_path.parent.mkdir(parents=True, exist_ok=True)
            with open(file_path, 'w', encoding='utf-8') as f:
                yaml.dump(data, f, default_flow_style=False, sort_keys=False, indent=2)
            return True
        except OSError as e:
            logger.error(f"Failed to save {file_path}: {e}")
            return False

    def _load_system_defaults(self) -> SystemConfig:
        """Load system default configuration"""
        if self._system_config is None:
            defaults_dict = self._load_yaml_file(self.config_dir / "defaults.yaml")

            try:
                self._system_config = SystemConfig(**defaults_dict)
            except ValidationError as e:
                logger.warning(f"System defaults validation failed: {e}")
                self._system_config = SystemConfig()

        return self._system_config

    def _load_user_config(self) -> Dict[str, Any]:
        """Load user-level configuration"""
        if self._user_config is None:
            self._user_config = self._load_yaml_file(self.config_dir / "user.yaml")
        return self._user_config

    def _load_project_config(self) -> Dict[str, Any]:
        """Load project-specific configuration"""
        if self._project_config is None:
            self._project_config = self._load_yaml_file(self.config_dir / "project.yaml")
        return self._project_config

    def _merge_configs(self) -> Dict[str, Any]:
        """Merge configurations with precedence: env → project → user → system"""
        merged = self._load_system_defaults().model_dump()
        self._deep_merge(merged, self._load_user_config())
        self._deep_merge(merged, self._load_project_config())
        self._deep_merge(merged, self._get_env_overrides())
        return merged

    def _deep_merge(self, base: Dict[str, Any], updates: Dict[str, Any]) -> None:
        """Deep merge configuration dictionaries"""
        for key, value in updates.items():
            if key in base and isinstance(base[key], dict) and isinstance(value, dict):
                self._deep_merge(base[key], value)
            else:
                base[key] = value

    def _get_env_overrides(self) -> Dict[str, Any]:
        """Extract configuration overrides from environment variables"""
        overrides: Dict[str, Any] = {}
        for env_key, (section, config_key, convert) in _ENV_MAP.items():
            value = os.getenv(env_key)
            if value is None:
                continue

            if convert is bool:
                converted: Any = value.lower() in ('true', '1', 'yes', 'on')
            else:
                try:
                    converted = convert(value)
                except ValueError:
                    logger.warning(f"Ignoring {env_key}={value!r}: not a valid {convert.__name__}")
                    continue

            overrides.setdefault(section, {})[config_key] = converted

        return overrides

    def get_config(self, validation_level: ValidationLevel = ValidationLevel.STRICT) -> SystemConfig:
        """Get merged configuration with validation"""
        merged_config = self._merge_configs()

        try:
            return SystemConfig(**merged_config)
        except ValidationError as e:
            if validation_level == ValidationLevel.STRICT:
                raise ValueError(f"Configuration validation failed: {e}")
            logger.warning(f"Configuration validation failed, using defaults: {e}")
            return SystemConfig()

    def save_project_config(self, config_updates: Dict[str, Any]) -> bool:
        """Save project-specific configuration updates"""
        project_path = self.config_dir / "project.yaml"

        existing_config = self._load_yaml_file(project_path)
        self._deep_merge(existing_config, config_updates)

        success = self._save_yaml_file(project_path, existing_config)
        if success:
            # Clear cached project config to force reload
            self._project_config = None

        return success

    def reload_config(self) -> None:
        """Clear cached configurations and reload from files"""
        self._system_config = None
        self._user_config = None
        self._project_config = None


# Global instance
_config_manager: Optional[ConfigManager] = None


def get_config_manager(config_dir: Optional[Path] = None) -> ConfigManager:
    """Get global configuration manager instance"""
    global _config_manager
    if _config_manager is None or config_dir is not None:
        _config_manager = ConfigManager(config_dir)
    return _config_manager


def get_config(validation_level: ValidationLevel = ValidationLevel.STRICT) -> SystemConfig:
    """Get current system configuration"""
    return get_config_manager().get_config(validation_level)
