"""Centralized configuration loading."""
import os
import importlib
from pathlib import Path
from typing import Optional
from dotenv import load_dotenv
from pydantic import ValidationError

from iot_button_notifier.domain.entities.app_config import AppConfig
from iot_button_notifier.infra.common.errors import ConfigError

ENVIRONMENTS = ("local", "staging", "production")


def _load_env_file() -> None:
    """Load environment variables from .env file if it exists."""
    if os.getenv("AWS_LAMBDA_FUNCTION_NAME") or os.getenv("ECS_CONTAINER_METADATA_URI"):
        return
    
    env_path = Path(__file__).parent.parent.parent.parent / ".env"
    if env_path.exists():
        load_dotenv(env_path, override=True)
    else:
        load_dotenv(override=True)


def load_app_config(env: Optional[str] = None) -> AppConfig:
    """
    Load application configuration for environment.
    
    Args:
        env: Environment name (local, staging, production). 
             If None, reads from ENV environment variable.
        
    Returns:
        AppConfig instance
        
    Raises:
        ConfigError: If config module not found or invalid
    """
    _load_env_file()
    
    if env is None:
        env = os.getenv("ENV", "local")
    
    if env not in ENVIRONMENTS:
        raise ConfigError(f"Invalid environment: {env}. Must be one of: {', '.join(ENVIRONMENTS)}")
    
    module_name = f"config.appconfig.{env}"
    try:
        config_module = importlib.import_module(module_name)
    except ImportError as e:
        raise ConfigError(f"Config module not found: {module_name}") from e
    
    try:
        return config_module.build_config()
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration for {env}: {e}") from e
