"""
Configuration Loading Utilities.
"""

from __future__ import annotations

import copy
import os
from pathlib import Path
from typing import Any

import yaml

REQUIRED_SECTIONS = ("llm", "server", "analytics")

# Environment variable → (section, key)
_ENV_OVERRIDES: dict[str, tuple[str, str]] = {
    "GOALCOACH_LLM_PROVIDER": ("llm", "provider"),
    "ANTHROPIC_MODEL": ("llm", "anthropic_model"),
    "OPENAI_MODEL": ("llm", "openai_model"),
    "CORS_ORIGINS": ("server", "cors_origins"),
}


def _convert_numeric_strings(obj: Any) -> Any:
    """
    Recursively convert numeric strings to floats/ints.

    Handles values like '1e3' or '30.0' that YAML may parse as strings.
    Model names such as 'gpt-4o' are left untouched.
    """
    if isinstance(obj, dict):
        return {k: _convert_numeric_strings(v) for k, v in obj.items()}
    elif isinstance(obj, list):
        return [_convert_numeric_strings(item) for item in obj]
    elif isinstance(obj, str):
        try:
            if "." in obj or "e" in obj.lower():
                return float(obj)
            return int(obj)
        except ValueError:
            return obj
    return obj


def get_default_config() -> dict[str, Any]:
    """
    Get default configuration dictionary.

    Returns:
        Default configuration
    """
    return {
        "llm": {
            "provider": "anthropic",
            "anthropic_model": "claude-sonnet-4-20250514",
            "openai_model": "gpt-4o",
            "max_tokens": 1024,
            "timeout": 30.0,
        },
        "server": {
            "host": "127.0.0.1",
            "port": 8000,
            "cors_origins": "http://localhost:5173,http://localhost:3000",
        },
        "analytics": {
            "min_events": 10,
            "min_completed_tasks": 5,
            "min_completed_goals": 2,
            "recent_days": 7,
            "window_days": 30,
        },
    }


def load_config(config_path: str | Path) -> dict[str, Any]:
    """
    Load configuration from YAML file.

    Args:
        config_path: Path to configuration file

    Returns:
        Configuration dictionary

    Raises:
        FileNotFoundError: If config file doesn't exist
        yaml.YAMLError: If config file is invalid
    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with open(config_path, encoding="utf-8") as f:
        config = yaml.safe_load(f) or {}

    config = _convert_numeric_strings(config)

    for section in REQUIRED_SECTIONS:
        if section not in config:
            config[section] = {}

    return config


def save_config(config: dict[str, Any], config_path: str | Path) -> None:
    """
    Save configuration to YAML file.

    Args:
        config: Configuration dictionary
        config_path: Output path
    """
    config_path = Path(config_path)
    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, "w", encoding="utf-8") as f:
        yaml.dump(config, f, default_flow_style=False, sort_keys=False)


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def resolve_config(config_path: str | Path | None = None) -> dict[str, Any]:
    """
    Build the effective configuration.

    Defaults are overlaid with the YAML file (the given path, else
    ``GOALCOACH_CONFIG`` when set) and then with
    environment variables. API keys are never part of the config; the
    provider SDKs read ``ANTHROPIC_API_KEY`` / ``OPENAI_API_KEY`` themselves.

    Args:
        config_path: Optional path to a YAML configuration file

    Returns:
        Configuration dictionary with every required section populated
    """
    config = get_default_config()
    config_path = config_path or os.getenv("GOALCOACH_CONFIG")
    if config_path:
        config = _deep_merge(config, load_config(config_path))

    for env_name, (section, key) in _ENV_OVERRIDES.items():
        value = os.getenv(env_name)
        if value:
            config.setdefault(section, {})[key] = value

    return config
