"""Configuration management for clearwrite."""

import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from dotenv import load_dotenv

load_dotenv()

CONFIG_FILENAME = "clearwrite.yaml"

DEFAULT_TONES = ["formal", "casual", "friendly", "professional", "persuasive", "academic"]


class Config:
    """Settings read from the environment, optionally overridden by a YAML file."""

    def __init__(self, path: Optional[str] = None):
        self.values = {
            'model': os.getenv('MODEL', 'gemini-2.0-flash'),
            'temperature': float(os.getenv('TEMPERATURE', '0.2')),
            'max_output_tokens': int(os.getenv('MAX_OUTPUT_TOKENS', '1024')),
            'backend': os.getenv('BACKEND', 'rest'),
            'api_base': os.getenv('GEMINI_API_BASE', 'https://generativelanguage.googleapis.com/v1beta'),
            'openai_base': os.getenv('GEMINI_OPENAI_BASE', 'https://generativelanguage.googleapis.com/v1beta/openai/'),
            'timeout': float(os.getenv('REQUEST_TIMEOUT', '30')),
            'tones': _split_list(os.getenv('TONES')) or list(DEFAULT_TONES),
        }
        if path:
            self.update(load_config_file(path))

    def __getitem__(self, key: str) -> Any:
        return self.values.get(key)

    def get(self, key: str, default: Any = None) -> Any:
        return self.values.get(key, default)

    def update(self, overrides: Dict[str, Any]) -> None:
        """Apply overrides, skipping keys whose value is None."""
        self.values.update({k: v for k, v in overrides.items() if v is not None})


def _split_list(value: Optional[str]):
    if not value:
        return []
    return [item.strip() for item in value.split(',') if item.strip()]


def find_config() -> Optional[str]:
    """Find clearwrite.yaml in the current directory or one of its parents."""
    current_dir = Path.cwd()

    for dir_path in [current_dir] + list(current_dir.parents):
        config_path = dir_path / CONFIG_FILENAME
        if config_path.exists():
            return str(config_path)

    return None


def load_config_file(config_path: str) -> Dict[str, Any]:
    """Load and parse a YAML configuration file."""
    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            config_data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise ValueError(f"Error loading configuration file {config_path}: {e}") from e

    if config_data is None:
        return {}
    if not isinstance(config_data, dict):
        raise ValueError("Configuration file must contain a YAML mapping")

    return config_data
