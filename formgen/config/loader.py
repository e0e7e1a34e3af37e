"""Configuration loader with environment variable overrides."""

import os
from pathlib import Path
from typing import Any

import yaml


_config: dict[str, Any] | None = None


def load_config(config_path: str | None = None, reload: bool = False) -> dict[str, Any]:
    """Load configuration from YAML file with environment variable overrides."""
    global _config
    if _config is not None and not reload:
        return _config

    if config_path is None:
        base_dir = Path(__file__).resolve().parent.parent.parent
        config_path = base_dir / "config" / "default.yaml"

    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, encoding="utf-8") as f:
        config = yaml.safe_load(f) or {}

    # Environment overrides
    for section in ("ollama", "generation", "logging", "export"):
        config[section] = config.get(section) or {}
    if os.getenv("FORMGEN_OLLAMA_MODEL"):
        config["ollama"]["model"] = os.getenv("FORMGEN_OLLAMA_MODEL")
    if os.getenv("FORMGEN_OLLAMA_BASE_URL"):
        config["ollama"]["base_url"] = os.getenv("FORMGEN_OLLAMA_BASE_URL")
    if os.getenv("FORMGEN_GENERATION_TIMEOUT"):
        config["generation"]["timeout_seconds"] = float(os.getenv("FORMGEN_GENERATION_TIMEOUT"))
    if os.getenv("FORMGEN_LOG_LEVEL"):
        config["logging"]["level"] = os.getenv("FORMGEN_LOG_LEVEL")

    _config = config
    return _config


def get_config() -> dict[str, Any]:
    """Get loaded configuration. Loads if not already loaded."""
    if _config is None:
        load_config()
    return _config or {}
