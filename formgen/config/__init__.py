"""Configuration module."""

from formgen.config.loader import load_config, get_config

__all__ = ["load_config", "get_config"]
