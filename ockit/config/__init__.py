"""Configuration loading for ockit."""

from ockit.config.parser import OcConfig, load_config, parse_config

__all__ = ["OcConfig", "load_config", "parse_config"]
