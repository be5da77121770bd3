"""
Configuration management for propgen.
"""

from .generation_config import GenerationConfig, get_config, set_config

__all__ = ["GenerationConfig", "get_config", "set_config"]
