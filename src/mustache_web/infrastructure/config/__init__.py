"""
Configuration Infrastructure

JSON file-based settings loader and environment overrides
"""

from .loader import (
    MustacheSettings,
    JsonConfigLoader,
    load_settings,
    apply_env_overrides,
    validate_settings,
)
from .env_utils import parse_bool_env, parse_int_env, parse_str_env

__all__ = [
    "MustacheSettings",
    "JsonConfigLoader",
    "load_settings",
    "apply_env_overrides",
    "validate_settings",
    "parse_bool_env",
    "parse_int_env",
    "parse_str_env",
]
