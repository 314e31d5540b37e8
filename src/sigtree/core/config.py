"""Global configuration for sigtree.

This module provides centralized configuration management with support for
environment variables and sensible defaults.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings


class SigtreeConfig(BaseSettings):
    """sigtree configuration settings.

    Values can be overridden via environment variables with SIGTREE_ prefix.
    Example: SIGTREE_MAX_DEPTH=128 overrides max_depth.
    """

    # Parsing / comparison limits
    max_depth: int = Field(
        default=64,
        ge=1,
        le=512,
        description="Maximum type parameter nesting depth for parsing and comparison",
    )

    # Resolvers
    resolver_cache_size: int = Field(
        default=256,
        ge=0,
        le=65536,
        description="Number of name lookups memoized by the import resolver (0 disables)",
    )

    model_config = {
        "env_prefix": "SIGTREE_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


@lru_cache
def get_config() -> SigtreeConfig:
    """Get cached configuration instance.

    Returns:
        SigtreeConfig singleton instance.
    """
    return SigtreeConfig()


def reload_config() -> SigtreeConfig:
    """Reload configuration (clears cache).

    Returns:
        Fresh SigtreeConfig instance.
    """
    get_config.cache_clear()
    return get_config()
