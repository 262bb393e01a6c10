"""
Configuration module for vcap_services.

Provides:
- Resolver settings (catalog variable, Kubernetes prefix, legacy key prefix)
- Local credentials file loading
"""

from vcap_services.config.settings import (
    ResolverSettings,
    get_settings,
    load_local_config,
)

__all__ = [
    "ResolverSettings",
    "get_settings",
    "load_local_config",
]
