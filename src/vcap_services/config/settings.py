"""
Configuration settings for vcap_services.

Resolver settings come from the process environment on every call, and
local credential files are read with python-dotenv without touching
``os.environ``.
"""

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

from dotenv import dotenv_values

logger = logging.getLogger(__name__)

DEFAULT_CATALOG_VARIABLE = "VCAP_SERVICES"
DEFAULT_KUBE_PREFIX = "service_"
DEFAULT_SERVICE_PREFIX = "watson"


@dataclass(frozen=True)
class ResolverSettings:
    """
    Names and prefixes used to locate credentials.

    Attributes:
        catalog_variable: Variable holding the aggregated service catalog
        kube_prefix: Literal prefix of per-service Kubernetes variables
        service_prefix: Vendor prefix of legacy credential keys

    Environment Variables:
        VCAP_SERVICES_CATALOG_VAR: Overrides catalog_variable
        VCAP_SERVICES_KUBE_PREFIX: Overrides kube_prefix
        VCAP_SERVICES_SERVICE_PREFIX: Overrides service_prefix
    """
    catalog_variable: str = DEFAULT_CATALOG_VARIABLE
    kube_prefix: str = DEFAULT_KUBE_PREFIX
    service_prefix: str = DEFAULT_SERVICE_PREFIX

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "ResolverSettings":
        """Load settings from an environment mapping (defaults to os.environ)."""
        if env is None:
            env = os.environ
        return cls(
            catalog_variable=env.get("VCAP_SERVICES_CATALOG_VAR") or DEFAULT_CATALOG_VARIABLE,
            kube_prefix=env.get("VCAP_SERVICES_KUBE_PREFIX") or DEFAULT_KUBE_PREFIX,
            service_prefix=env.get("VCAP_SERVICES_SERVICE_PREFIX") or DEFAULT_SERVICE_PREFIX,
        )


def get_settings(env: Optional[Mapping[str, str]] = None) -> ResolverSettings:
    """Return settings for the given environment. Not cached."""
    return ResolverSettings.from_env(env)


def load_local_config(path: Union[str, Path]) -> Dict[str, Any]:
    """
    Read a local credentials file into a flat dict.

    ``.json`` files are decoded as JSON objects, anything else is parsed
    as a dotenv file. A missing or unreadable file gives an empty dict.
    """
    path = Path(path)
    if not path.is_file():
        logger.debug("Local credentials file %s not found", path)
        return {}

    if path.suffix.lower() == ".json":
        try:
            with path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning("Failed to read local credentials file %s: %s", path, e)
            return {}
        if not isinstance(data, dict):
            logger.warning("Local credentials file %s is not a JSON object", path)
            return {}
        return data

    try:
        values = dotenv_values(path)
    except (OSError, ValueError) as e:
        logger.warning("Failed to read local credentials file %s: %s", path, e)
        return {}
    return {key: value for key, value in values.items() if value is not None}
