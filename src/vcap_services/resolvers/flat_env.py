"""
Lookup in individually named environment variables.

Used when no service catalog is present; each bound service is exported
as its own variable, e.g. ``COMPOSE_FOR_REDIS_OV='{"uri": ...}'``.
"""

from __future__ import annotations

import logging
from typing import Any

from vcap_services.config.settings import DEFAULT_CATALOG_VARIABLE
from vcap_services.core.models import Selector
from vcap_services.core.normalize import normalize_name, parse_json
from vcap_services.exceptions import MalformedSourceError
from vcap_services.resolvers.base import CredentialResolver, Environment

logger = logging.getLogger(__name__)


class FlatEnvResolver(CredentialResolver):
    """
    Resolve credentials from per-service environment variables.

    The instance name is tried first, as an exact match on the normalized
    variable name. Failing that, the first variable whose name starts
    with the normalized service name is used, even if its value turns out
    not to be JSON.

    Variable names are compared as-is against the uppercased lookup
    string, so lowercase variables never match. Existing deployments rely
    on this.
    """

    source_name = "flat-env"

    def __init__(self, catalog_variable: str = DEFAULT_CATALOG_VARIABLE) -> None:
        self.catalog_variable = catalog_variable

    def applies_to(self, env: Environment) -> bool:
        return not env.get(self.catalog_variable)

    def resolve(self, selector: Selector, env: Environment) -> dict[str, Any]:
        if selector.instance_name:
            credentials = self._by_instance(selector.instance_name, env)
            if credentials:
                return credentials
        if selector.name:
            return self._by_prefix(selector.name, env)
        return {}

    def _by_instance(self, instance_name: str, env: Environment) -> dict[str, Any]:
        variable = normalize_name(instance_name)
        if variable not in env:
            return {}
        return self._load(variable, env[variable])

    def _by_prefix(self, name: str, env: Environment) -> dict[str, Any]:
        prefix = normalize_name(name)
        for variable, value in env.items():
            if variable.startswith(prefix):
                return self._load(variable, value)
        return {}

    def _load(self, variable: str, value: str) -> dict[str, Any]:
        try:
            data = parse_json(value, variable)
        except MalformedSourceError as e:
            logger.warning("Ignoring %s", e)
            return {}
        if not isinstance(data, dict):
            logger.warning("Ignoring %s: value is not a JSON object", variable)
            return {}
        return data
