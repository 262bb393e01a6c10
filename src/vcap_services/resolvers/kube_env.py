"""
Lookup in Kubernetes-style per-service variables.

The platform injects one JSON blob per logical service, named
``service_<vendor>_<name>`` (for example ``service_watson_conversation``),
with legacy-prefixed keys inside.
"""

from __future__ import annotations

import logging
from typing import Any

from vcap_services.config.settings import DEFAULT_KUBE_PREFIX, DEFAULT_SERVICE_PREFIX
from vcap_services.core.models import Selector
from vcap_services.core.normalize import legacy_prefix, normalize_fields, parse_json
from vcap_services.exceptions import MalformedSourceError
from vcap_services.resolvers.base import CredentialResolver, Environment

logger = logging.getLogger(__name__)


class KubeEnvResolver(CredentialResolver):
    """Resolve credentials from a single ``service_<vendor>_<name>`` variable."""

    source_name = "kube-env"

    def __init__(
        self,
        prefix: str = DEFAULT_KUBE_PREFIX,
        service_prefix: str = DEFAULT_SERVICE_PREFIX,
    ) -> None:
        self.prefix = prefix
        self.service_prefix = service_prefix

    def variable_for(self, name: str) -> str:
        return f"{self.prefix}{legacy_prefix(name, self.service_prefix)}"

    def read(self, name: str, env: Environment) -> dict[str, Any]:
        """Return the raw, not yet normalized blob for ``name``."""
        variable = self.variable_for(name)
        value = env.get(variable)
        if value is None:
            return {}
        try:
            data = parse_json(value, variable)
        except MalformedSourceError as e:
            logger.warning("Ignoring %s", e)
            return {}
        if not isinstance(data, dict):
            logger.warning("Ignoring %s: value is not a JSON object", variable)
            return {}
        return data

    def resolve(self, selector: Selector, env: Environment) -> dict[str, Any]:
        if not selector.name:
            return {}
        raw = self.read(selector.name, env)
        return normalize_fields(raw, legacy_prefix(selector.name, self.service_prefix))
