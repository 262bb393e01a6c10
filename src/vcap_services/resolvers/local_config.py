"""
Lookup in a caller-supplied configuration object.
"""

from __future__ import annotations

from typing import Any, Mapping

from vcap_services.config.settings import DEFAULT_SERVICE_PREFIX
from vcap_services.core.models import Selector
from vcap_services.core.normalize import LEGACY_FIELDS, legacy_prefix, normalize_fields
from vcap_services.resolvers.base import CredentialResolver, Environment


class LocalConfigResolver(CredentialResolver):
    """
    Pick ``<vendor>_<name>_<field>`` entries out of a flat config mapping,
    such as the contents of a local credentials file.

    The environment is never read.
    """

    source_name = "local-config"

    def __init__(
        self,
        config: Mapping[str, Any] | None = None,
        service_prefix: str = DEFAULT_SERVICE_PREFIX,
    ) -> None:
        self.config = config
        self.service_prefix = service_prefix

    def applies_to(self, env: Environment) -> bool:
        return isinstance(self.config, Mapping) and bool(self.config)

    def extract(self, name: str) -> dict[str, Any]:
        """Return the recognised legacy-keyed fields for ``name``."""
        if not isinstance(self.config, Mapping) or not name:
            return {}
        prefix = legacy_prefix(name, self.service_prefix)
        extracted = {}
        for suffix in LEGACY_FIELDS:
            key = f"{prefix}_{suffix}"
            if self.config.get(key):
                extracted[key] = self.config[key]
        return extracted

    def resolve(self, selector: Selector, env: Environment) -> dict[str, Any]:
        if not selector.name:
            return {}
        return normalize_fields(
            self.extract(selector.name),
            legacy_prefix(selector.name, self.service_prefix),
        )
