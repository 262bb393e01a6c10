"""
Lookup in the aggregated ``VCAP_SERVICES`` service catalog.
"""

from __future__ import annotations

import logging
from typing import Any

from vcap_services.config.settings import DEFAULT_CATALOG_VARIABLE
from vcap_services.core.models import Selector, ServiceCatalog
from vcap_services.exceptions import MalformedSourceError
from vcap_services.resolvers.base import CredentialResolver, Environment

logger = logging.getLogger(__name__)


class CatalogResolver(CredentialResolver):
    """
    Resolve credentials from the Cloud Foundry service catalog.

    The first catalog key starting with ``selector.name`` (case-sensitive)
    is used; other matching keys are never considered. Without a plan or
    instance name the last binding under that key wins. With either
    filter, bindings are scanned from the end and the first one matching
    all given filters wins; if none does the result is empty.
    """

    source_name = "catalog"

    def __init__(self, variable: str = DEFAULT_CATALOG_VARIABLE) -> None:
        self.variable = variable

    def applies_to(self, env: Environment) -> bool:
        return bool(env.get(self.variable))

    def resolve(self, selector: Selector, env: Environment) -> dict[str, Any]:
        return self.resolve_text(env.get(self.variable), selector)

    def resolve_text(self, text: str | None, selector: Selector) -> dict[str, Any]:
        """Resolve against raw catalog JSON text."""
        if not text or not selector.name:
            return {}
        try:
            catalog = ServiceCatalog.parse(text, source=self.variable)
        except MalformedSourceError as e:
            logger.warning("Ignoring %s: %s", self.variable, e)
            return {}
        return self.resolve_catalog(catalog, selector)

    def resolve_catalog(self, catalog: ServiceCatalog, selector: Selector) -> dict[str, Any]:
        if not selector.name:
            return {}
        label = catalog.find_key(selector.name)
        if label is None:
            return {}

        bindings = catalog.bindings(label)
        if not bindings:
            return {}
        if not (selector.plan or selector.instance_name):
            return dict(bindings[-1].credentials)

        for binding in reversed(bindings):
            if binding.matches(selector.plan, selector.instance_name):
                return dict(binding.credentials)
        logger.debug("No binding under %r matches %s", label, selector)
        return {}
