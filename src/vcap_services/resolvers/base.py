"""
Base interface for credential resolution strategies.

Each strategy looks in one kind of source (service catalog, individual
environment variables, Kubernetes-style variables, a caller-supplied
config object) and returns either a populated dict or ``{}``. Strategies
never raise for missing or malformed sources.
"""

from __future__ import annotations

import logging
import os
from abc import ABC, abstractmethod
from typing import Any, Mapping, Sequence

from vcap_services.config.settings import ResolverSettings, get_settings
from vcap_services.core.models import Selector

logger = logging.getLogger(__name__)

Environment = Mapping[str, str]


def snapshot_env(env: Environment | None = None) -> dict[str, str]:
    """Copy ``env`` (default ``os.environ``) so one lookup sees one state."""
    return dict(os.environ if env is None else env)


class CredentialResolver(ABC):
    """
    Abstract base class for a credential source.

    Example:
        class StaticResolver(CredentialResolver):
            def __init__(self, credentials):
                self.credentials = credentials

            def resolve(self, selector, env):
                return dict(self.credentials) if selector.name else {}
    """

    #: Short name used in log messages.
    source_name: str = "resolver"

    def applies_to(self, env: Environment) -> bool:
        """Whether this strategy should be consulted for ``env`` at all."""
        return True

    @abstractmethod
    def resolve(self, selector: Selector, env: Environment) -> dict[str, Any]:
        """
        Look up credentials for a selector.

        Args:
            selector: The lookup request.
            env: Environment snapshot to read from.

        Returns:
            The credentials, or an empty dict when nothing matched.
        """
        raise NotImplementedError


def default_resolvers(settings: ResolverSettings) -> list[CredentialResolver]:
    """Catalog first, individual variables only when there is no catalog."""
    from vcap_services.resolvers.catalog import CatalogResolver
    from vcap_services.resolvers.flat_env import FlatEnvResolver

    return [
        CatalogResolver(settings.catalog_variable),
        FlatEnvResolver(settings.catalog_variable),
    ]


def resolve_credentials(
    selector: Selector,
    resolvers: Sequence[CredentialResolver] | None = None,
    env: Environment | None = None,
) -> dict[str, Any]:
    """
    Try each applicable resolver in order; the first non-empty result wins.

    An empty selector returns ``{}`` without reading the environment.

    Args:
        selector: The lookup request.
        resolvers: Strategies to try. Defaults to the catalog and
            individual-variable resolvers configured for ``env``.
        env: Environment mapping to read instead of ``os.environ``.
    """
    if selector.is_empty:
        return {}

    snapshot = snapshot_env(env)
    if resolvers is None:
        resolvers = default_resolvers(get_settings(snapshot))
    for resolver in resolvers:
        if not resolver.applies_to(snapshot):
            continue
        credentials = resolver.resolve(selector, snapshot)
        if credentials:
            logger.debug("%s resolved credentials for %s", resolver.source_name, selector)
            return credentials
    logger.debug("No credentials found for %s", selector)
    return {}
