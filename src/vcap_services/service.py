"""
Public entry points for credential lookup.

Example:
    from vcap_services import get_credentials, get_credentials_for_starter

    # Cloud Foundry: last "cloudantNoSQLDB" binding on the "Lite" plan
    creds = get_credentials("cloudantNoSQLDB", plan="Lite")

    # Starter kits: local config first, then service_watson_<name>
    creds = get_credentials_for_starter("conversation", load_local_config(".env"))
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Mapping

from vcap_services.config.settings import ResolverSettings, get_settings, load_local_config
from vcap_services.core.models import Selector
from vcap_services.exceptions import CredentialsNotFoundError
from vcap_services.resolvers.base import (
    Environment,
    default_resolvers,
    resolve_credentials,
    snapshot_env,
)
from vcap_services.resolvers.kube_env import KubeEnvResolver
from vcap_services.resolvers.local_config import LocalConfigResolver

logger = logging.getLogger(__name__)


def get_credentials(
    name: Any = None,
    plan: Any = None,
    instance_name: Any = None,
    env: Environment | None = None,
    settings: ResolverSettings | None = None,
) -> dict[str, Any]:
    """
    Find credentials for a bound service.

    With a ``VCAP_SERVICES`` catalog present, the first service type whose
    key starts with ``name`` is searched from the last binding backwards
    for one matching ``plan`` and ``instance_name``. Without a catalog,
    individual environment variables named after the instance or service
    are used instead.

    Args:
        name: Service name prefix.
        plan: Service plan to match.
        instance_name: Service instance name to match.
        env: Environment mapping to read instead of ``os.environ``.
        settings: Override the variable names in use.

    Returns:
        The credentials dict, or ``{}`` if nothing matched or the source
        was malformed.
    """
    selector = Selector.build(name, plan, instance_name)
    if selector.is_empty:
        return {}
    snapshot = snapshot_env(env)
    settings = settings or get_settings(snapshot)
    return resolve_credentials(selector, default_resolvers(settings), snapshot)


def require_credentials(
    name: Any = None,
    plan: Any = None,
    instance_name: Any = None,
    env: Environment | None = None,
    settings: ResolverSettings | None = None,
) -> dict[str, Any]:
    """
    Like ``get_credentials`` but raise when nothing is found.

    Raises:
        CredentialsNotFoundError: If the lookup comes back empty.
    """
    credentials = get_credentials(name, plan, instance_name, env=env, settings=settings)
    if not credentials:
        raise CredentialsNotFoundError(Selector.build(name, plan, instance_name))
    return credentials


def get_credentials_from_local_config(
    name: Any,
    config: Mapping[str, Any] | None = None,
    settings: ResolverSettings | None = None,
) -> dict[str, Any]:
    """
    Extract ``watson_<name>_*`` fields from a flat config mapping and
    return them under canonical names.

    >>> get_credentials_from_local_config(
    ...     "conversation",
    ...     {"watson_conversation_username": "u", "watson_conversation_apikey": "k"},
    ... )
    {'username': 'u', 'iam_apikey': 'k'}
    """
    selector = Selector.build(name)
    if selector.is_empty or not isinstance(config, Mapping):
        return {}
    settings = settings or ResolverSettings()
    return LocalConfigResolver(config, settings.service_prefix).resolve(selector, {})


def get_credentials_from_local_file(
    name: Any,
    path: str | Path = ".env",
    settings: ResolverSettings | None = None,
) -> dict[str, Any]:
    """Read a local credentials file and extract ``name``'s credentials."""
    if not Selector.build(name).name:
        return {}
    return get_credentials_from_local_config(name, load_local_config(path), settings)


def get_credentials_from_kube_env(
    name: Any,
    env: Environment | None = None,
    settings: ResolverSettings | None = None,
) -> dict[str, Any]:
    """Read ``service_watson_<name>`` and return canonical credentials."""
    selector = Selector.build(name)
    if selector.is_empty:
        return {}
    snapshot = snapshot_env(env)
    settings = settings or get_settings(snapshot)
    resolver = KubeEnvResolver(settings.kube_prefix, settings.service_prefix)
    return resolver.resolve(selector, snapshot)


def get_credentials_for_starter(
    name: Any = None,
    config: Mapping[str, Any] | None = None,
    env: Environment | None = None,
    settings: ResolverSettings | None = None,
) -> dict[str, Any]:
    """
    Starter-kit lookup: ``config`` first (when given), then the Kubernetes
    variable. The service catalog is not consulted.
    """
    selector = Selector.build(name)
    if selector.is_empty:
        return {}
    snapshot = snapshot_env(env)
    settings = settings or get_settings(snapshot)
    resolvers = [
        LocalConfigResolver(config, settings.service_prefix),
        KubeEnvResolver(settings.kube_prefix, settings.service_prefix),
    ]
    return resolve_credentials(selector, resolvers, snapshot)
