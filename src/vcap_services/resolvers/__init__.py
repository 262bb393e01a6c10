"""Credential resolution strategies."""

from vcap_services.resolvers.base import (
    CredentialResolver,
    default_resolvers,
    resolve_credentials,
    snapshot_env,
)
from vcap_services.resolvers.catalog import CatalogResolver
from vcap_services.resolvers.flat_env import FlatEnvResolver
from vcap_services.resolvers.kube_env import KubeEnvResolver
from vcap_services.resolvers.local_config import LocalConfigResolver

__all__ = [
    "CredentialResolver",
    "default_resolvers",
    "resolve_credentials",
    "snapshot_env",
    "CatalogResolver",
    "FlatEnvResolver",
    "KubeEnvResolver",
    "LocalConfigResolver",
]
