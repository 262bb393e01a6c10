"""
vcap_services - locate bound service credentials inside a cloud app.

Credentials can arrive as:
- A ``VCAP_SERVICES`` catalog of every bound service (Cloud Foundry)
- One environment variable per service instance
- One ``service_watson_<name>`` variable per service (Kubernetes)
- A local config mapping or credentials file

Example:
    from vcap_services import get_credentials

    creds = get_credentials("personality_insights", plan="standard")
    if creds:
        client = Client(url=creds["url"], apikey=creds.get("iam_apikey"))
"""

import logging

__version__ = "0.1.0"

from vcap_services.config.settings import ResolverSettings, get_settings, load_local_config
from vcap_services.core.models import Selector, ServiceBinding, ServiceCatalog
from vcap_services.core.normalize import normalize_fields, normalize_name
from vcap_services.exceptions import (
    CredentialsNotFoundError,
    MalformedSourceError,
    VcapServicesError,
)
from vcap_services.resolvers import (
    CatalogResolver,
    CredentialResolver,
    FlatEnvResolver,
    KubeEnvResolver,
    LocalConfigResolver,
    resolve_credentials,
)
from vcap_services.service import (
    get_credentials,
    get_credentials_for_starter,
    get_credentials_from_kube_env,
    get_credentials_from_local_config,
    get_credentials_from_local_file,
    require_credentials,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    # Lookups
    "get_credentials",
    "get_credentials_for_starter",
    "get_credentials_from_kube_env",
    "get_credentials_from_local_config",
    "get_credentials_from_local_file",
    "require_credentials",
    # Models
    "Selector",
    "ServiceBinding",
    "ServiceCatalog",
    "normalize_fields",
    "normalize_name",
    # Resolvers
    "CredentialResolver",
    "CatalogResolver",
    "FlatEnvResolver",
    "KubeEnvResolver",
    "LocalConfigResolver",
    "resolve_credentials",
    # Config
    "ResolverSettings",
    "get_settings",
    "load_local_config",
    # Exceptions
    "VcapServicesError",
    "MalformedSourceError",
    "CredentialsNotFoundError",
]
