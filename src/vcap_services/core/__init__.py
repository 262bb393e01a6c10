"""Data models and normalization helpers."""

from vcap_services.core.models import Selector, ServiceBinding, ServiceCatalog
from vcap_services.core.normalize import (
    LEGACY_FIELDS,
    legacy_prefix,
    normalize_fields,
    normalize_name,
    parse_json,
)

__all__ = [
    "Selector",
    "ServiceBinding",
    "ServiceCatalog",
    "LEGACY_FIELDS",
    "legacy_prefix",
    "normalize_fields",
    "normalize_name",
    "parse_json",
]
