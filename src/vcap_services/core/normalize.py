"""
Name and field normalization shared by the resolvers.
"""

from __future__ import annotations

import json
from typing import Any, Mapping

from vcap_services.exceptions import MalformedSourceError

# Canonical credential field for each recognised legacy suffix.
LEGACY_FIELDS: dict[str, str] = {
    "username": "username",
    "password": "password",
    "url": "url",
    "api_key": "api_key",
    "apikey": "iam_apikey",
}

_DELIMITERS = str.maketrans({" ": "_", "-": "_", "&": "_"})


def normalize_name(value: str) -> str:
    """
    Uppercase ``value`` and turn spaces, hyphens and ampersands into
    underscores, e.g. ``"Compose for Redis-ov"`` -> ``"COMPOSE_FOR_REDIS_OV"``.

    Only the lookup string is normalized. Environment variable names are
    compared as they are, so a lowercase variable never matches.
    """
    return value.upper().translate(_DELIMITERS)


def parse_json(text: str | None, source: str) -> Any:
    """
    Decode JSON text from a named source.

    Raises:
        MalformedSourceError: If ``text`` is missing or not valid JSON.
    """
    if text is None:
        raise MalformedSourceError(source, ValueError("no value"))
    try:
        return json.loads(text)
    except (TypeError, ValueError) as e:
        raise MalformedSourceError(source, e) from e


def legacy_prefix(name: str, service_prefix: str) -> str:
    """Build the legacy key prefix, e.g. ``watson_conversation``."""
    return f"{service_prefix}_{name.lower()}"


def normalize_fields(raw: Mapping[str, Any] | None, prefix: str | None = None) -> dict[str, Any]:
    """
    Map legacy ``<prefix>_<field>`` keys onto the canonical credential schema.

    Keys without the prefix are copied unchanged, so canonical input comes
    back as-is. Prefixed keys with a recognised suffix are renamed
    (``apikey`` becomes ``iam_apikey``) and override canonical keys of the
    same name; other prefixed keys are dropped.

    Args:
        raw: Credentials in canonical and/or legacy form.
        prefix: Legacy key prefix, e.g. ``"watson_conversation"``.

    Returns:
        A new dict; empty when ``raw`` is empty or not a mapping.
    """
    if not isinstance(raw, Mapping):
        return {}

    marker = f"{prefix}_" if prefix else None
    canonical: dict[str, Any] = {}
    legacy: dict[str, Any] = {}
    for key, value in raw.items():
        if marker and key.startswith(marker):
            target = LEGACY_FIELDS.get(key[len(marker):])
            if target and value:
                legacy[target] = value
        else:
            canonical[key] = value

    canonical.update(legacy)
    return canonical
