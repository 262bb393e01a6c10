"""
Data models for service credential lookup.

A ``ServiceCatalog`` is the parsed form of the aggregated ``VCAP_SERVICES``
document: service-type keys mapped to the ordered list of bound instances.
Everything here is call-scoped; nothing is cached between lookups.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from vcap_services.core.normalize import parse_json
from vcap_services.exceptions import MalformedSourceError


def _as_text(value: Any) -> str | None:
    if isinstance(value, str) and value:
        return value
    return None


@dataclass(frozen=True)
class Selector:
    """
    A credential lookup request.

    Attributes:
        name: Service name prefix (catalog key or env variable prefix).
        plan: Service plan to match exactly.
        instance_name: Service instance name to match exactly.
    """
    name: str | None = None
    plan: str | None = None
    instance_name: str | None = None

    @classmethod
    def build(cls, name: Any = None, plan: Any = None, instance_name: Any = None) -> Selector:
        """Create a selector, treating non-string or empty fields as unset."""
        return cls(
            name=_as_text(name),
            plan=_as_text(plan),
            instance_name=_as_text(instance_name),
        )

    @property
    def is_empty(self) -> bool:
        return not (self.name or self.plan or self.instance_name)

    def __str__(self) -> str:
        parts = [
            f"{attr}={value!r}"
            for attr, value in (
                ("name", self.name),
                ("plan", self.plan),
                ("instance_name", self.instance_name),
            )
            if value
        ]
        return f"Selector({', '.join(parts)})"


@dataclass(frozen=True)
class ServiceBinding:
    """One bound service instance from the catalog."""
    name: str | None = None
    plan: str | None = None
    label: str | None = None
    credentials: Mapping[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, raw: Any) -> ServiceBinding:
        if not isinstance(raw, Mapping):
            return cls()
        credentials = raw.get("credentials")
        return cls(
            name=raw.get("name"),
            plan=raw.get("plan"),
            label=raw.get("label"),
            credentials=dict(credentials) if isinstance(credentials, Mapping) else {},
        )

    def matches(self, plan: str | None = None, instance_name: str | None = None) -> bool:
        """Unset filters match any value."""
        if plan and self.plan != plan:
            return False
        if instance_name and self.name != instance_name:
            return False
        return True


@dataclass
class ServiceCatalog:
    """
    Parsed ``VCAP_SERVICES`` document.

    Key order and the order of bindings under each key follow the source
    text; "last binding" lookups depend on it.
    """
    services: dict[str, list[ServiceBinding]] = field(default_factory=dict)

    @classmethod
    def parse(cls, text: str | None, source: str = "VCAP_SERVICES") -> ServiceCatalog:
        """
        Parse a catalog document.

        Raises:
            MalformedSourceError: If the text is not JSON or not a JSON object.
        """
        data = parse_json(text, source)
        if not isinstance(data, dict):
            raise MalformedSourceError(source, TypeError("catalog must be a JSON object"))
        services: dict[str, list[ServiceBinding]] = {}
        for label, bindings in data.items():
            if not isinstance(bindings, list):
                bindings = []
            services[label] = [ServiceBinding.from_dict(b) for b in bindings]
        return cls(services=services)

    def labels(self) -> list[str]:
        return list(self.services)

    def find_key(self, prefix: str) -> str | None:
        """Return the first key (source order) starting with ``prefix``."""
        for label in self.services:
            if label.startswith(prefix):
                return label
        return None

    def bindings(self, label: str) -> list[ServiceBinding]:
        return self.services.get(label, [])
