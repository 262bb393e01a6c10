"""
Exception hierarchy for vcap_services.

The public ``get_credentials*`` helpers never raise these: a malformed
source and a missing binding both come back as an empty dict. The
exceptions exist for the internal parsers and for ``require_credentials``.
"""

from __future__ import annotations

from typing import Any


class VcapServicesError(Exception):
    """Base exception for all vcap_services errors."""
    pass


class MalformedSourceError(VcapServicesError):
    """A consulted variable or object did not hold usable JSON."""
    def __init__(self, source: str, cause: Exception | None = None):
        self.source = source
        self.cause = cause
        message = f"Malformed credentials source '{source}'"
        if cause is not None:
            message += f": {cause}"
        super().__init__(message)


class CredentialsNotFoundError(VcapServicesError):
    """No credentials matched the requested selector."""
    def __init__(self, selector: Any):
        self.selector = selector
        super().__init__(f"No credentials found for {selector}")
