"""SpotPlayer panel license API client."""

from .client import BASE_URL, DEFAULT_TIMEOUT, LicenseClient
from .exceptions import (
    ApiRequestError,
    ConfigurationError,
    ResponseFormatError,
    SpotPlayerError,
    ValidationError,
)

__version__ = "1.0.0"

__all__ = [
    "BASE_URL",
    "DEFAULT_TIMEOUT",
    "LicenseClient",
    "SpotPlayerError",
    "ConfigurationError",
    "ValidationError",
    "ApiRequestError",
    "ResponseFormatError",
    "get_default_client",
    "reset_default_client",
    "set_api_key",
    "create_license",
    "edit_license",
]

# Shared instance behind the module-level helpers. Created on first use and
# not locked: reconfiguring it from several threads at once is the caller's
# problem.
_default_client = None


def get_default_client():
    global _default_client
    if _default_client is None:
        _default_client = LicenseClient()
    return _default_client


def reset_default_client():
    global _default_client
    if _default_client is not None:
        _default_client.close()
    _default_client = None


def set_api_key(api_key):
    get_default_client().set_api_key(api_key)


def create_license(data, api_key=None):
    return get_default_client().create_license(data, api_key=api_key)


def edit_license(license_id, data, api_key=None):
    return get_default_client().edit_license(license_id, data, api_key=api_key)
