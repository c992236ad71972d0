import logging
from urllib.parse import quote

import requests

from .exceptions import ApiRequestError, ConfigurationError, ResponseFormatError
from .validation import encode_license_data, require_mapping, validate_license_data, validate_license_id

logger = logging.getLogger(__name__)

BASE_URL = "https://panel.spotplayer.ir"
LICENSE_PATH = "/license/edit/"
ACCESS_LEVEL = "-1"
DEFAULT_TIMEOUT = 30


class LicenseClient:
    """Client for the SpotPlayer panel license API.

    The key passed to a call wins over the one configured on the client,
    for that call only. set_api_key is not synchronized; changing the key
    while other threads are issuing calls is up to the caller.
    """

    def __init__(self, api_key=None, base_url=BASE_URL, timeout=DEFAULT_TIMEOUT, session=None):
        self._api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        if session is None:
            session = requests.Session()
            session.verify = True
        self.session = session

    @property
    def api_key(self):
        return self._api_key

    def get_api_key(self):
        return self._api_key

    def set_api_key(self, api_key):
        self._api_key = api_key
        return self

    def close(self):
        self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()

    def create_license(self, data, api_key=None):
        """Create a license. Returns the panel's response, e.g. {"_id", "key", "url"}."""
        api_key = self._resolve_api_key(api_key)
        validate_license_data(data, is_create=True)
        return self._post(LICENSE_PATH, encode_license_data(data), api_key)

    def edit_license(self, license_id, data, api_key=None):
        """Update an existing license. data may hold any subset of fields."""
        api_key = self._resolve_api_key(api_key)
        validate_license_id(license_id)
        require_mapping(data)
        return self._post(LICENSE_PATH + quote(license_id, safe=""), encode_license_data(data), api_key)

    def _resolve_api_key(self, api_key):
        key = api_key if api_key is not None else self._api_key
        if not key:
            raise ConfigurationError(
                "API key is required. Set it via the constructor, set_api_key(), or pass it as a parameter."
            )
        return key

    def _post(self, path, body, api_key):
        headers = {
            "$API": api_key,
            "$LEVEL": ACCESS_LEVEL,
            "Content-Type": "application/json",
        }
        logger.debug("POST %s", path)
        try:
            r = self.session.post(f"{self.base_url}{path}", data=body, headers=headers, timeout=self.timeout)
            r.raise_for_status()
        except requests.HTTPError as e:
            status = e.response.status_code if e.response is not None else None
            text = e.response.text if e.response is not None else ""
            logger.warning("POST %s failed with status %s", path, status)
            message = f"API request failed: {text}" if text else "API request failed"
            raise ApiRequestError(message, status_code=status, response_body=text or None) from e
        except requests.RequestException as e:
            logger.warning("POST %s failed: %s", path, type(e).__name__)
            raise ApiRequestError(f"HTTP request failed: {e}") from e

        logger.debug("POST %s -> %s", path, r.status_code)
        try:
            return r.json()
        except ValueError as e:
            logger.warning("POST %s returned a non-JSON body", path)
            raise ResponseFormatError(f"Invalid JSON response from API: {e}") from e
