"""
Shared test helpers: the API key used across tests and a Response builder.
"""

import requests

API_KEY = "YhD5yX/9FQzVTg+c6YHQ7gCtZAs="


def make_response(status, body, url="https://panel.spotplayer.ir/license/edit/"):
    """Build a real requests.Response with the given status and body."""
    r = requests.Response()
    r.status_code = status
    r._content = body.encode() if isinstance(body, str) else body
    r.encoding = "utf-8"
    r.url = url
    return r
