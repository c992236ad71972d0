"""
Shared fixtures. The requests.Session behind the client is replaced by a
mock, so nothing here touches the network.
"""

import json
from unittest.mock import MagicMock

import pytest
import requests

import spotplayer
from spotplayer import LicenseClient
from helpers import API_KEY, make_response


@pytest.fixture
def session():
    s = MagicMock(spec=requests.Session)
    s.post.return_value = make_response(200, json.dumps({"_id": "abc123", "key": "k", "url": "https://dl/abc"}))
    return s


@pytest.fixture
def echo_session(session):
    """Session that answers with the body it was sent."""
    session.post.side_effect = lambda url, data=None, **kwargs: make_response(200, data)
    return session


@pytest.fixture
def client(session):
    return LicenseClient(API_KEY, session=session)


@pytest.fixture
def license_data():
    return {
        "course": ["5d2ee35bcddc092a304ae5eb"],
        "name": "customer",
        "watermark": {"texts": [{"text": "09022223301"}]},
    }


@pytest.fixture(autouse=True)
def reset_default():
    spotplayer.reset_default_client()
    yield
    spotplayer.reset_default_client()
