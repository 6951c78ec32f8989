"""
Shared pytest fixtures.

Each test gets a fresh API app on a fresh mongomock database. The web app
is built around either a MagicMock API client (``api_client_mock``) or a
real ContactsApiClient whose session routes requests into the API app's
test client (``live_api_client``).
"""

from unittest.mock import MagicMock

import mongomock
import pytest
import requests
from werkzeug.http import HTTP_STATUS_CODES

from contacts_app import create_app
from contacts_app.config import TestingConfig
from contacts_app.services.contact_service import ContactService
from contacts_app.web import create_web_app
from contacts_app.web.api_client import ContactsApiClient


class FlaskTestSession:
    """Quacks like requests.Session but answers from a Flask test client."""

    def __init__(self, client, base_url):
        self.client = client
        self.base_url = base_url.rstrip('/')

    def request(self, method, url, params=None, json=None, timeout=None):
        path = url[len(self.base_url):]
        result = self.client.open(path, method=method, query_string=params, json=json)

        response = requests.Response()
        response.status_code = result.status_code
        response.reason = HTTP_STATUS_CODES.get(result.status_code, '')
        response._content = result.get_data()
        response.headers.update(dict(result.headers))
        response.url = url
        return response


@pytest.fixture
def db():
    return mongomock.MongoClient()['contacts-test']


@pytest.fixture
def app(db):
    return create_app(TestingConfig, db=db)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def contact_service(db):
    return ContactService(db)


@pytest.fixture
def make_contact(contact_service):
    """Inserts a contact and returns its id."""
    def _make(**fields):
        data = {'first': 'Ada', 'last': 'Lovelace'}
        data.update(fields)
        return contact_service.create_contact(data)
    return _make


@pytest.fixture
def api_client_mock():
    mock_client = MagicMock(spec=ContactsApiClient)
    mock_client.list_contacts.return_value = []
    mock_client.search_contacts.return_value = []
    return mock_client


@pytest.fixture
def live_api_client(client):
    base_url = TestingConfig.API_URL
    return ContactsApiClient(base_url, session=FlaskTestSession(client, base_url))


@pytest.fixture
def web_client(request):
    """
    Web test client around whichever API client the test asked for:
    ``live_api_client`` when requested, otherwise ``api_client_mock``.
    """
    if 'live_api_client' in request.fixturenames:
        contacts_api = request.getfixturevalue('live_api_client')
    else:
        contacts_api = request.getfixturevalue('api_client_mock')
    return create_web_app(TestingConfig, contacts_api=contacts_api).test_client()
