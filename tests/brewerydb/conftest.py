import pytest
import requests
from unittest.mock import MagicMock
from urllib.parse import urlparse, parse_qs

from brewery_connectors.brewerydb.api_client import BreweryDBClient


FAKE_KEY = "FAKE_KEY"


def make_response(body: str, status_code: int = 200) -> requests.Response:
    """Construit une vraie requests.Response avec le corps donné (sans réseau)."""
    response = requests.Response()
    response.status_code = status_code
    response._content = body.encode("utf-8")
    response.encoding = "utf-8"
    return response


def query_of(uri: str) -> dict:
    """Retourne la query string de l'URI sous forme {clé: valeur}."""
    return {key: values[0] for key, values in parse_qs(urlparse(uri).query).items()}


@pytest.fixture
def response_factory():
    return make_response


@pytest.fixture
def client():
    """Client avec une clé factice; http.get est remplacé par un MagicMock renvoyant {"data": []}."""
    c = BreweryDBClient(api_key=FAKE_KEY)
    c.http.get = MagicMock(return_value=make_response('{"data": []}'))
    return c


@pytest.fixture
def query():
    return query_of
