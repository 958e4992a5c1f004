import pytest

from unittest.mock import Mock

from picsum.client import PicsumClient
from picsum.context import PicsumContext

def _make_response(status_code=200, content=b"", headers=None, payload=None):
    response = Mock()
    response.status_code = status_code
    response.content = content
    response.headers = headers or {}
    response.json.return_value = payload

    return response

@pytest.fixture
def make_response():
    return _make_response

@pytest.fixture
def session():
    session = Mock()
    session.get.return_value = _make_response(content=b"\xff\xd8image")

    return session

@pytest.fixture
def client(session):
    return PicsumClient(
        context=PicsumContext(),
        session=session,
        base_url="https://picsum.photos",
        timeout=5,
    )
