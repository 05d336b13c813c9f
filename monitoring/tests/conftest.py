import pytest
from rest_framework.test import APIClient


def login(client, username, password):
    return client.post('/api/auth/login', {'Username': username, 'Password': password}, format='json')


def bearer_client(username, password) -> APIClient:
    client = APIClient()
    r = login(client, username, password)
    assert r.status_code == 200, r.data
    client.credentials(HTTP_AUTHORIZATION=f"Bearer {r.data['token']}")
    return client


@pytest.fixture
def doctor_client():
    """Client holding an Admin token."""
    return bearer_client('doctor', 'med123')


@pytest.fixture
def viewer_client():
    """Client holding a User token."""
    return bearer_client('user', 'userpass')


@pytest.fixture
def anon_client():
    return APIClient()
