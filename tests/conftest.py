import pytest

from keyclaim import KeyClaimClient

from .helpers import API_KEY


@pytest.fixture
def client():
    c = KeyClaimClient(API_KEY, base_url="http://keyclaim.test")
    yield c
    c.close()


@pytest.fixture
def secret_client():
    c = KeyClaimClient(API_KEY, "test-secret", base_url="http://keyclaim.test")
    yield c
    c.close()
