import json

import pytest
from cryptography.hazmat.primitives.asymmetric import rsa
from jwt.algorithms import RSAAlgorithm

from keeplater import create_app
from keeplater.config import TestConfig
from keeplater.extensions import db
from tests.helpers import TEST_KID, jwks_urlopen, make_token


def _rsa_key():
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture(scope="session")
def signing_key():
    return _rsa_key()


@pytest.fixture(scope="session")
def foreign_signing_key():
    return _rsa_key()


@pytest.fixture(scope="session")
def public_jwk(signing_key):
    jwk = json.loads(RSAAlgorithm.to_jwk(signing_key.public_key()))
    jwk.update({"kid": TEST_KID, "alg": "RS256", "use": "sig"})
    return jwk


@pytest.fixture
def jwks_requests(monkeypatch, public_jwk):
    requests = []
    monkeypatch.setattr(
        "urllib.request.urlopen", jwks_urlopen({"keys": [public_jwk]}, requests)
    )
    return requests


@pytest.fixture
def app(jwks_requests):
    app = create_app(TestConfig)
    with app.app_context():
        db.drop_all()
        db.create_all()
    yield app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def auth_headers(signing_key):
    return {"Authorization": f"Bearer {make_token(signing_key)}"}
