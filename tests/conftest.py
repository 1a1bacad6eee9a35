import os

import pytest
from fastapi.testclient import TestClient

from apischeme.api.main import create_app
from apischeme.core.objects import build_scheme
from apischeme.core.runtime.scheme import Scheme


@pytest.fixture(scope="session", autouse=True)
def _force_test_env():
    os.environ.setdefault("APISCHEME_ENV", "dev")


@pytest.fixture(scope="session")
def scheme() -> Scheme:
    """The fully registered, frozen process scheme."""
    return build_scheme()


@pytest.fixture()
def empty_scheme() -> Scheme:
    """A fresh, unfrozen scheme for registration tests."""
    return Scheme()


@pytest.fixture(scope="session")
def app(scheme):
    return create_app(scheme=scheme)


@pytest.fixture()
def client(app):
    return TestClient(app)
