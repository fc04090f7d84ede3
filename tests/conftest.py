import random

import pytest

from greensteps import create_app
from greensteps.config import TestConfig


@pytest.fixture
def app():
    return create_app(TestConfig, rng=random.Random(1234))


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def storage(app):
    with app.app_context():
        yield app.extensions["storage"]


@pytest.fixture
def user_id(app):
    return app.config["DEFAULT_USER_ID"]
