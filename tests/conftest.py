import pytest

from greenpath.app import create_app
from greenpath.config import TestingConfig
from greenpath.models import db


@pytest.fixture
def app():
    app = create_app(TestingConfig)
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def register(client):
    def _register(email="ada@example.com", password="s3cret", name="Ada"):
        return client.post("/signup", json={"email": email, "password": password, "name": name})
    return _register


@pytest.fixture
def publish(client):
    def _publish(token="user-1", lat=37.7749, lng=-122.4194, **extra):
        payload = {"token": token, "lat": lat, "lng": lng}
        payload.update(extra)
        return client.post("/rides", json=payload)
    return _publish
