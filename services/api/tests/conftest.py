import pytest
from fastapi.testclient import TestClient

from level_object_api.main import create_app
from level_object_api.settings import Settings


@pytest.fixture
def settings() -> Settings:
    return Settings(database_url="sqlite://")


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    # Entering the client runs the lifespan, which opens the engine.
    with TestClient(app) as c:
        yield c


@pytest.fixture
def sample_object() -> dict:
    return {
        "object_type": "crate",
        "position": "1.0,0.5,-3.25",
        "rotation": "0,90,0",
        "scale": "1,1,1",
        "collider": "box:1,1,1",
    }
