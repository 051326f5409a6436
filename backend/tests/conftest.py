import pytest
from fastapi.testclient import TestClient

from survey_api.config import Settings
from survey_api.main import create_app
from survey_api.services.authorization import AuthorizationService
from survey_api.services.storage import LocalStorage
from survey_api.services.store import FileStore
from survey_api.services.survey import SurveyService


@pytest.fixture
def storage(tmp_path):
    return LocalStorage(base_dir=tmp_path)


@pytest.fixture
def store(storage):
    return FileStore(storage)


@pytest.fixture
def survey(store):
    return SurveyService(store)


@pytest.fixture
def authorization():
    return AuthorizationService()


@pytest.fixture
def client(tmp_path):
    """TestClient over an app whose data directory is a fresh temp dir"""
    settings = Settings(data_dir=str(tmp_path / "data"), cors_origins=["http://testserver"])
    app = create_app(settings)
    with TestClient(app) as c:
        yield c
