# survey_api/context.py
"""
Application context: the services shared by all request handlers.
Built once per app in create_app() and stored on app.state.
"""
from dataclasses import dataclass

from fastapi import Request

from survey_api.config import Settings
from survey_api.services.authorization import AuthorizationService
from survey_api.services.storage import LocalStorage
from survey_api.services.store import FileStore
from survey_api.services.survey import SurveyService


@dataclass
class AppContext:
    settings: Settings
    store: FileStore
    survey: SurveyService
    authorization: AuthorizationService

    @classmethod
    def from_settings(cls, settings: Settings) -> "AppContext":
        storage = LocalStorage(base_dir=settings.data_dir)
        store = FileStore(storage, survey_file=settings.survey_file)
        return cls(
            settings=settings,
            store=store,
            survey=SurveyService(store),
            authorization=AuthorizationService(),
        )


def get_context(request: Request) -> AppContext:
    return request.app.state.context


def get_survey_service(request: Request) -> SurveyService:
    return get_context(request).survey


def get_authorization_service(request: Request) -> AuthorizationService:
    return get_context(request).authorization
