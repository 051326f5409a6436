import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from survey_api.config import Settings
from survey_api.context import AppContext
from survey_api.responses import envelope_response
from survey_api.routers.authorization import router as authorization_router
from survey_api.routers.survey import router as survey_router
from survey_api.schemas import Envelope, ErrorDetail

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or Settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    context = AppContext.from_settings(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        context.store.storage.make_dir()
        logger.info("Storage: local filesystem at %s", settings.data_dir)
        yield

    app = FastAPI(title="Survey API", lifespan=lifespan)
    app.state.context = context

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True, allow_methods=["*"], allow_headers=["*"],
    )

    @app.exception_handler(RequestValidationError)
    async def validation_error(request: Request, exc: RequestValidationError):
        details = [ErrorDetail(loc=list(e.get("loc", ())), msg=e.get("msg", "")) for e in exc.errors()]
        logger.info("rejected %s %s: %d validation errors", request.method, request.url.path, len(details))
        return envelope_response(Envelope[list[ErrorDetail]](code=400, message='invalid parameters', data=details))

    # JSONDecodeError, CorruptDataError and pydantic ValidationError on stored records
    @app.exception_handler(ValueError)
    async def corrupt_file(request: Request, exc: ValueError):
        logger.error("corrupt data file while handling %s %s", request.method, request.url.path, exc_info=exc)
        return envelope_response(Envelope(code=500, message='internal storage error', data=None))

    @app.exception_handler(OSError)
    async def storage_error(request: Request, exc: OSError):
        logger.error("storage failure while handling %s %s", request.method, request.url.path, exc_info=exc)
        return envelope_response(Envelope(code=500, message='internal storage error', data=None))

    @app.get("/health")
    def health():
        return {"status": "ok"}

    app.include_router(survey_router)
    app.include_router(authorization_router)
    return app


app = create_app()


if __name__ == '__main__':
    _settings = Settings()
    uvicorn.run(app, host=_settings.host, port=_settings.port)
