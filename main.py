import logging
from http import HTTPStatus

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from pdf_extractor.api.endpoints import extract, health
from pdf_extractor.core.config import Settings, settings
from pdf_extractor.core.logger import configure_logging
from pdf_extractor.schema.common import ErrorResponse

logger = logging.getLogger(__name__)


def _is_url_error(error: dict) -> bool:
    loc = tuple(error.get("loc", ()))
    return loc in {("body",), ("body", "url")}


def create_app(config: Settings = settings) -> FastAPI:
    configure_logging(config.LOG_LEVEL)

    app = FastAPI(title=config.APP_NAME)
    app.state.settings = config

    @app.middleware("http")
    async def limit_body_size(request: Request, call_next):
        content_length = request.headers.get("content-length")
        if content_length and content_length.isdigit():
            if int(content_length) > config.MAX_BODY_BYTES:
                logger.warning(
                    "Rejected request body of %s bytes (limit %d)",
                    content_length,
                    config.MAX_BODY_BYTES,
                )
                return JSONResponse(
                    status_code=HTTPStatus.REQUEST_ENTITY_TOO_LARGE,
                    content=ErrorResponse(
                        error="request entity too large",
                    ).model_dump(),
                )
        return await call_next(request)

    # Outermost; 413 responses from limit_body_size carry CORS headers
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        errors = exc.errors()
        if all(_is_url_error(error) for error in errors):
            message = "url required"
        else:
            message = "invalid request body"
        logger.info("Rejected request to %s: %s", request.url.path, errors)
        return JSONResponse(
            status_code=HTTPStatus.BAD_REQUEST,
            content=ErrorResponse(error=message).model_dump(),
        )

    app.include_router(health.router, tags=["Health"])
    app.include_router(extract.router, tags=["Extraction"])

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
