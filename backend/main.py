"""
Users API
Flat-file user records exposed over HTTP: list, create, fetch, update, delete.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from config import get_settings
from api.routes import health_router, user_detail_router, users_router

settings = get_settings()

logging.basicConfig(level=getattr(logging, settings.LOG_LEVEL, logging.INFO))
logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    app = FastAPI(title=settings.APP_TITLE, version=settings.APP_VERSION)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Error bodies are {"error": "..."} rather than FastAPI's {"detail": "..."}
    @app.exception_handler(StarletteHTTPException)
    async def http_error(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            {"error": exc.detail},
            status_code=exc.status_code,
            headers=getattr(exc, "headers", None),
        )

    # Bodies are taken as raw JSON, so the only validation failure left is unparsable JSON
    @app.exception_handler(RequestValidationError)
    async def bad_body(request: Request, exc: RequestValidationError):
        logger.info("Unparsable request body on %s %s", request.method, request.url.path)
        return JSONResponse({"error": "Invalid JSON body"}, status_code=400)

    app.include_router(health_router)
    app.include_router(users_router)
    app.include_router(user_detail_router)

    logger.info("Users file: %s", settings.USERS_FILE)
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("main:app", host=settings.HOST, port=settings.PORT, reload=True)
