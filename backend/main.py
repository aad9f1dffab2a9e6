import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from todoapp.api import api_router
from todoapp.core.config import settings
from todoapp.core.database import init_db
from todoapp.core.errors import InfrastructureError
from todoapp.core.logging import configure_logging

logger = logging.getLogger(__name__)


async def infrastructure_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Request %s %s failed", request.method, request.url.path, exc_info=exc)
    return JSONResponse({"error": "Internal server error"}, status_code=500)


def create_app() -> FastAPI:
    configure_logging()

    app = FastAPI(title="Todo App (FastAPI + SQLModel + Firebase)")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(InfrastructureError, infrastructure_error_handler)
    app.add_exception_handler(SQLAlchemyError, infrastructure_error_handler)

    @app.on_event("startup")
    def on_startup():
        init_db()

    @app.get("/")
    def health():
        return {"message": "OK"}

    app.include_router(api_router)
    return app


app = create_app()
