from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from app.api.errors import request_validation_exception_handler
from app.api.main import api_router
from app.core.config import settings


def create_app() -> FastAPI:
    application = FastAPI(title=settings.PROJECT_NAME)

    if settings.all_cors_origins:
        application.add_middleware(
            CORSMiddleware,
            allow_origins=settings.all_cors_origins,
            allow_credentials="*" not in settings.all_cors_origins,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    application.add_exception_handler(
        RequestValidationError, request_validation_exception_handler
    )
    application.include_router(api_router)

    @application.get("/", tags=["utils"])
    def root() -> dict[str, str]:
        return {"message": "Architecture Oracle API", "docs": "/health"}

    return application


app = create_app()
