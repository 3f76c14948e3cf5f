"""FastAPI glue shared by the REST routers."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from shared.errors import DomainError
from shared.utils.logging import get_logger

logger = get_logger(__name__)


class ErrorResponse(BaseModel):
    error: str


def get_container(request: Request):
    """Dependency returning the service container attached to the running app."""
    return request.app.state.container


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    logger.info(
        "Request rejected",
        path=request.url.path,
        code=exc.code,
        status_code=exc.status_code,
    )
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


def register_error_handlers(app: FastAPI) -> None:
    """Translate domain errors into ``{"error": message}`` responses."""
    app.add_exception_handler(DomainError, domain_error_handler)
