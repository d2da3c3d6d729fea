import logging
from collections.abc import Sequence
from typing import Any

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

INVALID_REQUEST = "Invalid request"


def flatten_validation_errors(errors: Sequence[Any]) -> dict[str, Any]:
    """
    Group pydantic errors by top-level field.

    Errors on the body as a whole (missing body, malformed JSON, wrong JSON
    type) land in `formErrors`; everything else is keyed by the first field
    name in its location.
    """
    form_errors: list[str] = []
    field_errors: dict[str, list[str]] = {}

    for error in errors:
        loc = tuple(error.get("loc") or ())
        message = str(error.get("msg") or "Invalid value")
        # Drop the "body"/"query" source marker.
        path = loc[1:] if loc and loc[0] in ("body", "query", "path") else loc
        if path and isinstance(path[0], str):
            field_errors.setdefault(path[0], []).append(message)
        else:
            form_errors.append(message)

    return {"formErrors": form_errors, "fieldErrors": field_errors}


async def request_validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    details = flatten_validation_errors(exc.errors())
    logger.info("Rejected %s %s: %s", request.method, request.url.path, details)
    return JSONResponse(
        status_code=400,
        content={"error": INVALID_REQUEST, "details": details},
    )
