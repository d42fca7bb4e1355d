from __future__ import annotations

import logging
import os

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from src.adapters.api.controllers.coordinates import router as coordinates_router
from src.domain.exceptions import CoordinateParseError

app = FastAPI(title="Globe Coordinates")
app.include_router(coordinates_router)


@app.exception_handler(CoordinateParseError)
async def coordinate_parse_error_handler(
    request: Request, exc: CoordinateParseError
) -> JSONResponse:
    return JSONResponse(
        status_code=422,
        content={"detail": str(exc), "text": exc.text, "format": exc.format_name},
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Ensure API errors are JSON so clients can display them.

    Starlette's default 500 handler may return plain text/HTML.
    """

    logging.getLogger("uvicorn.error").exception(
        "Unhandled exception", extra={"path": str(request.url.path)}
    )

    reveal = (os.getenv("COORDINATES_REVEAL_ERRORS") or "").strip().lower() in {
        "1",
        "true",
        "yes",
        "on",
    }

    if reveal or isinstance(exc, (RuntimeError, ValueError)):
        detail = str(exc) or exc.__class__.__name__
    else:
        detail = "Internal Server Error"

    return JSONResponse(status_code=500, content={"detail": detail})


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}
