from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse

from fitcart.utils.log import logger


async def http_exception_handler(request: Request, exc: HTTPException):
    return JSONResponse(
        {"status_code": exc.status_code, "detail": exc.detail},
        status_code=exc.status_code,
    )


async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled exception")

    return JSONResponse(
        {"status_code": 500, "detail": "Gremlins."},
        status_code=500,
    )


def register_error_handlers(app: FastAPI) -> None:
    # HTTPException handler narrows the Exception signature; fine at runtime.
    app.add_exception_handler(HTTPException, http_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, unhandled_exception_handler)
