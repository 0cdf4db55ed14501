"""Request tracing, error bodies and CORS for the synthesis API."""

import logging
import time
import uuid

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from .config import get_api_config
from .exceptions import APIError, InternalServerError

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"
PROCESS_TIME_HEADER = "X-Process-Time"


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Tags every request with an ID and logs how long it took.

    Project requests wait on every video plus two model calls, so the
    duration is also returned in a response header.
    """

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
        request.state.request_id = request_id
        started = time.perf_counter()

        logger.info(f"[{request_id}] {request.method} {request.url.path}")
        try:
            response = await call_next(request)
        except Exception as e:
            elapsed = time.perf_counter() - started
            logger.error(f"[{request_id}] {request.method} {request.url.path} raised {type(e).__name__} after {elapsed:.3f}s")
            raise

        elapsed = time.perf_counter() - started
        logger.info(f"[{request_id}] {response.status_code} in {elapsed:.3f}s")

        response.headers[REQUEST_ID_HEADER] = request_id
        response.headers[PROCESS_TIME_HEADER] = f"{elapsed:.3f}"
        return response


class ErrorHandlingMiddleware(BaseHTTPMiddleware):
    """Turns errors that escape the routers into ``{"error": ...}`` bodies."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        try:
            return await call_next(request)
        except APIError as e:
            logger.warning(f"{request.url.path} failed with {e.error_code}: {e.message}")
            return JSONResponse(status_code=e.status_code, content=e.to_dict())
        except Exception:
            request_id = getattr(request.state, "request_id", "unknown")
            logger.exception(f"[{request_id}] Unhandled error on {request.url.path}")
            error = InternalServerError()
            return JSONResponse(status_code=error.status_code, content=error.to_dict())


def setup_cors_middleware(app: FastAPI) -> None:
    """Allow browser clients from the configured origins (all by default)."""
    origins = get_api_config().cors_origins
    allow_all = "*" in origins

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if allow_all else origins,
        # Browsers reject credentials with a wildcard origin
        allow_credentials=not allow_all,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
        expose_headers=[REQUEST_ID_HEADER, PROCESS_TIME_HEADER]
    )


def setup_middleware(app: FastAPI) -> None:
    """
    Install the middleware stack.

    Starlette runs the last added middleware first, so error handling wraps
    request logging, which wraps CORS.
    """
    setup_cors_middleware(app)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(ErrorHandlingMiddleware)
    logger.debug("Middleware installed: error handling, request logging, CORS")
