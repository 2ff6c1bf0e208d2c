"""
Global exception handler middleware: anything a route lets escape becomes a
JSON 500 carrying the request id from the logging middleware.
"""

from fastapi import Request
from fastapi.responses import JSONResponse
from loguru import logger


async def global_exception_handler(request: Request, call_next):
    try:
        return await call_next(request)
    except Exception as exc:
        request_id = getattr(request.state, "request_id", None)
        logger.exception(f"Unhandled {type(exc).__name__} on {request.method} {request.url.path}")
        return JSONResponse(
            status_code=500,
            content={
                "detail": "Internal server error",
                "type": type(exc).__name__,
                "path": request.url.path,
                "request_id": request_id,
            },
        )
