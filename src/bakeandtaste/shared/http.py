"""HTTP adapter helpers: error kinds to status codes, and command dispatch."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from protean.integrations.fastapi import register_exception_handlers
from protean.utils.globals import current_domain

from bakeandtaste.shared.errors import (
    CakeUnavailable,
    InvalidInput,
    InvalidTransition,
    NotFound,
    Unauthorized,
    Unavailable,
    backend_guard,
)

ERROR_STATUS = {
    NotFound: 404,
    InvalidInput: 400,
    CakeUnavailable: 409,
    InvalidTransition: 409,
    Unauthorized: 403,
    Unavailable: 503,
}


def error_body(exc) -> dict:
    return {"error": getattr(exc, "messages", str(exc)), "kind": type(exc).__name__}


def register_error_handlers(app: FastAPI) -> None:
    """Install Protean's handlers, then one per error kind.

    Starlette picks the handler registered for the most specific class,
    so the kinds win over their Protean base classes.
    """
    register_exception_handlers(app)

    for exc_class, status_code in ERROR_STATUS.items():

        async def handler(request: Request, exc, status_code=status_code):
            return JSONResponse(status_code=status_code, content=error_body(exc))

        app.add_exception_handler(exc_class, handler)


def dispatch(command):
    """Process a command synchronously and return the handler's result."""
    with backend_guard():
        return current_domain.process(command, asynchronous=False)
