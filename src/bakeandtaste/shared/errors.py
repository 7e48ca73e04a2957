"""Error kinds raised by the identity, catalogue and ordering services.

Every kind carries a Protean style ``messages`` dict, ``{"field": ["..."]}``,
so callers and HTTP handlers read them the same way.
"""

from contextlib import contextmanager

from protean.exceptions import ObjectNotFoundError, ProteanException, ValidationError
from sqlalchemy.exc import InterfaceError, OperationalError

from bakeandtaste.utils.logging import get_logger

logger = get_logger(__name__)


class NotFound(ObjectNotFoundError):
    """The entity does not exist, or is not visible to the caller."""


class InvalidInput(ValidationError):
    """A field is malformed or a required one is missing."""


class CakeUnavailable(ValidationError):
    """The cake cannot be ordered: it is unknown or not on sale."""


class InvalidTransition(ValidationError):
    """The requested order status does not follow from the current one."""


class Unauthorized(ProteanException):
    """The caller's role or ownership does not permit the operation."""

    def __init__(self, messages):
        super().__init__(messages)
        self.messages = messages

    def __str__(self):
        return f"{dict(self.messages)}"


class Unavailable(ProteanException):
    """The backing store could not be reached. Safe for the caller to retry."""

    def __init__(self, messages):
        super().__init__(messages)
        self.messages = messages

    def __str__(self):
        return f"{dict(self.messages)}"


def not_found(entity: str, identifier) -> NotFound:
    return NotFound({"_entity": [f"{entity} `{identifier}` does not exist"]})


_TRANSIENT_ERRORS = (OperationalError, InterfaceError, ConnectionError, TimeoutError)


@contextmanager
def backend_guard():
    """Surface transient store and network failures as `Unavailable`.

    Usable as a context manager or as a decorator. Nothing is retried here.
    """
    try:
        yield
    except _TRANSIENT_ERRORS as exc:
        logger.error("backend_unavailable", error=str(exc), error_type=type(exc).__name__)
        raise Unavailable({"backend": ["The data store is temporarily unavailable, please retry"]}) from exc
