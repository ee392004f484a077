"""
Error taxonomy for the Task Manager API.

Handlers raise these; a single table maps each class to its HTTP status and
one exception handler renders them as ``{"status": false, "msg": ...}``.
"""
import functools
import logging
from typing import Callable, Dict, Type

from fastapi import status

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MSG = "Internal Server Error"


class AppError(Exception):
    """Base class for errors that are reported to the client"""

    default_msg = INTERNAL_ERROR_MSG

    def __init__(self, msg: str = None):
        self.msg = msg or self.default_msg
        super().__init__(self.msg)


class ValidationError(AppError):
    """Malformed or missing client input"""


class ConflictError(AppError):
    """A unique field already holds the submitted value"""


class NotFoundError(AppError):
    """The requested resource does not exist"""


class AuthenticationError(AppError):
    """The request carries no usable identity"""


class ForbiddenError(AppError):
    """The acting user does not own the resource"""


class InternalError(AppError):
    """Any unanticipated failure, reported without detail"""


# NotFoundError answers 400, never 404
ERROR_STATUS: Dict[Type[AppError], int] = {
    ValidationError: status.HTTP_400_BAD_REQUEST,
    ConflictError: status.HTTP_400_BAD_REQUEST,
    NotFoundError: status.HTTP_400_BAD_REQUEST,
    AuthenticationError: status.HTTP_401_UNAUTHORIZED,
    ForbiddenError: status.HTTP_403_FORBIDDEN,
    InternalError: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def status_for(exc: BaseException) -> int:
    """Return the HTTP status for an exception, 500 when unrecognized."""
    for cls in type(exc).__mro__:
        if cls in ERROR_STATUS:
            return ERROR_STATUS[cls]
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def error_body(msg: str) -> dict:
    return {"status": False, "msg": msg}


def translate_errors(func: Callable) -> Callable:
    """
    Wrap a path function so that only AppError subclasses leave it.

    Anything else is logged with its traceback and replaced by InternalError.
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except AppError:
            raise
        except Exception:
            logger.exception(f"Unhandled error in {func.__name__}")
            raise InternalError()

    return wrapper
