"""Decorators for MWS tool error handling."""

import functools
import json
import logging
import uuid
from datetime import datetime
from typing import Any, Callable

from ..exceptions import CallConstraintViolation, ConfigurationError, RemoteError, TransportError

logger = logging.getLogger(__name__)


def error_response(error: str, message: str, request_id: str, **extra: Any) -> str:
    """Format a failed tool result as the JSON error envelope."""
    response = {
        "success": False,
        "error": error,
        "message": message,
        **extra,
        "metadata": {
            "timestamp": datetime.now().isoformat() + "Z",
            "request_id": request_id,
        },
    }
    return json.dumps(response, indent=2)


def _duration_ms(start_time: datetime) -> int:
    return int((datetime.now() - start_time).total_seconds() * 1000)


def handle_mws_errors(func: Callable[..., str]) -> Callable[..., str]:
    """Decorator to turn MWS exceptions into JSON error envelopes.

    Args:
        func: The tool function to decorate

    Returns:
        Decorated function that never raises for MWS failures
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> str:
        request_id = str(uuid.uuid4())
        start_time = datetime.now()

        try:
            logger.info(f"Request {request_id}: Starting {func.__name__}")
            result = func(*args, **kwargs)
            logger.info(f"Request {request_id}: Completed {func.__name__} in {_duration_ms(start_time)}ms")
            return result

        except CallConstraintViolation as e:
            logger.warning(f"Request {request_id}: Call constraint violated in {_duration_ms(start_time)}ms: {e}")
            return error_response("limit_exceeded", str(e), request_id, limit=e.limit, given=e.given)

        except ConfigurationError as e:
            logger.error(f"Request {request_id}: Configuration error: {e}")
            return error_response("configuration_error", str(e), request_id)

        except RemoteError as e:
            logger.exception(f"Request {request_id}: MWS error {e.status_code} in {_duration_ms(start_time)}ms")

            if e.status_code in (401, 403):
                error_code = "auth_failed"
            else:
                error_code = "api_error"

            details = {"status_code": e.status_code, "code": e.error_code}
            return error_response(error_code, e.message, request_id, details=details)

        except TransportError as e:
            logger.exception(f"Request {request_id}: Network error in {_duration_ms(start_time)}ms")
            return error_response("network_error", str(e), request_id)

        except ValueError as e:
            logger.exception(f"Request {request_id}: Validation error in {_duration_ms(start_time)}ms: {e}")
            return error_response("invalid_input", str(e), request_id)

        except Exception as e:
            logger.exception(f"Request {request_id}: Unexpected error in {_duration_ms(start_time)}ms: {e}")
            return error_response(
                "unexpected_error", f"An unexpected error occurred: {e!s}", request_id
            )

    return wrapper
