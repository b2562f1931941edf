"""Map domain errors to HTTP responses.

Conflicts answer 400 rather than 409; existing clients rely on it.
"""

import logging

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from club.domain.errors import DomainError, ErrorKind

logger = logging.getLogger(__name__)

STATUS_BY_KIND = {
    ErrorKind.VALIDATION: status.HTTP_400_BAD_REQUEST,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.CONFLICT: status.HTTP_400_BAD_REQUEST,
    ErrorKind.INTERNAL: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def error_body(error: DomainError) -> dict[str, str]:
    return {"code": error.code.value, "message": error.message}


def domain_exception_handler(exc, context):
    """DRF exception handler that understands DomainError."""
    if isinstance(exc, DomainError):
        response_status = STATUS_BY_KIND[exc.kind]
        logger.log(
            logging.ERROR if exc.kind is ErrorKind.INTERNAL else logging.INFO,
            "%s %s -> %d %s",
            context["request"].method,
            context["request"].path,
            response_status,
            exc.code.value,
        )
        return Response(error_body(exc), status=response_status)
    return exception_handler(exc, context)
