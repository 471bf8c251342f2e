"""Maps domain errors to HTTP responses for DRF views."""

import logging

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from common.errors import CheckoutValidationError, DomainError, ErrorCode, ErrorKind

logger = logging.getLogger(__name__)

STATUS_BY_KIND = {
    ErrorKind.VALIDATION: status.HTTP_400_BAD_REQUEST,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.INSUFFICIENT_INVENTORY: status.HTTP_409_CONFLICT,
    ErrorKind.PAYMENT: status.HTTP_402_PAYMENT_REQUIRED,
    ErrorKind.FORBIDDEN: status.HTTP_403_FORBIDDEN,
    ErrorKind.INTERNAL: status.HTTP_500_INTERNAL_SERVER_ERROR,
}

STATUS_BY_CODE = {
    ErrorCode.PAYMENT_GATEWAY_ERROR: status.HTTP_502_BAD_GATEWAY,
    ErrorCode.AUTHENTICATION_REQUIRED: status.HTTP_401_UNAUTHORIZED,
}


def domain_exception_handler(exc, context):
    """DRF exception handler that understands DomainError.

    DRF's own exceptions keep their default handling. Anything else is logged
    and reported as an opaque internal error.
    """
    if isinstance(exc, DomainError):
        body = {"code": exc.code.value, "message": exc.message}
        if isinstance(exc, CheckoutValidationError):
            body["errors"] = [{"field": e.field, "message": e.message} for e in exc.errors]
        status_code = STATUS_BY_CODE.get(exc.code, STATUS_BY_KIND[exc.kind])
        if status_code >= 500:
            logger.error("Request failed with %s", exc.code.value)
        return Response(body, status=status_code)

    response = exception_handler(exc, context)
    if response is not None:
        return response

    logger.exception("Unhandled error in %s", context["view"].__class__.__name__)
    return Response(
        {"code": "INTERNAL_ERROR", "message": "An internal error occurred"},
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
