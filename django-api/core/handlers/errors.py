"""Maps domain errors to HTTP responses.

Installed as the DRF ``EXCEPTION_HANDLER``. Only the error code and the
user-safe message leave the process.
"""

import logging

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from core.domain.errors import DomainError, ErrorCode

logger = logging.getLogger(__name__)

STATUS_BY_CODE = {
    ErrorCode.ENTITY_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.PAYMENT_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.INVALID_ENTITY_ID: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_PHONE_NUMBER: status.HTTP_400_BAD_REQUEST,
    ErrorCode.PAYMENT_GATEWAY_ERROR: status.HTTP_502_BAD_GATEWAY,
    ErrorCode.STORAGE_QUOTA_EXCEEDED: status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
    ErrorCode.FILE_REJECTED: status.HTTP_415_UNSUPPORTED_MEDIA_TYPE,
}


def error_body(error: DomainError) -> dict[str, str]:
    return {"code": error.code.value, "message": error.message}


def domain_exception_handler(exc, context):
    if isinstance(exc, DomainError):
        http_status = STATUS_BY_CODE.get(exc.code, status.HTTP_400_BAD_REQUEST)
        if http_status >= 500:
            logger.warning("request failed with %s", exc)
        return Response(error_body(exc), status=http_status)
    return exception_handler(exc, context)
