"""Error response builder for the standard response envelope.

Converts application layer errors into ``{code, data, message, success}``
JSON responses. ``ApplicationErrorCode`` maps to an HTTP status here and only
here.

Exports:
    ErrorResponseBuilder: Utility class for building error responses
    envelope_response: Build any envelope JSONResponse
"""

from typing import Any

from fastapi import Request, status
from fastapi.responses import JSONResponse

from storefront.application.errors import ApplicationError, ApplicationErrorCode
from storefront.core.container import get_logger

_STATUS_BY_CODE: dict[ApplicationErrorCode, int] = {
    ApplicationErrorCode.BAD_REQUEST: status.HTTP_400_BAD_REQUEST,
    ApplicationErrorCode.UNAUTHORIZED: status.HTTP_401_UNAUTHORIZED,
    ApplicationErrorCode.FORBIDDEN: status.HTTP_403_FORBIDDEN,
    ApplicationErrorCode.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ApplicationErrorCode.INTERNAL_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def envelope_response(
    status_code: int,
    message: str,
    data: Any = None,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    """Build an envelope response; ``success`` follows the status class."""
    return JSONResponse(
        status_code=status_code,
        content={
            "code": status_code,
            "data": data,
            "message": message,
            "success": 200 <= status_code < 300,
        },
        headers=headers,
    )


class ErrorResponseBuilder:
    """Build envelope error responses from ApplicationError values.

    Example:
        >>> error = ApplicationError(
        ...     code=ApplicationErrorCode.NOT_FOUND,
        ...     message="Brand not found",
        ... )
        >>> response = ErrorResponseBuilder.from_application_error(error, request)
        >>> # 404 {"code": 404, "data": null, "message": "Brand not found", "success": false}
    """

    @staticmethod
    def from_application_error(error: ApplicationError, request: Request) -> JSONResponse:
        """Convert ApplicationError to an envelope JSON response.

        Internal errors are logged with the underlying domain error; the
        client only sees the handler's message.
        """
        status_code = ErrorResponseBuilder.get_status_code(error.code)
        if status_code >= 500:
            get_logger().error(
                "request_failed",
                path=request.url.path,
                message=error.message,
                cause=error.domain_error.message if error.domain_error else None,
            )
        return envelope_response(status_code, error.message)

    @staticmethod
    def get_status_code(code: ApplicationErrorCode) -> int:
        """Map application error code to HTTP status code.

        Example:
            >>> ErrorResponseBuilder.get_status_code(ApplicationErrorCode.UNAUTHORIZED)
            401
        """
        return _STATUS_BY_CODE.get(code, status.HTTP_500_INTERNAL_SERVER_ERROR)
