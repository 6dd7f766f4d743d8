"""
Custom Exception Classes for the Storefront

This module defines the exceptions raised while resolving page metadata,
together with the machine-readable error codes used in error responses.
"""

from enum import Enum
from typing import Any

from fastapi import status


class ErrorCode(str, Enum):
    """Machine-readable error codes returned in the ``error_code`` field."""

    LOCALE_NOT_SUPPORTED = "LOCALE_NOT_SUPPORTED"
    IDENTITY_SERVICE_UNAVAILABLE = "IDENTITY_SERVICE_UNAVAILABLE"
    RESOURCE_NOT_FOUND = "RESOURCE_NOT_FOUND"
    INTERNAL_ERROR = "INTERNAL_ERROR"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"


class StorefrontError(Exception):
    """Base exception class for all storefront exceptions"""

    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        error_code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        details: dict[str, Any] | None = None,
    ):
        self.message = message
        self.status_code = status_code
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)


# ============================================================================
# Routing Exceptions
# ============================================================================


class LocaleNotSupportedError(StorefrontError):
    """Raised when a locale-prefixed path names a locale outside the registry"""

    def __init__(self, locale: str):
        super().__init__(
            message=f"Locale '{locale}' is not supported",
            status_code=status.HTTP_404_NOT_FOUND,
            error_code=ErrorCode.LOCALE_NOT_SUPPORTED,
            details={"locale": locale},
        )


# ============================================================================
# External Service Exceptions
# ============================================================================


class IdentityServiceError(StorefrontError):
    """Raised when the identity service cannot produce a usable session response"""

    def __init__(self, message: str = "Identity service unavailable", status_code: int | None = None):
        details = {"upstream_status": status_code} if status_code is not None else {}
        super().__init__(
            message=message,
            status_code=status.HTTP_502_BAD_GATEWAY,
            error_code=ErrorCode.IDENTITY_SERVICE_UNAVAILABLE,
            details=details,
        )
