"""
Correios Shipping Exception Hierarchy

All exceptions include code, message, and details for logging and
debugging.

Exception Hierarchy:
    CorreiosBaseError
    ├── ConfigurationError
    ├── ShippingValidationError
    ├── ServiceUnavailableError
    └── CorreiosAPIError
"""
import logging
from typing import Optional, Dict, Any

logger = logging.getLogger(__name__)


class CorreiosBaseError(Exception):
    """
    Base exception for all shipping computation errors.

    Attributes:
        message: Human-readable error description
        code: Machine-readable error code for programmatic handling
        details: Additional context for debugging
        severity: P0-P3 severity level
    """

    default_code: str = "CORREIOS_ERROR"
    default_severity: str = "P2"

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        severity: Optional[str] = None,
    ):
        self.message = message
        self.code = code or self.default_code
        self.details = details or {}
        self.severity = severity or self.default_severity
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for logging/serialization."""
        return {
            "error_type": self.__class__.__name__,
            "code": self.code,
            "message": self.message,
            "severity": self.severity,
            "details": self.details,
        }

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code!r}, message={self.message!r})"


class ConfigurationError(CorreiosBaseError):
    """
    Deployment is misconfigured (unknown measure unit, bad origin CEP).

    Aborts the whole computation. Never converted into a partial result.
    """
    default_code = "CONFIGURATION_ERROR"
    default_severity = "P0"


class ShippingValidationError(CorreiosBaseError):
    """Request is missing items, address or destination CEP."""
    default_code = "SHIPPING_VALIDATION_FAILED"
    default_severity = "P3"


class ServiceUnavailableError(CorreiosBaseError):
    """No carrier service produced a usable quote."""
    default_code = "NO_SERVICES_AVAILABLE"
    default_severity = "P2"


class CorreiosAPIError(CorreiosBaseError):
    """Correios web service call failed or returned an unreadable payload."""
    default_code = "CORREIOS_API_ERROR"
    default_severity = "P1"

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        **kwargs
    ):
        details = kwargs.pop("details", {})
        details.update({"status_code": status_code})
        super().__init__(message, details=details, **kwargs)
        self.status_code = status_code
