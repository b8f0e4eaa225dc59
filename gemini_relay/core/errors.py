"""Error Hierarchy — typed, categorized failures for every relay outcome that is not a reply.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - to_response() produces the caller-facing envelope: {"error": message}
    - Client errors are 4xx; configuration, upstream and internal errors are 500
    - InternalRelayError never carries exception text into its message

Design Decisions:
    - Single hierarchy with RelayError base: FastAPI global handler catches all
    - Flat {"error": str} envelope: browser clients already read this shape
"""

from enum import Enum


class ErrorSeverity(str, Enum):
    """Error severity for observability."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for logging and handling."""
    VALIDATION = "validation"
    METHOD = "method"
    CONFIGURATION = "configuration"
    EXTERNAL_API = "external_api"
    CONTRACT_VIOLATION = "contract_violation"
    INTERNAL = "internal"


class RelayError(Exception):
    """Base exception for all relay errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to the JSON error body."""
        return {"error": self.message}


# ─── Client Errors (400-level) ──────────────────────────────────

class MissingMessageError(RelayError):
    """Inbound body has no usable `message`."""
    def __init__(self):
        super().__init__(
            "Missing message", "MISSING_MESSAGE", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, 400,
        )


class MethodNotAllowedError(RelayError):
    """HTTP verb other than POST/OPTIONS."""
    def __init__(self, method: str):
        super().__init__(
            "Method not allowed", "METHOD_NOT_ALLOWED", ErrorCategory.METHOD,
            ErrorSeverity.WARNING, 405,
        )
        self.method = method


# ─── Server Errors (500-level) ──────────────────────────────────

class ApiKeyMissingError(RelayError):
    """GEMINI_API_KEY not set in the deployment."""
    def __init__(self):
        super().__init__(
            "No API key configured on server", "API_KEY_MISSING",
            ErrorCategory.CONFIGURATION, ErrorSeverity.CRITICAL, 500,
        )


class GeminiAPIError(RelayError):
    """Gemini returned a non-2xx status or an embedded error payload."""
    def __init__(self, detail: str, upstream_status: int):
        super().__init__(
            f"Gemini API error: {detail}", "GEMINI_API_ERROR",
            ErrorCategory.EXTERNAL_API, ErrorSeverity.ERROR, 500,
        )
        self.detail = detail
        self.upstream_status = upstream_status


class EmptyGeminiResponseError(RelayError):
    """Gemini succeeded but the first candidate carries no text."""
    def __init__(self):
        super().__init__(
            "Empty response from Gemini (no text field found).",
            "EMPTY_GEMINI_RESPONSE", ErrorCategory.CONTRACT_VIOLATION,
            ErrorSeverity.ERROR, 500,
        )


class InternalRelayError(RelayError):
    """Anything unexpected — message is fixed, details stay in the logs."""
    def __init__(self):
        super().__init__(
            "Server error", "INTERNAL_ERROR", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, 500,
        )
