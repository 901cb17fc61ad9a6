"""
Custom exceptions for the periodic table API with structured error context.

Every error raised on the request path maps to an HTTP status code and a
public message. The public message is the only text that reaches the
caller; context and the original exception are for logs.

Exception Hierarchy:
    PeriodicTableError (base)
    ├── ValidationError          -> 400
    ├── NotFoundError            -> 404
    ├── StoreError               -> 500
    ├── CacheError               (logged and dropped, never surfaces)
    └── ImportPipelineError      (import tooling only)
        ├── DocumentFormatError
        ├── DocumentValidationError
        └── LoadError
"""

from typing import Optional, Dict, Any
from datetime import datetime, timezone


class PeriodicTableError(Exception):
    """
    Base exception for all periodic table errors.

    Attributes:
        message: Human-readable error message
        context: Additional context information (route, parameter, etc.)
        original_exception: The original exception that was caught (if any)
    """

    status_code: int = 500
    public_message: Optional[str] = None

    def __init__(
        self,
        message: str,
        context: Optional[Dict[str, Any]] = None,
        original_exception: Optional[Exception] = None
    ):
        self.message = message
        self.context = context or {}
        self.original_exception = original_exception
        self.timestamp = datetime.now(timezone.utc)

        self.context["error_timestamp"] = self.timestamp.isoformat()

        super().__init__(message)
        if original_exception:
            self.__cause__ = original_exception

    def __str__(self) -> str:
        """Format error message with context."""
        base_msg = f"{self.__class__.__name__}: {self.message}"

        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            base_msg += f" | Context: {context_str}"

        if self.original_exception:
            base_msg += f" | Caused by: {type(self.original_exception).__name__}: {str(self.original_exception)}"

        return base_msg

    @property
    def client_message(self) -> str:
        """Message safe to return to the caller."""
        return self.public_message or self.message

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for logging."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "context": self.context,
            "timestamp": self.timestamp.isoformat(),
            "original_error": str(self.original_exception) if self.original_exception else None
        }


# ============================================================================
# Request Errors
# ============================================================================

class ValidationError(PeriodicTableError):
    """
    Raised when a fail-closed request parameter is invalid.

    Context should include:
        - parameter: Name of the offending parameter
        - value: Raw value received
    """
    status_code = 400


class NotFoundError(PeriodicTableError):
    """
    Raised when no element matches an id, symbol or name lookup.

    Context should include:
        - lookup: "atomic_number", "symbol" or "name"
        - value: The looked-up value
    """
    status_code = 404
    public_message = "Element not found"

    def __init__(
        self,
        message: str = "Element not found",
        context: Optional[Dict[str, Any]] = None,
        original_exception: Optional[Exception] = None
    ):
        super().__init__(message, context, original_exception)


class StoreError(PeriodicTableError):
    """
    Raised when the record store fails (bad SQL, lost connection, ...).

    The underlying detail is logged, never exposed.
    """
    status_code = 500
    public_message = "Internal server error"


class CacheError(PeriodicTableError):
    """Raised by edge cache backends. Always logged and dropped."""
    pass


# ============================================================================
# Import Errors
# ============================================================================

class ImportPipelineError(PeriodicTableError):
    """Base exception for the document import tooling."""
    pass


class DocumentFormatError(ImportPipelineError):
    """
    Raised when a source document cannot be read or parsed as JSON.

    Context should include:
        - file_path: Path to the document
    """
    pass


class DocumentValidationError(ImportPipelineError):
    """
    Raised when a source document fails schema or model validation.

    Context should include:
        - file_path: Path to the document
        - errors: List of validation messages
    """
    pass


class LoadError(ImportPipelineError):
    """
    Raised when writing element rows fails.

    Context should include:
        - atomic_number: Element being written
        - operation: DELETE or INSERT
    """
    pass
