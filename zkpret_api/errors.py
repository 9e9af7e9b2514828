"""
Error taxonomy for the ZK-PRET API.

- ProofValidationError: a required body field is missing (400)
- RouteNotFoundError: no route for the method/path pair (404)
- ProofGenerationError: anything unexpected while producing a proof (500)

None of these are retried; each maps directly to an HTTP response.
"""

from typing import Any

from .models import ErrorResponse, FailureResponse


class ZkPretError(Exception):
    """Base class for errors that map onto an HTTP response."""

    http_status: int = 500

    def to_response(self) -> dict[str, Any]:
        return ErrorResponse(error=str(self)).to_wire()


class ProofValidationError(ZkPretError):
    """A required request field is missing or empty."""

    http_status = 400

    def __init__(self, field: str, label: str):
        self.field = field
        self.label = label
        super().__init__(f"{label} is required")


class RouteNotFoundError(ZkPretError):
    """No handler matches the request."""

    http_status = 404

    def __init__(self, method: str, path: str):
        self.method = method
        self.path = path
        super().__init__("Endpoint not found")


class ProofGenerationError(ZkPretError):
    """Unexpected failure while validating or assembling a proof."""

    http_status = 500

    def __init__(self, failure_label: str, cause: BaseException):
        self.failure_label = failure_label
        self.cause = cause
        super().__init__(failure_label)

    def to_response(self) -> dict[str, Any]:
        return FailureResponse(error=self.failure_label, message=str(self.cause)).to_wire()
