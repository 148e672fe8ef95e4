"""Request-level failures raised by the matching and drafting services.

Each error knows the HTTP status it maps to; ``main.py`` renders them as
``{"error": message, "details": ...}``. None of them is ever retried here.
"""

from typing import Any


class JobScoutError(Exception):
    status_code: int = 500

    def __init__(self, message: str, details: Any = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details

    def to_body(self) -> dict[str, Any]:
        body: dict[str, Any] = {"error": self.message}
        if self.details is not None:
            body["details"] = self.details
        return body


class InvalidRequest(JobScoutError):
    """The caller sent a missing, empty or malformed payload."""
    status_code = 400


class ConfigurationError(JobScoutError):
    """The deployment lacks something it needs, e.g. the model API key."""
    status_code = 500


class UpstreamError(JobScoutError):
    """The model service answered with a non-success status.

    The upstream status is forwarded as-is and its raw error body is kept in
    ``details``.
    """

    def __init__(self, status_code: int, details: Any = None) -> None:
        super().__init__("Model API error", details)
        self.status_code = status_code


class UnparsableResponse(JobScoutError):
    """The model's answer held no recoverable structured payload."""
    status_code = 500
