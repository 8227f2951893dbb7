"""
Error types raised by the gateway.

Each error carries the HTTP status it maps to; ``main`` turns them into JSON
responses of the form ``{"error": message, ...}``.
"""

from typing import Any, Dict, List, Optional


class GatewayError(Exception):
    """Base class for errors surfaced to the HTTP caller."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> Dict[str, Any]:
        return {"error": self.message}


class ValidationError(GatewayError):
    """A request is missing required fields or carries invalid ones."""

    status_code = 400

    def __init__(
        self,
        message: str,
        required: Optional[List[str]] = None,
        missing: Optional[List[str]] = None,
    ):
        super().__init__(message)
        self.required = required
        self.missing = missing

    def to_dict(self) -> Dict[str, Any]:
        body = super().to_dict()
        if self.required is not None:
            body["required"] = self.required
        if self.missing is not None:
            body["missing"] = self.missing
        return body


class SigningError(GatewayError):
    """UserSig generation or decoding failed because of bad inputs."""


class RemoteError(GatewayError):
    """The provider rejected a call or could not be reached."""

    def __init__(self, code: Optional[str], message: str, request_id: Optional[str] = None):
        super().__init__(message)
        self.code = code
        self.request_id = request_id

    def __str__(self):
        return f"[{self.code}] {self.message}"

    def to_dict(self) -> Dict[str, Any]:
        body = super().to_dict()
        if self.code:
            body["code"] = self.code
        if self.request_id:
            body["requestId"] = self.request_id
        return body
