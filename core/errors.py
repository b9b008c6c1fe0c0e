"""
Exception classes for the plan webhook.
"""
from typing import Any, Dict, Optional


class PlanWebhookError(Exception):
    """Base exception class for plan webhook errors"""
    def __init__(self, message: str, code: str = "UNKNOWN_ERROR", details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.code = code
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to standard error format"""
        return {
            "code": self.code,
            "message": str(self),
            "details": self.details
        }


class FormValidationError(PlanWebhookError):
    """Raised when the inbound form body has an unsupported shape"""
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, code="INVALID_FORM", details=details)


class UpstreamError(PlanWebhookError):
    """Raised when the generation provider call fails"""
    def __init__(self, message: str, status_code: Optional[int] = None, body: Optional[str] = None):
        super().__init__(message, code="UPSTREAM_ERROR", details={"status_code": status_code, "body": body})
        self.status_code = status_code
        self.body = body


class BridgeError(PlanWebhookError):
    """Raised when publishing to the bridge endpoint fails"""
    def __init__(self, message: str, status_code: Optional[int] = None, body: Optional[str] = None):
        super().__init__(message, code="BRIDGE_ERROR", details={"status_code": status_code, "body": body})
        self.status_code = status_code
        self.body = body


class StartupError(PlanWebhookError):
    """Raised when the application cannot be wired at startup"""
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, code="STARTUP_ERROR", details=details)
