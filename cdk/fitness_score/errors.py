"""
Error types raised while synthesizing the fitness score stack.

Every error here is fatal: it propagates out of the CDK app so that no
template is written for a half-built graph.
"""

from typing import Any, Dict, Optional


class ErrorCode:
    """Error codes for synthesis-time failures."""

    ARTIFACT_NOT_FOUND = "ARTIFACT_NOT_FOUND"
    INVALID_FUNCTION_NAME = "INVALID_FUNCTION_NAME"


class StackConfigurationError(Exception):
    """
    Stack configuration error with error code and message.

    Raised before any construct is added for the offending resource.
    """

    def __init__(self, error_code: str, message: str, details: Optional[Dict[str, Any]] = None):
        self.error_code = error_code
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for structured logging."""
        return {
            "errorCode": self.error_code,
            "message": self.message,
            **self.details,
        }


class ArtifactNotFoundError(StackConfigurationError, FileNotFoundError):
    """The pre-built deployment package for a function is missing."""

    def __init__(self, function_name: str, artifact_path: str):
        self.function_name = function_name
        self.artifact_path = artifact_path
        super().__init__(
            ErrorCode.ARTIFACT_NOT_FOUND,
            f"Deployment artifact for '{function_name}' not found: {artifact_path}",
            {"functionName": function_name, "artifactPath": artifact_path},
        )


class InvalidFunctionNameError(StackConfigurationError, ValueError):
    """Function names must be non-empty and must not contain path separators."""

    def __init__(self, function_name: Any):
        self.function_name = function_name
        super().__init__(
            ErrorCode.INVALID_FUNCTION_NAME,
            f"Invalid function name: {function_name!r}",
            {"functionName": function_name},
        )
