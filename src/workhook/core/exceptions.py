"""workhook custom exception hierarchy."""

from pathlib import Path
from typing import Any


class HookError(Exception):
    """Base exception for all workhook errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            detail_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.message} ({detail_str})"
        return self.message


class ConfigurationError(HookError):
    """Raised when configuration is invalid."""

    pass


class WorkspaceNotFoundError(HookError):
    """Raised when no beads workspace can be located."""

    def __init__(
        self,
        message: str,
        start: Path | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        if start is not None:
            details["start"] = str(start)
        super().__init__(message, details)
        self.start = start


class PreconditionDeniedError(HookError):
    """Raised when the calling agent class may not hook work."""

    def __init__(
        self,
        message: str,
        role: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        if role:
            details["role"] = role
        super().__init__(message, details)
        self.role = role


class IdentityUnresolvedError(HookError):
    """Raised when the calling agent's identity cannot be determined."""

    pass


class StoreError(HookError):
    """Base exception for bead store operations."""

    def __init__(
        self,
        message: str,
        bead_id: str | None = None,
        operation: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        if bead_id:
            details["bead_id"] = bead_id
        if operation:
            details["operation"] = operation
        super().__init__(message, details)
        self.bead_id = bead_id
        self.operation = operation


class BeadNotFoundError(StoreError):
    """Raised when a bead id is unknown to the store."""

    def __init__(self, message: str, bead_id: str | None = None) -> None:
        super().__init__(message, bead_id=bead_id, operation="show")


class BeadQueryError(StoreError):
    """Raised when listing or reading beads fails."""

    pass


class MutationFailedError(StoreError):
    """Raised when the store rejects a pin, unpin or close request."""

    pass


class ProgressLookupError(StoreError):
    """Raised when molecule progress cannot be determined.

    Only the completion classifier should ever see this; it folds the
    failure into an incomplete result.
    """

    pass


class HookConflictError(HookError):
    """Raised when an incomplete pinned bead blocks a new hook."""

    def __init__(
        self,
        message: str,
        bead_id: str,
        title: str = "",
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        details["bead_id"] = bead_id
        super().__init__(message, details)
        self.bead_id = bead_id
        self.title = title
