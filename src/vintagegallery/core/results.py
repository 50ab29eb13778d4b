"""Explicit success/failure values returned to the UI layer."""

from dataclasses import dataclass
from typing import Any

from .errors import GalleryError


@dataclass(frozen=True)
class Result:
    """Outcome of a remote store operation.

    The store never raises for expected failures.  It returns a Result and
    lets the caller decide whether the failure is worth surfacing.

    Attributes:
        ok: True when the operation succeeded
        value: Payload of a successful operation (may be None)
        error: The failure, set only when ok is False
    """

    ok: bool
    value: Any = None
    error: GalleryError | None = None

    @classmethod
    def success(cls, value: Any = None) -> "Result":
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, error: GalleryError) -> "Result":
        return cls(ok=False, error=error)
