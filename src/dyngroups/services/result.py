"""ServiceResult and ServiceError — what every GroupService operation returns.

INVARIANT: GroupService methods never raise domain errors.  A failure
comes back as ``ServiceResult(ok=False)`` whose error code is the
``code`` of the domain exception, and ``error`` is set exactly when
``ok`` is False.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from pydantic import BaseModel, Field, model_validator

from dyngroups.domain.errors import (
    AmbiguousAliasError,
    GroupSetError,
    InvalidAliasError,
    UndefinedGroupError,
    UnknownSpecKeyError,
)


class ServiceError(BaseModel):
    """Error code, human message and machine-readable detail."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_exception(cls, exc: GroupSetError, **extra: Any) -> ServiceError:
        """Describe a domain error.

        The offending group name, alias or keys go into ``detail``,
        followed by any *extra* entries.
        """
        detail: dict[str, Any] = {}
        if isinstance(exc, UndefinedGroupError):
            detail["name"] = exc.name
        elif isinstance(exc, InvalidAliasError):
            detail["alias"] = exc.alias
        elif isinstance(exc, (AmbiguousAliasError, UnknownSpecKeyError)):
            detail["keys"] = list(exc.keys)
        detail.update(extra)
        return cls(code=exc.code, message=str(exc), detail=detail)


class ServiceResult(BaseModel):
    """Outcome of one service operation.

    Attributes:
        ok: Whether the operation succeeded.
        op: Operation name, which also selects the renderer
            (``"resolve_groups"``, ``"get_group"``, ...).
        data: Operation payload; empty on failure.
        warnings: Non-fatal issues, such as unregistered group names.
        error: Set exactly when ``ok`` is False.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None

    @model_validator(mode="after")
    def _error_matches_status(self) -> ServiceResult:
        if self.ok == (self.error is not None):
            msg = "error must be set exactly when ok is False"
            raise ValueError(msg)
        return self

    @classmethod
    def success(
        cls, op: str, data: dict[str, Any], *, warnings: Iterable[str] = ()
    ) -> ServiceResult:
        return cls(ok=True, op=op, data=data, warnings=list(warnings))

    @classmethod
    def failure(cls, op: str, exc: GroupSetError, **detail: Any) -> ServiceResult:
        """Wrap a domain error; *detail* is merged into the error payload."""
        return cls(ok=False, op=op, error=ServiceError.from_exception(exc, **detail))
