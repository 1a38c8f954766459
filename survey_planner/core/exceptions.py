"""Unified planner exception taxonomy.

Provides a shared base exception hierarchy for the planning core and
its collaborators. Every domain exception inherits from ``PlannerError``
and carries structured context fields that enable consistent handling
by callers and operator diagnostics.

Taxonomy categories
-------------------
- ``ValidationError``: input/configuration violations, never retryable.
- ``TransientError``: temporary failures (network, timeout), retryable.
- ``PermanentError``: unrecoverable domain failures, not retryable.

Every exception exposes ``to_error_dict()`` for a stable structured
error payload suitable for logging and API responses.
"""

from __future__ import annotations


class PlannerError(Exception):
    """Base exception for all planner-domain errors.

    Attributes:
        message: Human-readable error description.
        stage: Planner stage where the error occurred
            (e.g. ``"footprint"``, ``"strips"``).
        code: Machine-readable error code (e.g. ``"MISSING_PARAMETER"``).
        retryable: Whether the caller may retry the operation.
        correlation_id: Request correlation identifier.
    """

    #: Default stage for subclasses (override via class attribute or kwarg).
    default_stage: str = ""
    #: Default code for subclasses (override via class attribute or kwarg).
    default_code: str = ""

    def __init__(
        self,
        message: str = "",
        *,
        stage: str = "",
        code: str = "",
        retryable: bool = False,
        correlation_id: str = "",
    ) -> None:
        self.message = message
        self.stage = stage or self.default_stage
        self.code = code or self.default_code
        self.retryable = retryable
        self.correlation_id = correlation_id
        super().__init__(message)

    @property
    def category(self) -> str:
        """Return the error category based on concrete class."""
        if isinstance(self, ValidationError):
            return "validation"
        if isinstance(self, TransientError):
            return "transient"
        if isinstance(self, PermanentError):
            return "permanent"
        return "transient" if self.retryable else "permanent"

    def to_error_dict(self) -> dict[str, object]:
        """Return a structured error payload with stable keys."""
        return {
            "category": self.category,
            "code": self.code,
            "stage": self.stage,
            "message": self.message,
            "retryable": self.retryable,
            "correlation_id": self.correlation_id,
        }


# ---------------------------------------------------------------------------
# Category base classes
# ---------------------------------------------------------------------------


class ValidationError(PlannerError):
    """Input or domain-model validation failure. Never retryable."""

    def __init__(self, message: str = "", **kwargs: object) -> None:
        kwargs.setdefault("retryable", False)
        super().__init__(message, **kwargs)  # type: ignore[arg-type]


class TransientError(PlannerError):
    """Temporary failure that may succeed on retry."""

    def __init__(self, message: str = "", **kwargs: object) -> None:
        kwargs.setdefault("retryable", True)
        super().__init__(message, **kwargs)  # type: ignore[arg-type]


class PermanentError(PlannerError):
    """Unrecoverable domain failure. Not retryable."""

    def __init__(self, message: str = "", **kwargs: object) -> None:
        kwargs.setdefault("retryable", False)
        super().__init__(message, **kwargs)  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# Planning core
# ---------------------------------------------------------------------------


class InputTypeError(ValidationError):
    """The survey area is missing, not a polygon, or not a valid ring."""

    default_stage = "survey_area"
    default_code = "INPUT_TYPE_INVALID"


class MissingParameterError(ValidationError):
    """Camera, optics or height parameters resolve to a zero footprint."""

    default_stage = "footprint"
    default_code = "MISSING_PARAMETER"


class InvalidOptionError(ValidationError):
    """A flight option is non-numeric or outside its valid range."""

    default_stage = "options"
    default_code = "OPTION_INVALID"


class StripLimitError(ValidationError):
    """The requested coverage would need more strips than allowed."""

    default_stage = "strips"
    default_code = "STRIP_LIMIT_EXCEEDED"


class PhotoLimitError(ValidationError):
    """The requested coverage would need more photo points than allowed."""

    default_stage = "photos"
    default_code = "PHOTO_LIMIT_EXCEEDED"
