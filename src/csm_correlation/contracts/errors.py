"""
Error handling contracts for the correlation models.

Provides structured error representation using the Result pattern:
- CorrelationError: Immutable error details with the originating operation
- CorrelationResult: Value-or-error return of every fallible model operation
- LazyFrameResult: Combines LazyFrame output with accumulated errors
- CorrelationModelError: Exception raised by CorrelationResult.unwrap()

This approach enables:
- Fallible contracts that are visible in each operation's return type
- Short-circuit validation where the first violation is the one reported
- Bulk evaluation that reports every bad group index without aborting
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Generic, TypeVar

from csm_correlation.domain.enums import ErrorKind

if TYPE_CHECKING:
    import polars as pl

T = TypeVar("T")


@dataclass(frozen=True)
class CorrelationError:
    """
    Immutable representation of a correlation model error.

    Attributes:
        kind: Error kind (BOUNDS or INDEX_OUT_OF_RANGE)
        message: Human-readable description of the issue
        function: Originating operation, e.g.
                  "FourParameterCorrelationModel.set_correlation_group_parameters"
        field_name: Optional name of the offending argument or parameter
        expected_value: Optional description of the accepted range
        actual_value: Optional actual value that caused the error
    """

    kind: ErrorKind
    message: str
    function: str
    field_name: str | None = None
    expected_value: str | None = None
    actual_value: str | None = None

    def __str__(self) -> str:
        """Human-readable error representation."""
        parts = [f"[{self.kind.value.upper()}] {self.message}", f"In: {self.function}"]

        if self.field_name and self.actual_value is not None:
            parts.append(f"{self.field_name}={self.actual_value}")

        return " | ".join(parts)

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "kind": self.kind.value,
            "message": self.message,
            "function": self.function,
            "field_name": self.field_name,
            "expected_value": self.expected_value,
            "actual_value": self.actual_value,
        }


class CorrelationModelError(Exception):
    """Exception raised when an unsuccessful CorrelationResult is unwrapped."""

    def __init__(self, error: CorrelationError) -> None:
        """
        Initialize CorrelationModelError.

        Args:
            error: The error carried by the failed result
        """
        self.error = error
        super().__init__(str(error))

    @property
    def kind(self) -> ErrorKind:
        return self.error.kind


@dataclass(frozen=True)
class CorrelationResult(Generic[T]):
    """
    Result of a fallible correlation model operation.

    Exactly one of ``value`` or ``error`` is meaningful: when ``error``
    is None the operation succeeded and ``value`` holds its output
    (which may itself be None, e.g. an unassigned parameter group).

    Usage:
        result = model.get_correlation_coefficient(0, 12.5)
        if result.is_ok:
            rho = result.value
        else:
            handle(result.error)

        # or, to propagate as an exception
        rho = model.get_correlation_coefficient(0, 12.5).unwrap()
    """

    value: T | None = None
    error: CorrelationError | None = None

    @property
    def is_ok(self) -> bool:
        """Check if the operation succeeded."""
        return self.error is None

    @property
    def kind(self) -> ErrorKind | None:
        """Kind of the error, or None on success."""
        return self.error.kind if self.error is not None else None

    def unwrap(self) -> T | None:
        """
        Return the value, raising if the operation failed.

        Raises:
            CorrelationModelError: If the result carries an error
        """
        if self.error is not None:
            raise CorrelationModelError(self.error)
        return self.value

    @classmethod
    def ok(cls, value: T | None = None) -> CorrelationResult[T]:
        return cls(value=value)

    @classmethod
    def fail(cls, error: CorrelationError) -> CorrelationResult[T]:
        return cls(error=error)


@dataclass
class LazyFrameResult:
    """
    Result container combining a LazyFrame with accumulated errors.

    Used by bulk evaluation, where every row is processed and each
    problem is reported instead of stopping at the first one.

    Attributes:
        frame: The resulting LazyFrame (rows with errors carry nulls)
        errors: List of errors encountered during processing
    """

    frame: pl.LazyFrame
    errors: list[CorrelationError] = field(default_factory=list)

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

    def errors_by_kind(self, kind: ErrorKind) -> list[CorrelationError]:
        """Filter errors by kind."""
        return [e for e in self.errors if e.kind == kind]

    def add_error(self, error: CorrelationError) -> None:
        """Add an error to the result."""
        self.errors.append(error)

    def add_errors(self, errors: list[CorrelationError]) -> None:
        """Add multiple errors to the result."""
        self.errors.extend(errors)


# =============================================================================
# ERROR MESSAGES
# =============================================================================

MESSAGE_SM_PARAM_INDEX = "Sensor model parameter index is out of range."
MESSAGE_CP_GROUP_INDEX = "Correlation parameter group index is out of range."


# =============================================================================
# ERROR FACTORY FUNCTIONS
# =============================================================================


def index_out_of_range_error(
    message: str,
    function: str,
    field_name: str | None = None,
    index: object | None = None,
    size: int | None = None,
) -> CorrelationError:
    """Create an index out of range error."""
    return CorrelationError(
        kind=ErrorKind.INDEX_OUT_OF_RANGE,
        message=message,
        function=function,
        field_name=field_name,
        expected_value=f"[0, {size})" if size is not None else None,
        actual_value=str(index) if index is not None else None,
    )


def bounds_error(
    field_name: str,
    actual_value: float,
    expected_value: str,
    function: str,
    message: str | None = None,
) -> CorrelationError:
    """Create a parameter bounds error."""
    return CorrelationError(
        kind=ErrorKind.BOUNDS,
        message=message
        or f"Correlation parameter {field_name} must be in the range {expected_value}.",
        function=function,
        field_name=field_name,
        expected_value=expected_value,
        actual_value=str(actual_value),
    )
