"""
Domain enums for the sensor-model correlation library.

Defines core enumerations shared by the correlation models:
- ErrorKind: Classification of correlation model failures
- CorrelationModelKind: Kind of correlation model, for consumers that
  branch on model type

These enums provide type safety and self-documenting code at the
boundary with the hosting sensor-model framework.
"""

from enum import Enum


class ErrorKind(Enum):
    """
    Kinds of error a correlation model reports to its caller.

    Both kinds are detected synchronously at the point of violation.
    """

    # A correlation parameter falls outside its permitted interval
    BOUNDS = "bounds"

    # A sensor model parameter or correlation group index is past its table
    INDEX_OUT_OF_RANGE = "index_out_of_range"


class CorrelationModelKind(Enum):
    """
    Kind of parameter correlation model.

    The value is the human-readable format descriptor exposed by
    each model through its ``format`` property.
    """

    FOUR_PARAMETER = "Four-parameter model (A, alpha, beta, tau)"
