"""
Contracts module for the sensor-model correlation library.

Provides interfaces, configuration and error types shared by the
correlation models and their consumers.

Submodules:
- config: CorrelationParameterBounds and ParameterRange
- errors: CorrelationError, CorrelationResult and LazyFrameResult
- protocols: CorrelationModelProtocol
"""

# Configuration contracts
from csm_correlation.contracts.config import (
    CorrelationParameterBounds,
    ParameterRange,
)

# Error handling contracts
from csm_correlation.contracts.errors import (
    MESSAGE_CP_GROUP_INDEX,
    MESSAGE_SM_PARAM_INDEX,
    CorrelationError,
    CorrelationModelError,
    CorrelationResult,
    LazyFrameResult,
    bounds_error,
    index_out_of_range_error,
)

# Protocol definitions
from csm_correlation.contracts.protocols import CorrelationModelProtocol

__all__ = [
    # Configuration
    "CorrelationParameterBounds",
    "ParameterRange",
    # Errors
    "CorrelationError",
    "CorrelationModelError",
    "CorrelationResult",
    "LazyFrameResult",
    "bounds_error",
    "index_out_of_range_error",
    "MESSAGE_CP_GROUP_INDEX",
    "MESSAGE_SM_PARAM_INDEX",
    # Protocols
    "CorrelationModelProtocol",
]
