"""Correlation model engine.

Provides:
- FourParameterCorrelationModel: Group tables and coefficient evaluation,
  implementing CorrelationModelProtocol
- FourParameterCorrelationParameters: Immutable (A, alpha, beta, tau)
- Four-parameter formulas: scalar coefficient and Polars expressions

Usage:
    import polars as pl
    from csm_correlation.engine import FourParameterCorrelationModel

    model = FourParameterCorrelationModel(num_sm_params=6, num_cp_groups=2)
    model.set_correlation_group_parameters_values(0, 0.9, 0.5, 2.0, 10.0)
    result = model.apply_correlation_coefficients(
        pl.LazyFrame({"cp_group_index": [0, 0], "delta_time": [0.0, 5.0]})
    )
"""

from csm_correlation.engine.formulas import (
    apply_correlation_coefficients,
    calculate_correlation_coefficient,
    clamp_coefficient,
    correlation_coefficient_expr,
    long_lag_coefficient,
    zero_lag_coefficient,
)
from csm_correlation.engine.four_parameter import (
    FOUR_PARAMETER_MODEL_FORMAT,
    FourParameterCorrelationModel,
    FourParameterCorrelationParameters,
)

__all__ = [
    "FOUR_PARAMETER_MODEL_FORMAT",
    "FourParameterCorrelationModel",
    "FourParameterCorrelationParameters",
    "apply_correlation_coefficients",
    "calculate_correlation_coefficient",
    "clamp_coefficient",
    "correlation_coefficient_expr",
    "long_lag_coefficient",
    "zero_lag_coefficient",
]
