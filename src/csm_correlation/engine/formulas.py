"""
Four-parameter correlation formulas.

Implements the decay function used to correlate two observations of
sensor model parameters in the same correlation parameter group.

Key formula:
- rho = A × (alpha + (1 - alpha) × (1 + beta) / (beta + exp(|dt| / tau)))

Limits:
- dt → 0:   rho → A × (alpha + (1 - alpha) × (1 + beta) / (beta + 1)) = A
- dt → inf: rho → A × alpha (long-lag asymptote)

Implementation architecture:
- Scalar function: Single evaluation used by the correlation model
- Vectorized expressions: Pure Polars expressions for bulk evaluation
  over many (group, delta time) pairs

Both paths evaluate the same algebraic rearrangement in terms of
exp(-|dt| / tau), which stays finite for any delta time.
"""

from __future__ import annotations

import math

import polars as pl


# =============================================================================
# CONSTANTS
# =============================================================================

COEFFICIENT_MIN = -1.0
COEFFICIENT_MAX = 1.0

# Column names used by the vectorized evaluation
GROUP_INDEX_COL = "cp_group_index"
DELTA_TIME_COL = "delta_time"
CORRELATION_COL = "correlation"

PARAMETER_COLS = ("a", "alpha", "beta", "tau")


# =============================================================================
# SCALAR CALCULATIONS
# =============================================================================


def clamp_coefficient(rho: float) -> float:
    """Clamp a correlation coefficient into [-1, 1]."""
    if rho < COEFFICIENT_MIN:
        return COEFFICIENT_MIN
    if rho > COEFFICIENT_MAX:
        return COEFFICIENT_MAX
    return rho


def calculate_correlation_coefficient(
    a: float,
    alpha: float,
    beta: float,
    tau: float,
    delta_time: float,
) -> float:
    """
    Scalar four-parameter correlation coefficient.

    Args:
        a: Overall scale factor
        alpha: Long-lag correlation fraction
        beta: Shape parameter of the decay
        tau: Time-decay constant, must be positive
        delta_time: Time separation; only its magnitude is used

    Returns:
        Correlation coefficient clamped to [-1, 1]

    Raises:
        ZeroDivisionError: If tau is zero (parameters never configured)
    """
    decay = math.exp(-abs(delta_time) / tau)

    # (1 + beta) / (beta + e^x) == (1 + beta) * e^-x / (beta * e^-x + 1)
    rho = a * (alpha + (1.0 - alpha) * (1.0 + beta) * decay / (beta * decay + 1.0))

    return clamp_coefficient(rho)


def zero_lag_coefficient(a: float, alpha: float, beta: float) -> float:
    """Coefficient as the time separation approaches zero."""
    return clamp_coefficient(a * (alpha + (1.0 - alpha) * (1.0 + beta) / (beta + 1.0)))


def long_lag_coefficient(a: float, alpha: float) -> float:
    """Coefficient as the time separation grows without bound."""
    return clamp_coefficient(a * alpha)


# =============================================================================
# PURE POLARS EXPRESSION FUNCTIONS
# =============================================================================


def correlation_coefficient_expr(
    a: str = "a",
    alpha: str = "alpha",
    beta: str = "beta",
    tau: str = "tau",
    delta_time: str = DELTA_TIME_COL,
) -> pl.Expr:
    """
    Pure Polars expression for the four-parameter correlation coefficient.

    Rows with a non-positive or null tau evaluate to null rather
    than dividing by zero.

    Args:
        a: Column holding the scale factor
        alpha: Column holding the long-lag fraction
        beta: Column holding the decay shape
        tau: Column holding the time-decay constant
        delta_time: Column holding the time separation
    """
    a_col = pl.col(a)
    alpha_col = pl.col(alpha)
    beta_col = pl.col(beta)
    tau_col = pl.col(tau)

    decay = (-pl.col(delta_time).abs() / tau_col).exp()

    rho = a_col * (
        alpha_col
        + (1.0 - alpha_col) * (1.0 + beta_col) * decay / (beta_col * decay + 1.0)
    )

    return (
        pl.when(tau_col > 0.0)
        .then(rho.clip(COEFFICIENT_MIN, COEFFICIENT_MAX))
        .otherwise(pl.lit(None, dtype=pl.Float64))
    )


def apply_correlation_coefficients(
    frame: pl.LazyFrame,
    parameters: pl.LazyFrame,
) -> pl.LazyFrame:
    """
    Evaluate correlation coefficients for every row of a LazyFrame.

    Expects columns: cp_group_index, delta_time
    Adds column: correlation

    Rows whose group index has no match in ``parameters`` (including
    null group indices) get a null correlation.

    Args:
        frame: LazyFrame of (group, delta time) pairs
        parameters: Group table with cp_group_index, a, alpha, beta, tau

    Returns:
        LazyFrame with the correlation column added
    """
    prefixed = {col: f"__cp_{col}" for col in PARAMETER_COLS}

    group_params = parameters.select(
        pl.col(GROUP_INDEX_COL).cast(pl.Int64).alias("__cp_join_key"),
        *[pl.col(col).alias(alias) for col, alias in prefixed.items()],
    )

    # Row order of the input is restored after the join
    joined = (
        frame.with_row_index("__cp_row")
        .with_columns(pl.col(GROUP_INDEX_COL).cast(pl.Int64).alias("__cp_join_key"))
        .join(group_params, on="__cp_join_key", how="left")
        .sort("__cp_row")
    )

    return joined.with_columns(
        correlation_coefficient_expr(
            a=prefixed["a"],
            alpha=prefixed["alpha"],
            beta=prefixed["beta"],
            tau=prefixed["tau"],
        ).alias(CORRELATION_COL)
    ).drop(["__cp_row", "__cp_join_key", *prefixed.values()])
