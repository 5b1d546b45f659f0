"""
Four-parameter correlation model for sensor model parameters.

Computes the correlation between adjustable parameters of a community
sensor model. Parameters are divided into disjoint correlation
parameter groups: two parameters in the same group are correlated by

    rho = A × (alpha + (1 - alpha) × (1 + beta) / (beta + exp(|dt| / tau)))

and parameters in different groups are uncorrelated. The model
assigns parameters to groups, stores validated (A, alpha, beta, tau)
values per group and evaluates the equation above.

Classes:
    FourParameterCorrelationParameters: Immutable (A, alpha, beta, tau)
    FourParameterCorrelationModel: Group tables and coefficient evaluation

Usage:
    from csm_correlation.engine import FourParameterCorrelationModel

    model = FourParameterCorrelationModel(num_sm_params=3, num_cp_groups=1)
    for index in range(3):
        model.set_correlation_parameter_group(index, 0).unwrap()
    model.set_correlation_group_parameters_values(0, 0.9, 0.5, 2.0, 10.0).unwrap()
    rho = model.get_correlation_coefficient(0, 10.0).unwrap()

Instances hold no locks; callers sharing one across threads must
serialize mutation themselves.
"""

from __future__ import annotations

import logging
import operator
from dataclasses import astuple, dataclass

import polars as pl

from csm_correlation.contracts.config import CorrelationParameterBounds
from csm_correlation.contracts.errors import (
    MESSAGE_CP_GROUP_INDEX,
    MESSAGE_SM_PARAM_INDEX,
    CorrelationError,
    CorrelationResult,
    LazyFrameResult,
    bounds_error,
    index_out_of_range_error,
)
from csm_correlation.domain.enums import CorrelationModelKind
from csm_correlation.engine.formulas import (
    GROUP_INDEX_COL,
    apply_correlation_coefficients,
    calculate_correlation_coefficient,
)

logger = logging.getLogger(__name__)

FOUR_PARAMETER_MODEL_FORMAT = CorrelationModelKind.FOUR_PARAMETER.value


def _as_index(value: object) -> int | None:
    """Integer form of an index, or None for non-integer values such as floats."""
    try:
        return operator.index(value)
    except TypeError:
        return None


@dataclass(frozen=True)
class FourParameterCorrelationParameters:
    """
    Correlation parameters of one correlation parameter group.

    Attributes:
        a: Overall scale factor
        alpha: Long-lag correlation fraction
        beta: Shape parameter of the decay
        tau: Time-decay constant (zero until configured)
    """

    a: float = 0.0
    alpha: float = 0.0
    beta: float = 0.0
    tau: float = 0.0

    def as_tuple(self) -> tuple[float, float, float, float]:
        return astuple(self)


class FourParameterCorrelationModel:
    """
    Correlation model using the four-parameter decay equation.

    Implements CorrelationModelProtocol. Both tables are sized once at
    construction:
    - group mapping: one optional group index per sensor model parameter,
      None until assigned
    - group parameters: one FourParameterCorrelationParameters per group,
      all zeros until set

    Every fallible operation returns a CorrelationResult. Validation
    always runs before any write, so a failed call leaves the model
    unchanged.

    A group must be configured with set_correlation_group_parameters
    before its coefficient is evaluated; a zero tau is not checked
    and raises ZeroDivisionError.
    """

    def __init__(
        self,
        num_sm_params: int,
        num_cp_groups: int,
        bounds: CorrelationParameterBounds | None = None,
    ) -> None:
        """
        Initialize the model.

        Args:
            num_sm_params: Number of sensor model parameters
            num_cp_groups: Number of correlation parameter groups
            bounds: Parameter validation ranges (default: enforced ranges)
        """
        self._group_mapping: list[int | None] = [None] * num_sm_params
        self._corr_params: list[FourParameterCorrelationParameters] = [
            FourParameterCorrelationParameters()
        ] * num_cp_groups
        self._bounds = bounds if bounds is not None else CorrelationParameterBounds.enforced()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(num_sm_params={len(self._group_mapping)}, "
            f"num_cp_groups={len(self._corr_params)})"
        )

    @property
    def format(self) -> str:
        """Model format descriptor."""
        return FOUR_PARAMETER_MODEL_FORMAT

    @property
    def bounds(self) -> CorrelationParameterBounds:
        return self._bounds

    # =========================================================================
    # Group assignment
    # =========================================================================

    def get_num_sensor_model_parameters(self) -> int:
        return len(self._group_mapping)

    def get_num_correlation_parameter_groups(self) -> int:
        return len(self._corr_params)

    def get_correlation_parameter_group(
        self,
        sm_param_index: int,
    ) -> CorrelationResult[int]:
        """
        Get the correlation parameter group of a sensor model parameter.

        Args:
            sm_param_index: Index of the sensor model parameter

        Returns:
            CorrelationResult with the group index (None if unassigned)
        """
        error = self._check_sensor_model_parameter_index(
            sm_param_index, "get_correlation_parameter_group"
        )
        if error is not None:
            return CorrelationResult.fail(error)

        return CorrelationResult.ok(self._group_mapping[sm_param_index])

    def set_correlation_parameter_group(
        self,
        sm_param_index: int,
        cp_group_index: int,
    ) -> CorrelationResult[None]:
        """
        Assign a sensor model parameter to a correlation parameter group.

        Overwrites any previous assignment.

        Args:
            sm_param_index: Index of the sensor model parameter
            cp_group_index: Index of the correlation parameter group

        Returns:
            Empty CorrelationResult, or INDEX_OUT_OF_RANGE for either index
        """
        function = "set_correlation_parameter_group"
        error = self._check_sensor_model_parameter_index(
            sm_param_index, function
        ) or self._check_parameter_group_index(cp_group_index, function)
        if error is not None:
            return CorrelationResult.fail(error)

        self._group_mapping[operator.index(sm_param_index)] = operator.index(cp_group_index)
        logger.debug(
            "Assigned sensor model parameter %d to correlation group %d",
            sm_param_index,
            cp_group_index,
        )
        return CorrelationResult.ok()

    # =========================================================================
    # Group parameters
    # =========================================================================

    def set_correlation_group_parameters(
        self,
        cp_group_index: int,
        params: FourParameterCorrelationParameters,
    ) -> CorrelationResult[None]:
        """
        Set the correlation parameters of a group.

        The group index is checked first, then a, alpha, beta and tau
        in that order; the first violation is returned.

        Args:
            cp_group_index: Index of the correlation parameter group
            params: New parameters, replacing the stored ones as a unit

        Returns:
            Empty CorrelationResult, INDEX_OUT_OF_RANGE or BOUNDS
        """
        function = "set_correlation_group_parameters"
        error = self._check_parameter_group_index(cp_group_index, function)
        if error is not None:
            return CorrelationResult.fail(error)

        for name, valid_range in self._bounds.ranges():
            value = getattr(params, name)
            if not valid_range.contains(value):
                return CorrelationResult.fail(
                    bounds_error(
                        field_name=name,
                        actual_value=value,
                        expected_value=valid_range.describe(),
                        function=self._qualify(function),
                    )
                )

        self._corr_params[cp_group_index] = params
        logger.debug(
            "Set correlation group %d parameters: a=%g alpha=%g beta=%g tau=%g",
            cp_group_index,
            *params.as_tuple(),
        )
        return CorrelationResult.ok()

    def set_correlation_group_parameters_values(
        self,
        cp_group_index: int,
        a: float,
        alpha: float,
        beta: float,
        tau: float,
    ) -> CorrelationResult[None]:
        """Set the correlation parameters of a group from separate values."""
        return self.set_correlation_group_parameters(
            cp_group_index,
            FourParameterCorrelationParameters(a=a, alpha=alpha, beta=beta, tau=tau),
        )

    def get_correlation_group_parameters(
        self,
        cp_group_index: int,
    ) -> CorrelationResult[FourParameterCorrelationParameters]:
        """
        Get the correlation parameters of a group.

        Returns:
            CorrelationResult with the stored parameters (all zeros if
            never set), or INDEX_OUT_OF_RANGE
        """
        error = self._check_parameter_group_index(
            cp_group_index, "get_correlation_group_parameters"
        )
        if error is not None:
            return CorrelationResult.fail(error)

        return CorrelationResult.ok(self._corr_params[cp_group_index])

    # =========================================================================
    # Evaluation
    # =========================================================================

    def get_correlation_coefficient(
        self,
        cp_group_index: int,
        delta_time: float,
    ) -> CorrelationResult[float]:
        """
        Evaluate the correlation coefficient of a group.

        Args:
            cp_group_index: Index of the correlation parameter group
            delta_time: Time separation; the sign is ignored

        Returns:
            CorrelationResult with a coefficient in [-1, 1],
            or INDEX_OUT_OF_RANGE
        """
        error = self._check_parameter_group_index(
            cp_group_index, "get_correlation_coefficient"
        )
        if error is not None:
            return CorrelationResult.fail(error)

        cp = self._corr_params[cp_group_index]
        return CorrelationResult.ok(
            calculate_correlation_coefficient(cp.a, cp.alpha, cp.beta, cp.tau, delta_time)
        )

    def parameters_frame(self) -> pl.LazyFrame:
        """Group parameter table with columns cp_group_index, a, alpha, beta, tau."""
        return pl.LazyFrame(
            {
                GROUP_INDEX_COL: list(range(len(self._corr_params))),
                "a": [p.a for p in self._corr_params],
                "alpha": [p.alpha for p in self._corr_params],
                "beta": [p.beta for p in self._corr_params],
                "tau": [p.tau for p in self._corr_params],
            },
            schema={
                GROUP_INDEX_COL: pl.Int64,
                "a": pl.Float64,
                "alpha": pl.Float64,
                "beta": pl.Float64,
                "tau": pl.Float64,
            },
        )

    def assignments_frame(self) -> pl.LazyFrame:
        """Group assignment table with columns sm_param_index, cp_group_index."""
        return pl.LazyFrame(
            {
                "sm_param_index": list(range(len(self._group_mapping))),
                GROUP_INDEX_COL: list(self._group_mapping),
            },
            schema={"sm_param_index": pl.Int64, GROUP_INDEX_COL: pl.Int64},
        )

    def apply_correlation_coefficients(self, frame: pl.LazyFrame) -> LazyFrameResult:
        """
        Evaluate coefficients for every (group, delta time) row of a frame.

        Expects columns: cp_group_index, delta_time
        Adds column: correlation

        Out-of-range group indices are reported once each as
        INDEX_OUT_OF_RANGE and their rows get a null correlation, as do
        rows with a null group index or an unconfigured group.

        The input plan is collected exactly once, here; the returned
        frame is a LazyFrame over the materialized rows, so collecting
        it does not scan the input again.

        Args:
            frame: LazyFrame of (group, delta time) pairs

        Returns:
            LazyFrameResult with the evaluated frame and any errors
        """
        num_groups = len(self._corr_params)
        group = pl.col(GROUP_INDEX_COL)

        evaluated = apply_correlation_coefficients(frame, self.parameters_frame()).collect()

        bad_indices = (
            evaluated.select(group)
            .filter(group.is_not_null() & ((group < 0) | (group >= num_groups)))
            .unique()
            .sort(GROUP_INDEX_COL)[GROUP_INDEX_COL]
            .to_list()
        )

        result = LazyFrameResult(frame=evaluated.lazy())
        result.add_errors([
            index_out_of_range_error(
                MESSAGE_CP_GROUP_INDEX,
                self._qualify("apply_correlation_coefficients"),
                field_name=GROUP_INDEX_COL,
                index=index,
                size=num_groups,
            )
            for index in bad_indices
        ])
        return result

    # =========================================================================
    # Index checks
    # =========================================================================

    def _qualify(self, function: str) -> str:
        return f"{type(self).__name__}.{function}"

    def _check_sensor_model_parameter_index(
        self,
        sm_param_index: int,
        function: str,
    ) -> CorrelationError | None:
        size = len(self._group_mapping)
        index = _as_index(sm_param_index)
        if index is not None and 0 <= index < size:
            return None
        return index_out_of_range_error(
            MESSAGE_SM_PARAM_INDEX,
            self._qualify(function),
            field_name="sm_param_index",
            index=sm_param_index,
            size=size,
        )

    def _check_parameter_group_index(
        self,
        cp_group_index: int,
        function: str,
    ) -> CorrelationError | None:
        size = len(self._corr_params)
        index = _as_index(cp_group_index)
        if index is not None and 0 <= index < size:
            return None
        return index_out_of_range_error(
            MESSAGE_CP_GROUP_INDEX,
            self._qualify(function),
            field_name="cp_group_index",
            index=cp_group_index,
            size=size,
        )
