"""
Protocol definitions for correlation model components.

Defines interfaces using Python's Protocol (PEP 544) for structural
typing. Components implementing these protocols can be:
- Consumed by error-propagation and bundle-adjustment code without
  knowing the concrete model
- Easily mocked for unit testing
- Swapped for sibling variants (no-correlation, linear decay, ...)

Correlation between parameters in different groups is zero; consumers
check group membership before asking a model for a coefficient.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from csm_correlation.contracts.errors import CorrelationResult


@runtime_checkable
class CorrelationModelProtocol(Protocol):
    """
    Protocol for parameter correlation models.

    A model partitions sensor model parameters into disjoint
    correlation parameter groups and evaluates the correlation
    between two observations of the same group at a time separation.
    """

    @property
    def format(self) -> str:
        """Fixed descriptor identifying the kind of model."""
        ...

    def get_num_sensor_model_parameters(self) -> int:
        """Number of sensor model parameters the model was sized for."""
        ...

    def get_num_correlation_parameter_groups(self) -> int:
        """Number of correlation parameter groups the model was sized for."""
        ...

    def get_correlation_parameter_group(
        self,
        sm_param_index: int,
    ) -> CorrelationResult[int]:
        """
        Group a sensor model parameter belongs to.

        Args:
            sm_param_index: Index of the sensor model parameter

        Returns:
            CorrelationResult with the group index, None when unassigned,
            or an INDEX_OUT_OF_RANGE error
        """
        ...

    def get_correlation_coefficient(
        self,
        cp_group_index: int,
        delta_time: float,
    ) -> CorrelationResult[float]:
        """
        Correlation coefficient for a group at a time separation.

        Args:
            cp_group_index: Index of the correlation parameter group
            delta_time: Time between the two observations (sign ignored)

        Returns:
            CorrelationResult with a coefficient in [-1, 1],
            or an INDEX_OUT_OF_RANGE error
        """
        ...
