"""
Sensor model parameter correlation.

Models the statistical correlation between adjustable parameters of a
community sensor model for error-propagation and bundle-adjustment
consumers. Parameters are partitioned into correlation parameter
groups; within a group, correlation decays with the time separation
according to a four-parameter equation.

Basic usage:
    >>> from csm_correlation.engine import FourParameterCorrelationModel
    >>>
    >>> model = FourParameterCorrelationModel(num_sm_params=3, num_cp_groups=1)
    >>> for index in range(3):
    ...     model.set_correlation_parameter_group(index, 0).unwrap()
    >>> model.set_correlation_group_parameters_values(0, 0.9, 0.5, 2.0, 10.0).unwrap()
    >>> model.get_correlation_coefficient(0, 0.0).unwrap()
    0.9
"""

__version__ = "0.1.0"
__license__ = "Apache-2.0"

__all__ = [
    "__version__",
    "__license__",
]
