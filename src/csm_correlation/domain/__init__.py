"""
Domain module for the sensor-model correlation library.

Contains the enumerations shared by contracts and engine code.
"""

from csm_correlation.domain.enums import CorrelationModelKind, ErrorKind

__all__ = [
    "CorrelationModelKind",
    "ErrorKind",
]
