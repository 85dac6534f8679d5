"""
Core value types for ping invocations.

- PingConfiguration: Immutable set of ping flags
- PingConfigurationBuilder: Chained construction of a PingConfiguration
- PingError and subclasses: Failures surfaced to callers
"""

from .ping_configuration import PingConfiguration, PingConfigurationBuilder
from .errors import PingError, ProcessLaunchFailure, HostUnreachable

__all__ = [
    "PingConfiguration",
    "PingConfigurationBuilder",
    "PingError",
    "ProcessLaunchFailure",
    "HostUnreachable",
]
