"""Core payflow types: errors and run configuration."""

from payflow.core.environment import RunConfig
from payflow.core.errors import (
    ConfigurationError,
    ErrorContext,
    ExtractionMiss,
    InfrastructureError,
    MockServerStartupFailed,
    NoMockAvailable,
    NotConfigured,
    PayflowError,
    ProcessSpawnError,
    ReadinessTimeout,
    RequestDispatchError,
    ResponseParseError,
    UnknownWorkflow,
)

__all__ = [
    "ConfigurationError",
    "ErrorContext",
    "ExtractionMiss",
    "InfrastructureError",
    "MockServerStartupFailed",
    "NoMockAvailable",
    "NotConfigured",
    "PayflowError",
    "ProcessSpawnError",
    "ReadinessTimeout",
    "RequestDispatchError",
    "ResponseParseError",
    "RunConfig",
    "UnknownWorkflow",
]
