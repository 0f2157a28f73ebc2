"""
Error types for payflow workflow runs.

Two families matter to callers:

- ``InfrastructureError``: the harness could not do its job (a process did not
  start, a port never opened, a request could not be sent). Fatal to the
  affected run or combination.
- ``ConfigurationError``: the requested run cannot be built (no fixture for a
  connector/scenario pair, no mock server for an alpha connector). Raised
  before any request is sent.

Assertion failures are not exceptions; they are recorded in step reports.
"""

from __future__ import annotations

from dataclasses import dataclass


class PayflowError(Exception):
    """Base exception for all payflow errors."""

    def __init__(self, message: str, context: ErrorContext | None = None):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context:
            return f"{self.context.format()}: {self.message}"
        return self.message


@dataclass
class ErrorContext:
    """
    Where in a run an error occurred.

    Attributes:
        connector: Connector identifier (e.g. "stripe")
        scenario: Scenario name (e.g. "No3DS")
        workflow: Workflow name (e.g. "manual_capture")
        step: Step name within the workflow
    """

    connector: str | None = None
    scenario: str | None = None
    workflow: str | None = None
    step: str | None = None

    def format(self) -> str:
        """
        Format context as a slash-separated location.

        Returns:
            String like "stripe/No3DS/manual_capture/capture"
        """
        parts = [p for p in (self.connector, self.scenario, self.workflow, self.step) if p]
        return "/".join(parts) if parts else "<run>"


class InfrastructureError(PayflowError):
    """
    Raised when the harness infrastructure fails.

    Examples:
    - Server under test never opened its port
    - Mock connector server never became reachable
    - Process could not be spawned
    - HTTP request could not be sent
    """

    pass


class ReadinessTimeout(InfrastructureError):
    """Raised when a readiness probe exhausts its attempt budget."""

    def __init__(self, target: str, attempts: int, context: ErrorContext | None = None):
        self.target = target
        self.attempts = attempts
        super().__init__(f"{target} not ready after {attempts} attempts", context)


class ProcessSpawnError(InfrastructureError):
    """Raised when a child process cannot be started or exits during startup."""

    pass


class MockServerStartupFailed(InfrastructureError):
    """Raised when a connector's mock server does not become reachable."""

    def __init__(self, connector: str, reason: str = ""):
        self.connector = connector
        message = f"Mock server for '{connector}' failed to start"
        if reason:
            message += f": {reason}"
        super().__init__(message, ErrorContext(connector=connector))


class RequestDispatchError(InfrastructureError):
    """Raised when an HTTP request to the payment API cannot be sent."""

    pass


class ConfigurationError(PayflowError):
    """
    Raised when a run cannot be configured.

    Examples:
    - No fixture for a connector/scenario pair
    - Alpha connector without a mock server mapping
    - Unknown workflow name
    - Connector auth file path that does not exist
    """

    pass


class NotConfigured(ConfigurationError):
    """Raised when no fixture exists for a connector/scenario pair."""

    def __init__(self, connector: str, scenario: str | None = None):
        self.connector = connector
        self.scenario = scenario
        if scenario is None:
            message = f"Connector '{connector}' has no fixture configuration"
        else:
            message = f"Scenario '{scenario}' is not configured for connector '{connector}'"
        super().__init__(message)


class NoMockAvailable(ConfigurationError):
    """Raised when an alpha connector has no entry in the mock server table."""

    def __init__(self, connector: str, mock_name: str):
        self.connector = connector
        self.mock_name = mock_name
        super().__init__(
            f"No mock server registered for '{connector}' (looked up as '{mock_name}')"
        )


class UnknownWorkflow(ConfigurationError):
    """Raised when a workflow name is not in the catalogue."""

    pass


class ExtractionMiss(PayflowError):
    """Raised when a step's hard dependency variable was never extracted."""

    def __init__(self, variable: str, context: ErrorContext | None = None):
        self.variable = variable
        super().__init__(f"Required variable '{variable}' is not set", context)


class ResponseParseError(PayflowError):
    """A response body could not be decoded as a JSON object.

    Recovered locally by the orchestrator; never propagated out of a run.
    """

    pass
