"""
Run configuration for payflow.

Configuration is supplied as environment variables at run start, the same way
the CI pipeline hands it to the harness. The harness treats credentials and the
connector auth file as opaque: it only checks the auth file exists and passes
its path through to the server-under-test process.

Environment variables:
    PAYFLOW_BASEURL                  Base URL of the payment API under test
    PAYFLOW_ADMINAPIKEY              Admin API key
    PAYFLOW_API_KEY                  API key sent on payment requests
                                     (defaults to the admin key)
    PAYFLOW_CONNECTOR_AUTH_FILE_PATH Per-connector credential file
    PAYMENTS_CONNECTORS              Connectors to test against real sandboxes
    ALPHA_PAYMENTS_CONNECTORS        Connectors served by local mock servers
    PAYFLOW_SERVER_COMMAND           Command that starts the server under test
                                     (unset: the server is managed externally)
    PAYFLOW_WORKERS                  Concurrent workflow combinations
    PAYFLOW_REQUEST_TIMEOUT          Per-request timeout in seconds

Usage:
    from payflow.core.environment import RunConfig

    config = RunConfig.from_env()
    config.check()
"""

from __future__ import annotations

import logging
import os
import re
import shlex
from collections.abc import Mapping
from pathlib import Path
from urllib.parse import urlparse

from pydantic import BaseModel, ConfigDict, Field

from payflow.core.errors import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://localhost:8080"

# Mock connector servers listen on a single well-known local port.
MOCK_SERVER_PORT = 3010

# Readiness budgets: (attempts, interval seconds)
SERVER_READY_ATTEMPTS = 12
SERVER_READY_INTERVAL = 10.0
MOCK_READY_ATTEMPTS = 6
MOCK_READY_INTERVAL = 10.0


def _split_list(value: str | None) -> list[str]:
    """Split a space- or comma-separated env value into a list."""
    if not value:
        return []
    return [item for item in re.split(r"[\s,]+", value.strip()) if item]


def _parse_number(
    env: Mapping[str, str], name: str, kind: type[int] | type[float]
) -> int | float:
    try:
        return kind(env[name])
    except ValueError:
        raise ConfigurationError(f"{name} must be a number, got {env[name]!r}") from None


class RunConfig(BaseModel):
    """
    Settings for one harness run.

    Attributes:
        base_url: Base URL of the payment API under test
        admin_api_key: Admin API key (opaque)
        api_key: Key sent in the ``api-key`` header on payment requests
        connector_auth_file: Path to the per-connector credential file (opaque)
        connectors: Connectors exercised against their sandboxes
        alpha_connectors: Connectors exercised against local mock servers
        server_command: argv to start the server under test, or None when the
            server is started outside the harness
        workers: Max concurrent (connector, scenario, workflow) combinations
        request_timeout: Per-request timeout in seconds
        mock_port: Port the mock connector servers listen on
    """

    base_url: str = DEFAULT_BASE_URL
    admin_api_key: str | None = None
    api_key: str | None = None
    connector_auth_file: Path | None = None
    connectors: list[str] = Field(default_factory=list)
    alpha_connectors: list[str] = Field(default_factory=list)
    server_command: list[str] | None = None
    workers: int = 4
    request_timeout: float = 30.0
    mock_port: int = MOCK_SERVER_PORT
    server_ready_attempts: int = SERVER_READY_ATTEMPTS
    server_ready_interval: float = SERVER_READY_INTERVAL
    mock_ready_attempts: int = MOCK_READY_ATTEMPTS
    mock_ready_interval: float = MOCK_READY_INTERVAL

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> RunConfig:
        """Build a configuration from environment variables.

        Args:
            environ: Mapping to read from (defaults to ``os.environ``).

        Returns:
            RunConfig with unset variables left at their defaults.
        """
        env = os.environ if environ is None else environ

        values: dict[str, object] = {}
        if env.get("PAYFLOW_BASEURL"):
            values["base_url"] = env["PAYFLOW_BASEURL"]
        if env.get("PAYFLOW_ADMINAPIKEY"):
            values["admin_api_key"] = env["PAYFLOW_ADMINAPIKEY"]
        if env.get("PAYFLOW_API_KEY"):
            values["api_key"] = env["PAYFLOW_API_KEY"]
        if env.get("PAYFLOW_CONNECTOR_AUTH_FILE_PATH"):
            values["connector_auth_file"] = Path(env["PAYFLOW_CONNECTOR_AUTH_FILE_PATH"])
        if env.get("PAYFLOW_SERVER_COMMAND"):
            try:
                values["server_command"] = shlex.split(env["PAYFLOW_SERVER_COMMAND"])
            except ValueError as e:
                raise ConfigurationError(f"PAYFLOW_SERVER_COMMAND: {e}") from e
        if env.get("PAYFLOW_WORKERS"):
            values["workers"] = _parse_number(env, "PAYFLOW_WORKERS", int)
        if env.get("PAYFLOW_REQUEST_TIMEOUT"):
            values["request_timeout"] = _parse_number(env, "PAYFLOW_REQUEST_TIMEOUT", float)

        values["connectors"] = _split_list(env.get("PAYMENTS_CONNECTORS"))
        values["alpha_connectors"] = _split_list(env.get("ALPHA_PAYMENTS_CONNECTORS"))
        return cls(**values)

    @property
    def effective_api_key(self) -> str | None:
        """The key sent on payment requests."""
        return self.api_key or self.admin_api_key

    @property
    def server_host(self) -> str:
        return urlparse(self.base_url).hostname or "localhost"

    @property
    def server_port(self) -> int:
        parsed = urlparse(self.base_url)
        if parsed.port:
            return parsed.port
        return 443 if parsed.scheme == "https" else 80

    @property
    def mock_base_url(self) -> str:
        return f"http://localhost:{self.mock_port}"

    def check(self) -> None:
        """Check the configuration can drive a run.

        Raises:
            ConfigurationError: If no connectors are selected, the worker
                count is not positive, or the auth file path does not exist.
        """
        if not self.connectors and not self.alpha_connectors:
            raise ConfigurationError(
                "No connectors selected (set PAYMENTS_CONNECTORS or ALPHA_PAYMENTS_CONNECTORS)"
            )
        if self.workers < 1:
            raise ConfigurationError(f"workers must be >= 1, got {self.workers}")
        if self.connector_auth_file is not None and not self.connector_auth_file.exists():
            raise ConfigurationError(f"Connector auth file not found: {self.connector_auth_file}")
        if self.effective_api_key is None:
            logger.warning("No API key configured; requests are sent without an api-key header")

    def server_env(self, base: Mapping[str, str] | None = None) -> dict[str, str]:
        """Environment for the server-under-test process.

        Alpha connectors are pointed at the local mock server and the auth file
        path is forwarded unchanged.
        """
        env = dict(os.environ if base is None else base)
        for connector in self.alpha_connectors:
            env[connector_base_url_env_var(connector)] = self.mock_base_url
        if self.connector_auth_file is not None:
            env["CONNECTOR_AUTH_FILE_PATH"] = str(self.connector_auth_file)
        return env


def connector_base_url_env_var(connector: str) -> str:
    """Name of the server env var that overrides a connector's base URL.

    Examples:
        "silverflow" → "ROUTER__CONNECTORS__SILVERFLOW__BASE_URL"
        "bank_of_america" → "ROUTER__CONNECTORS__BANK_OF_AMERICA__BASE_URL"
    """
    name_upper = connector.upper().replace("-", "_").replace(".", "_")
    return f"ROUTER__CONNECTORS__{name_upper}__BASE_URL"
