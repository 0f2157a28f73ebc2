"""
payflow - declarative end-to-end workflow harness for payment APIs.

Runs multi-step payment workflows (create, confirm, capture, sync, refund,
mandates) against a payment server for every configured connector and
scenario, asserting responses and payment status transitions.
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _metadata_version

from payflow.core.errors import ConfigurationError, InfrastructureError, PayflowError


def _get_version() -> str:
    try:
        return _metadata_version("payflow")
    except PackageNotFoundError:
        return "0.0.0"


__version__ = _get_version()

__all__ = [
    "__version__",
    "ConfigurationError",
    "InfrastructureError",
    "PayflowError",
]
