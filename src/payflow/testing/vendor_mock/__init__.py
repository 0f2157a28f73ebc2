"""
Mock connector servers for alpha connectors.

Usage:
    from payflow.testing.vendor_mock import MockServerManager

    manager = MockServerManager()
    manager.validate(["silverflow"])
    handle = manager.start("silverflow")
    ...
    manager.stop(handle)
"""

from payflow.testing.vendor_mock.manager import (
    MOCK_SERVERS,
    MockServerEntry,
    MockServerHandle,
    MockServerManager,
    pascal_case,
    resolve,
)
from payflow.testing.vendor_mock.state import ChargeStore

__all__ = [
    "MOCK_SERVERS",
    "ChargeStore",
    "MockServerEntry",
    "MockServerHandle",
    "MockServerManager",
    "pascal_case",
    "resolve",
]
