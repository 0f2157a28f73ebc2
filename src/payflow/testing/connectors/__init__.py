"""Per-connector, per-scenario fixture data."""

from __future__ import annotations

from payflow.testing.connectors.registry import (
    CardFixture,
    ConnectorConfigRegistry,
    ConnectorScenario,
    MandateAmount,
    MandateType,
    load_connector_file,
)

__all__ = [
    "CardFixture",
    "ConnectorConfigRegistry",
    "ConnectorScenario",
    "MandateAmount",
    "MandateType",
    "load_connector_file",
]
