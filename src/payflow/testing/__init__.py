"""
Payflow testing engine.

Declarative end-to-end payment workflows run against a live payment API:
variable capture between steps, response assertions including the payment
status machine, per-connector fixtures, and supervised server processes.
"""

from payflow.testing.assertions import AssertionEngine, AssertionReport, RuleOutcome
from payflow.testing.connectors import ConnectorConfigRegistry, ConnectorScenario
from payflow.testing.flow import FlowOrchestrator, FlowResult, FlowState, StepReport
from payflow.testing.readiness import ReadinessPoller, ReadinessResult, tcp_probe
from payflow.testing.report import RunReport, format_report, write_report
from payflow.testing.runner import WorkflowRunner
from payflow.testing.variables import UNDEFINED, VariableStore
from payflow.testing.workflow import Workflow, WorkflowStep

__all__ = [
    "UNDEFINED",
    "AssertionEngine",
    "AssertionReport",
    "ConnectorConfigRegistry",
    "ConnectorScenario",
    "FlowOrchestrator",
    "FlowResult",
    "FlowState",
    "ReadinessPoller",
    "ReadinessResult",
    "RuleOutcome",
    "RunReport",
    "StepReport",
    "VariableStore",
    "Workflow",
    "WorkflowRunner",
    "WorkflowStep",
    "format_report",
    "tcp_probe",
    "write_report",
]
