"""Orchestration package: the lifecycle entry point and its handle."""

from .context import GateAPI, LifecycleAPI, RequestContext
from .handle import InvocationHandle
from .ids import generate_request_id
from .options import Gate, LifecycleOptions
from .orchestrator import Computation, LifecycleAction, Orchestrator, create_lifecycle
from .outcome import Outcome, Rejected, Skipped, Success, Thrown
from .unwrap import unwrap_result

__all__ = [
    "Computation",
    "Gate",
    "GateAPI",
    "InvocationHandle",
    "LifecycleAPI",
    "LifecycleAction",
    "LifecycleOptions",
    "Orchestrator",
    "Outcome",
    "Rejected",
    "RequestContext",
    "Skipped",
    "Success",
    "Thrown",
    "create_lifecycle",
    "generate_request_id",
    "unwrap_result",
]
