"""
Vehicle value code hook.

Validates vehicle year, make and model slots collected by a slot-filling bot
and tells the platform what to do next.
"""

__version__ = "1.0.0"

from .data_types import (
    Directive,
    FulfillmentState,
    IntentRequest,
    InvocationPhase,
    Message,
    ValidationOutcome,
)
from .dispatch import Dispatcher, dispatch
from .errors import ContractViolation, UnsupportedIntentError

__all__ = [
    "Directive",
    "FulfillmentState",
    "IntentRequest",
    "InvocationPhase",
    "Message",
    "ValidationOutcome",
    "Dispatcher",
    "dispatch",
    "ContractViolation",
    "UnsupportedIntentError",
]
