"""
Data structures for the vehicle value code hook.

This module defines the contracts between the request parser, the dialog
validator, the response builder and the dispatcher using dataclasses for type
safety and a single place for the wire format.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Mapping, Optional

from .errors import ContractViolation


SLOT_VEHICLE_YEAR = "VehicleYear"
SLOT_VEHICLE_MAKE = "VehicleMake"
SLOT_VEHICLE_MODEL = "VehicleModel"

PLAIN_TEXT = "PlainText"


class InvocationPhase(Enum):
    """Whether the platform is still collecting slots or wants fulfillment."""
    COLLECTING = "Collecting"
    FULFILLING = "Fulfilling"

    @classmethod
    def parse(cls, value: Any) -> "InvocationPhase":
        """
        Parse a phase from either the flat name or the platform's invocation source.

        Args:
            value: "Collecting", "Fulfilling", "DialogCodeHook" or "FulfillmentCodeHook"

        Returns:
            Matching InvocationPhase

        Raises:
            ContractViolation: If the value names no known phase
        """
        if isinstance(value, cls):
            return value
        phase = _PHASE_ALIASES.get(value) if isinstance(value, str) else None
        if phase is None:
            raise ContractViolation(f"Unknown invocation phase: {value!r}")
        return phase


_PHASE_ALIASES = {
    "Collecting": InvocationPhase.COLLECTING,
    "Fulfilling": InvocationPhase.FULFILLING,
    "DialogCodeHook": InvocationPhase.COLLECTING,
    "FulfillmentCodeHook": InvocationPhase.FULFILLING,
}


class FulfillmentState(Enum):
    """Terminal state reported with a Close directive."""
    FULFILLED = "Fulfilled"
    FAILED = "Failed"


class DialogActionType(Enum):
    """The four dialog actions understood by the platform."""
    ELICIT_SLOT = "ElicitSlot"
    CONFIRM_INTENT = "ConfirmIntent"
    DELEGATE = "Delegate"
    CLOSE = "Close"


@dataclass(frozen=True)
class Message:
    """
    User-facing message.

    Attributes:
        content: Human-readable text
        content_type: Content-type tag (only PlainText is produced)
    """
    content: str
    content_type: str = PLAIN_TEXT

    def to_dict(self) -> Dict[str, str]:
        return {"contentType": self.content_type, "content": self.content}


@dataclass(frozen=True)
class ValidationOutcome:
    """
    Result of one validation pass over the candidate slots.

    Either valid (no violated slot, no message) or invalid, naming the
    first slot that failed and a remediation message.
    """
    is_valid: bool
    violated_slot: Optional[str] = None
    message: Optional[Message] = None

    def __post_init__(self):
        if self.is_valid and (self.violated_slot or self.message):
            raise ValueError("A valid outcome cannot carry a violated slot or message")
        if not self.is_valid and not self.violated_slot:
            raise ValueError("An invalid outcome must name the violated slot")

    @classmethod
    def valid(cls) -> "ValidationOutcome":
        return cls(is_valid=True)

    @classmethod
    def invalid(cls, violated_slot: str, content: str) -> "ValidationOutcome":
        return cls(is_valid=False, violated_slot=violated_slot, message=Message(content))


@dataclass(frozen=True)
class IntentRequest:
    """
    One conversational turn as handed to the code hook.

    Attributes:
        intent_name: Declared intent name
        invocation_phase: Collecting or Fulfilling
        slots: Slot name -> value (None or absent when not yet collected)
        session_attributes: Opaque mapping (or None) echoed back in every directive
        user_id: Platform user id, if sent
        bot_name: Name of the calling bot, if sent
        input_transcript: Raw user utterance, if sent
    """
    intent_name: str
    invocation_phase: InvocationPhase
    slots: Dict[str, Optional[str]] = field(default_factory=dict)
    session_attributes: Optional[Dict[str, Any]] = None
    user_id: Optional[str] = None
    bot_name: Optional[str] = None
    input_transcript: Optional[str] = None

    @classmethod
    def from_event(cls, event: Any) -> "IntentRequest":
        """
        Build a request from an incoming event.

        Accepts the flat shape ({invocationPhase, intentName, slots,
        sessionAttributes}) and the hosted platform's event shape
        ({invocationSource, currentIntent: {name, slots}, sessionAttributes,
        userId, bot: {name}, inputTranscript}).

        Raises:
            ContractViolation: If the event does not match either shape
        """
        if not isinstance(event, Mapping):
            raise ContractViolation("Event must be a JSON object")

        current_intent = event.get("currentIntent")
        if current_intent is not None:
            if not isinstance(current_intent, Mapping):
                raise ContractViolation("currentIntent must be an object")
            intent_name = current_intent.get("name")
            raw_slots = current_intent.get("slots")
            raw_phase = event.get("invocationSource")
        else:
            intent_name = event.get("intentName")
            raw_slots = event.get("slots")
            raw_phase = event.get("invocationPhase")

        if not isinstance(intent_name, str) or not intent_name:
            raise ContractViolation("Missing intent name")

        bot = event.get("bot")
        return cls(
            intent_name=intent_name,
            invocation_phase=InvocationPhase.parse(raw_phase),
            slots=_parse_slots(raw_slots),
            session_attributes=_parse_session_attributes(event.get("sessionAttributes")),
            user_id=event.get("userId"),
            bot_name=bot.get("name") if isinstance(bot, Mapping) else None,
            input_transcript=event.get("inputTranscript"),
        )


def _parse_slots(raw_slots: Any) -> Dict[str, Optional[str]]:
    if raw_slots is None:
        return {}
    if not isinstance(raw_slots, Mapping):
        raise ContractViolation("slots must be an object")
    slots: Dict[str, Optional[str]] = {}
    for name, value in raw_slots.items():
        if value is not None and not isinstance(value, str):
            raise ContractViolation(f"Slot {name} must be a string or null, got {type(value).__name__}")
        slots[name] = value
    return slots


def _parse_session_attributes(raw: Any) -> Optional[Dict[str, Any]]:
    if raw is None:
        return None
    if not isinstance(raw, Mapping):
        raise ContractViolation("sessionAttributes must be an object or null")
    return dict(raw)


@dataclass(frozen=True)
class Directive:
    """
    Dialog directive returned to the platform.

    `dialog_action` holds the variant fields already in wire form
    (type, intentName, slots, slotToElicit, fulfillmentState, message).
    """
    session_attributes: Optional[Dict[str, Any]]
    dialog_action: Dict[str, Any]

    @property
    def action_type(self) -> DialogActionType:
        return DialogActionType(self.dialog_action["type"])

    def to_dict(self) -> Dict[str, Any]:
        return {
            "sessionAttributes": self.session_attributes,
            "dialogAction": self.dialog_action,
        }
