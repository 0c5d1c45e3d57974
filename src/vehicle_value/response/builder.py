"""
Response Builder

Helpers to build directives matching the structure of the platform's dialog
actions. Constructors only assemble values: no validation, no I/O.
"""
from typing import Any, Dict, Mapping, Optional, Union

from ..data_types import DialogActionType, Directive, FulfillmentState, Message

MessageLike = Union[Message, Mapping[str, str]]


def _message_dict(message: MessageLike) -> Dict[str, str]:
    if isinstance(message, Message):
        return message.to_dict()
    return {"contentType": message["contentType"], "content": message["content"]}


def _slots_copy(slots: Mapping[str, Optional[str]]) -> Dict[str, Optional[str]]:
    return dict(slots)


def elicit_slot(
    session_attributes: Optional[Dict[str, Any]],
    intent_name: str,
    slots: Mapping[str, Optional[str]],
    slot_to_elicit: str,
    message: MessageLike,
) -> Directive:
    """
    Re-prompt the user for exactly one slot.

    The caller clears the slot's value before building this directive.
    """
    return Directive(
        session_attributes=session_attributes,
        dialog_action={
            "type": DialogActionType.ELICIT_SLOT.value,
            "intentName": intent_name,
            "slots": _slots_copy(slots),
            "slotToElicit": slot_to_elicit,
            "message": _message_dict(message),
        },
    )


def confirm_intent(
    session_attributes: Optional[Dict[str, Any]],
    intent_name: str,
    slots: Mapping[str, Optional[str]],
    message: MessageLike,
) -> Directive:
    """Ask the user to confirm the intent before fulfillment."""
    return Directive(
        session_attributes=session_attributes,
        dialog_action={
            "type": DialogActionType.CONFIRM_INTENT.value,
            "intentName": intent_name,
            "slots": _slots_copy(slots),
            "message": _message_dict(message),
        },
    )


def delegate(session_attributes: Optional[Dict[str, Any]], slots: Mapping[str, Optional[str]]) -> Directive:
    """Hand control back to the platform's own slot collection."""
    return Directive(
        session_attributes=session_attributes,
        dialog_action={
            "type": DialogActionType.DELEGATE.value,
            "slots": _slots_copy(slots),
        },
    )


def close(
    session_attributes: Optional[Dict[str, Any]],
    fulfillment_state: Union[FulfillmentState, str],
    message: MessageLike,
) -> Directive:
    """
    Terminal response ending the conversation.

    Raises:
        ValueError: If fulfillment_state is not Fulfilled or Failed
    """
    state = FulfillmentState(fulfillment_state)
    return Directive(
        session_attributes=session_attributes,
        dialog_action={
            "type": DialogActionType.CLOSE.value,
            "fulfillmentState": state.value,
            "message": _message_dict(message),
        },
    )
