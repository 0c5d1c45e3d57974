"""
Dispatcher

Routes an IntentRequest to the handler for its intent and turns the
validation outcome into a directive.

Collecting: validate; re-elicit the first invalid slot (cleared) or delegate.
Fulfilling: close with a confirmation message. Slots are not re-validated
here; collecting-phase validation is trusted to have cleared them.
"""
import logging
from typing import Callable, Dict, Optional

from .config import VehicleInventory, VehicleValueConfig, YearClock, config as default_config
from .config import current_year_clock, load_inventory
from .data_types import (
    SLOT_VEHICLE_MAKE,
    SLOT_VEHICLE_MODEL,
    SLOT_VEHICLE_YEAR,
    Directive,
    FulfillmentState,
    IntentRequest,
    InvocationPhase,
    Message,
)
from .errors import UnsupportedIntentError
from .response import close, delegate, elicit_slot
from .validation import DialogValidator, build_vehicle_rules

logger = logging.getLogger(__name__)

IntentHandler = Callable[[IntentRequest], Directive]


def fulfillment_message(slots: Dict[str, Optional[str]]) -> Message:
    year = slots.get(SLOT_VEHICLE_YEAR)
    make = slots.get(SLOT_VEHICLE_MAKE)
    model = slots.get(SLOT_VEHICLE_MODEL)
    return Message(f"Your {year} {make} {model} vehicle has been validated and ready for trade-in.")


class Dispatcher:
    """
    Maps intent names to handlers.

    Args:
        config: Configuration (intent name, timezone, year bound, inventory path)
        inventory: Inventory to validate against (loaded from config if omitted)
        clock: Returns the current year (timezone-aware clock if omitted)
    """

    def __init__(
        self,
        config: Optional[VehicleValueConfig] = None,
        inventory: Optional[VehicleInventory] = None,
        clock: Optional[YearClock] = None,
    ):
        self.config = config or default_config
        self.inventory = inventory or load_inventory(self.config.INVENTORY_PATH)
        self.clock = clock or current_year_clock(self.config.TIMEZONE)
        self._handlers: Dict[str, IntentHandler] = {
            self.config.INTENT_NAME: self.vehicle_value,
        }

    @property
    def intent_names(self):
        return sorted(self._handlers)

    def dispatch(self, request: IntentRequest) -> Directive:
        """
        Called when the user specifies an intent for this hook.

        Raises:
            UnsupportedIntentError: If no handler is registered for the intent
        """
        logger.info(
            f"dispatch user_id={request.user_id}, intent_name={request.intent_name}",
            extra={"user_id": request.user_id, "intent_name": request.intent_name},
        )
        handler = self._handlers.get(request.intent_name)
        if handler is None:
            raise UnsupportedIntentError(f"Intent {request.intent_name} is not supported")
        return handler(request)

    def validator(self) -> DialogValidator:
        """Validator for the current year; the clock is read on every call."""
        rules = build_vehicle_rules(
            self.inventory,
            current_year=self.clock(),
            min_year_exclusive=self.config.MIN_VEHICLE_YEAR_EXCLUSIVE,
        )
        return DialogValidator(rules)

    def vehicle_value(self, request: IntentRequest) -> Directive:
        """Dialog management and fulfillment for the vehicle value intent."""
        slots = dict(request.slots)
        session_attributes = request.session_attributes

        if request.invocation_phase is InvocationPhase.COLLECTING:
            outcome = self.validator().validate(slots)
            if not outcome.is_valid:
                logger.info(
                    f"Re-eliciting {outcome.violated_slot}",
                    extra={"violated_slot": outcome.violated_slot},
                )
                slots[outcome.violated_slot] = None
                return elicit_slot(
                    session_attributes,
                    request.intent_name,
                    slots,
                    outcome.violated_slot,
                    outcome.message,
                )
            return delegate(session_attributes, slots)

        # Fulfilling: the platform only gets here once every slot is collected.
        # A real deployment would call a valuation backend at this point.
        return close(session_attributes, FulfillmentState.FULFILLED, fulfillment_message(slots))


_default_dispatcher: Optional[Dispatcher] = None


def get_dispatcher() -> Dispatcher:
    """
    Get the process-wide Dispatcher built from the global config.

    Returns:
        Singleton Dispatcher instance
    """
    global _default_dispatcher
    if _default_dispatcher is None:
        _default_dispatcher = Dispatcher()
    return _default_dispatcher


def dispatch(request: IntentRequest, dispatcher: Optional[Dispatcher] = None) -> Directive:
    """Dispatch with the given dispatcher, or the process-wide one."""
    return (dispatcher or get_dispatcher()).dispatch(request)
