"""
Unit tests for vehicle_value.response.

Checks the wire shape of each directive and session attribute pass-through.
"""
import pytest

from vehicle_value.data_types import FulfillmentState, Message
from vehicle_value.response import close, confirm_intent, delegate, elicit_slot

SESSION = {"tradeInId": "abc-123", "channel": "web"}
SLOTS = {"VehicleYear": "2015", "VehicleMake": "Honda", "VehicleModel": None}
MESSAGE = Message("Which year?")


def _all_directives(session):
    return [
        elicit_slot(session, "VehicleValue", SLOTS, "VehicleYear", MESSAGE),
        confirm_intent(session, "VehicleValue", SLOTS, MESSAGE),
        delegate(session, SLOTS),
        close(session, FulfillmentState.FULFILLED, MESSAGE),
    ]


class TestDirectiveShapes:
    """Tests for the four dialog actions."""

    def test_elicit_slot(self):
        directive = elicit_slot(SESSION, "VehicleValue", SLOTS, "VehicleYear", MESSAGE)
        assert directive.to_dict() == {
            "sessionAttributes": SESSION,
            "dialogAction": {
                "type": "ElicitSlot",
                "intentName": "VehicleValue",
                "slots": SLOTS,
                "slotToElicit": "VehicleYear",
                "message": {"contentType": "PlainText", "content": "Which year?"},
            },
        }

    def test_confirm_intent(self):
        directive = confirm_intent(SESSION, "VehicleValue", SLOTS, MESSAGE)
        assert directive.to_dict()["dialogAction"] == {
            "type": "ConfirmIntent",
            "intentName": "VehicleValue",
            "slots": SLOTS,
            "message": {"contentType": "PlainText", "content": "Which year?"},
        }

    def test_delegate(self):
        directive = delegate(SESSION, SLOTS)
        assert directive.to_dict()["dialogAction"] == {"type": "Delegate", "slots": SLOTS}

    def test_close(self):
        directive = close(SESSION, FulfillmentState.FAILED, MESSAGE)
        assert directive.to_dict()["dialogAction"] == {
            "type": "Close",
            "fulfillmentState": "Failed",
            "message": {"contentType": "PlainText", "content": "Which year?"},
        }

    def test_close_accepts_state_string(self):
        assert close(SESSION, "Fulfilled", MESSAGE).dialog_action["fulfillmentState"] == "Fulfilled"

    def test_close_rejects_unknown_state(self):
        with pytest.raises(ValueError):
            close(SESSION, "Done", MESSAGE)

    def test_message_mapping_accepted(self):
        directive = close(SESSION, "Fulfilled", {"contentType": "PlainText", "content": "Bye"})
        assert directive.dialog_action["message"] == {"contentType": "PlainText", "content": "Bye"}


class TestBuilderProperties:
    """Tests for purity and pass-through."""

    def test_idempotent(self):
        assert _all_directives(SESSION) == _all_directives(SESSION)

    @pytest.mark.parametrize("session", [None, {}, SESSION, {"nested": {"a": [1, 2]}}])
    def test_session_attributes_pass_through(self, session):
        for directive in _all_directives(session):
            assert directive.to_dict()["sessionAttributes"] == session

    def test_null_session_attributes_stay_null(self):
        for directive in _all_directives(None):
            assert directive.to_dict()["sessionAttributes"] is None

    def test_slots_copied(self):
        slots = dict(SLOTS)
        directive = delegate(SESSION, slots)
        slots["VehicleYear"] = None
        assert directive.dialog_action["slots"]["VehicleYear"] == "2015"

    def test_action_type(self):
        kinds = [d.action_type.value for d in _all_directives(SESSION)]
        assert kinds == ["ElicitSlot", "ConfirmIntent", "Delegate", "Close"]
