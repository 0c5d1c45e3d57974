#!/usr/bin/env python3
"""
Command-line runner for the vehicle value code hook.

Runs one dialog turn from an event JSON file (or stdin) and prints the
directive. Useful for manual testing against sample platform events.

Usage:
    python -m vehicle_value.cli event.json
    echo '{"invocationPhase": "Collecting", ...}' | python -m vehicle_value.cli -
    python -m vehicle_value.cli event.json --phase Fulfilling --slot VehicleYear=2015
"""
import argparse
import json
import sys
from typing import Any, Dict, List, Optional, Sequence

from vehicle_value.config import config, fixed_year_clock
from vehicle_value.data_types import IntentRequest, InvocationPhase
from vehicle_value.dispatch import Dispatcher
from vehicle_value.errors import ContractViolation, UnsupportedIntentError
from vehicle_value.logging_config import setup_logging

EXIT_CONTRACT_ERROR = 2


def _parse_slot_overrides(pairs: Sequence[str]) -> Dict[str, Optional[str]]:
    overrides: Dict[str, Optional[str]] = {}
    for pair in pairs:
        name, sep, value = pair.partition("=")
        if not sep or not name:
            raise argparse.ArgumentTypeError(f"Expected NAME=VALUE, got {pair!r}")
        # An empty value clears the slot
        overrides[name] = value or None
    return overrides


def _read_event(source: str) -> Any:
    if source == "-":
        return json.load(sys.stdin)
    with open(source, encoding="utf-8") as f:
        return json.load(f)


def run_turn(request: IntentRequest, phase: Optional[str], slot_overrides: Dict[str, Optional[str]],
             dispatcher: Dispatcher) -> Dict[str, Any]:
    """Apply overrides to request and dispatch it."""
    slots = dict(request.slots)
    slots.update(slot_overrides)
    request = IntentRequest(
        intent_name=request.intent_name,
        invocation_phase=InvocationPhase.parse(phase) if phase else request.invocation_phase,
        slots=slots,
        session_attributes=request.session_attributes,
        user_id=request.user_id,
        bot_name=request.bot_name,
        input_transcript=request.input_transcript,
    )
    return dispatcher.dispatch(request).to_dict()


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Run one vehicle value dialog turn and print the directive",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument(
        "event",
        help="Path to an event JSON file, or '-' for stdin"
    )
    parser.add_argument(
        "--phase",
        choices=[p.value for p in InvocationPhase],
        help="Override the invocation phase"
    )
    parser.add_argument(
        "--slot",
        action="append",
        default=[],
        metavar="NAME=VALUE",
        help="Override a slot value (repeatable; empty VALUE clears the slot)"
    )
    parser.add_argument(
        "--year",
        type=int,
        help="Pretend the current year is YEAR"
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Log level for diagnostics (default: WARNING)"
    )
    args = parser.parse_args(argv)

    setup_logging('vehicle_value', args.log_level, 'pretty')

    try:
        overrides = _parse_slot_overrides(args.slot)
    except argparse.ArgumentTypeError as e:
        parser.error(str(e))

    dispatcher = Dispatcher(config, clock=fixed_year_clock(args.year) if args.year is not None else None)
    try:
        request = IntentRequest.from_event(_read_event(args.event))
        result = run_turn(request, args.phase, overrides, dispatcher)
    except (ContractViolation, UnsupportedIntentError, json.JSONDecodeError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_CONTRACT_ERROR

    print(json.dumps(result, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
