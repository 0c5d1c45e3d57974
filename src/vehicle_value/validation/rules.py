"""
Vehicle validation rules.

Each rule targets one slot and is evaluated only when that slot holds a
value. Rules are returned in priority order: Year -> Make -> Model.
"""
import logging
import re
from dataclasses import dataclass
from typing import Callable, List, Mapping, Optional, Sequence

from ..config.inventory import VehicleInventory
from ..data_types import SLOT_VEHICLE_MAKE, SLOT_VEHICLE_MODEL, SLOT_VEHICLE_YEAR

logger = logging.getLogger(__name__)

DEFAULT_MIN_YEAR_EXCLUSIVE = 1991

SlotValues = Mapping[str, Optional[str]]


@dataclass(frozen=True)
class ValidationRule:
    """
    Validation rule bound to a single slot.

    Attributes:
        slot_name: Slot the rule validates
        check: Predicate over the slot's raw value
        describe: Builds the remediation message from the failing value and
            the current slots (siblings may enrich the message)
    """
    slot_name: str
    check: Callable[[str], bool]
    describe: Callable[[str, SlotValues], str]


_YEAR_PATTERN = re.compile(r"[+-]?[0-9]+")


def parse_year(value: str) -> Optional[int]:
    """Parse a year slot value; None unless it is ASCII digits with an optional sign."""
    if not isinstance(value, str):
        return None
    text = value.strip()
    if not _YEAR_PATTERN.fullmatch(text):
        return None
    return int(text)


def is_valid_year(value: str, current_year: int, min_year_exclusive: int = DEFAULT_MIN_YEAR_EXCLUSIVE) -> bool:
    # Valid years: min_year_exclusive + 1 -> current_year
    year = parse_year(value)
    return year is not None and min_year_exclusive < year <= current_year


def suggestion_list(values: Sequence[str]) -> str:
    """
    Render allow-list values for a prompt.

    Examples:
        >>> suggestion_list(["ford", "honda", "dodge"])
        'Ford, Honda, or Dodge'
    """
    titled = [v.title() for v in values]
    if len(titled) <= 2:
        return " or ".join(titled)
    return ", ".join(titled[:-1]) + ", or " + titled[-1]


def _year_rule(current_year: int, min_year_exclusive: int) -> ValidationRule:
    def check(value: str) -> bool:
        return is_valid_year(value, current_year, min_year_exclusive)

    def describe(value: str, slots: SlotValues) -> str:
        return (
            f"We do not have any vehicles in our inventory for the year {value}. "
            f"Please try a year newer than {min_year_exclusive} and not a date in the future."
        )

    return ValidationRule(SLOT_VEHICLE_YEAR, check, describe)


def _make_rule(inventory: VehicleInventory) -> ValidationRule:
    def check(value: str) -> bool:
        matched = inventory.has_make(value)
        logger.debug(f"[{value}] matches known vehicle makes? {matched}")
        return matched

    def describe(value: str, slots: SlotValues) -> str:
        return (
            f"We do not have a {value} vehicle make in our inventory, can you provide "
            f"a different vehicle make such as {suggestion_list(inventory.makes)}?"
        )

    return ValidationRule(SLOT_VEHICLE_MAKE, check, describe)


def _model_rule(inventory: VehicleInventory) -> ValidationRule:
    def check(value: str) -> bool:
        matched = inventory.has_model(value)
        logger.debug(f"[{value}] matches known vehicle model? {matched}")
        return matched

    def describe(value: str, slots: SlotValues) -> str:
        siblings = " ".join(
            v for v in (slots.get(SLOT_VEHICLE_YEAR), slots.get(SLOT_VEHICLE_MAKE)) if v
        )
        matching = f" matching a {siblings}" if siblings else ""
        return (
            f"We do not have a {value} vehicle model in our inventory{matching}, can you provide "
            f"a different vehicle model such as {suggestion_list(inventory.models)}?"
        )

    return ValidationRule(SLOT_VEHICLE_MODEL, check, describe)


def build_vehicle_rules(
    inventory: VehicleInventory,
    current_year: int,
    min_year_exclusive: int = DEFAULT_MIN_YEAR_EXCLUSIVE,
) -> List[ValidationRule]:
    """
    Build the vehicle rules in priority order.

    Args:
        inventory: Allowed makes and models
        current_year: Newest acceptable vehicle year
        min_year_exclusive: Years must be strictly newer than this

    Returns:
        [year rule, make rule, model rule]
    """
    return [
        _year_rule(current_year, min_year_exclusive),
        _make_rule(inventory),
        _model_rule(inventory),
    ]
