"""
Dialog Validator

Applies validation rules to candidate slots in declared order and reports
the first failure. A rule whose slot holds no value is skipped.
"""
import logging
from typing import Iterable, List, Mapping, Optional

from ..data_types import ValidationOutcome
from .rules import ValidationRule

logger = logging.getLogger(__name__)


def _slot_present(value: Optional[str]) -> bool:
    return value is not None and value != ""


class DialogValidator:
    """First-failure-wins validator over an ordered list of rules."""

    def __init__(self, rules: Iterable[ValidationRule]):
        self._rules: List[ValidationRule] = list(rules)

    def validate(self, candidate_slots: Mapping[str, Optional[str]]) -> ValidationOutcome:
        """
        Validate candidate slots.

        Args:
            candidate_slots: Slot name -> current value (None or absent if not collected)

        Returns:
            ValidationOutcome.valid() if no rule fails, otherwise an invalid
            outcome naming the first failing rule's slot
        """
        for rule in self._rules:
            value = candidate_slots.get(rule.slot_name)
            if not _slot_present(value):
                continue
            if not rule.check(value):
                logger.debug(f"Slot {rule.slot_name} failed validation", extra={"slot": rule.slot_name})
                return ValidationOutcome.invalid(rule.slot_name, rule.describe(value, candidate_slots))
        return ValidationOutcome.valid()
