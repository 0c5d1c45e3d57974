"""
Validation layer for slot values.

Rules are plain values evaluated in priority order; failures come back as
ValidationOutcome values, never exceptions.
"""
from .rules import ValidationRule, build_vehicle_rules, is_valid_year, parse_year
from .validator import DialogValidator

__all__ = ["ValidationRule", "build_vehicle_rules", "is_valid_year", "parse_year", "DialogValidator"]
