"""
Vehicle Value - Error Classes

Custom exceptions for the code hook's transport boundary.

Slot validation failures are not exceptions; they come back as
ValidationOutcome values. These exceptions cover requests the hook cannot
handle at all:
- ContractViolation: Incoming event does not match the request contract
- UnsupportedIntentError: Intent is not handled by this hook
"""


class ContractViolation(Exception):
    """Raised when an incoming event violates the request contract."""
    pass


class UnsupportedIntentError(Exception):
    """Raised when intent is not supported."""
    pass
