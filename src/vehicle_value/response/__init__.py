"""
Response building for dialog directives.

Pure constructors for the four dialog actions.
"""

from .builder import close, confirm_intent, delegate, elicit_slot

__all__ = ["elicit_slot", "confirm_intent", "delegate", "close"]
