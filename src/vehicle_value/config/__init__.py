"""
Config package.

Exposes the environment-driven configuration plus the inventory and clock
submodules.
"""

from .config import config, VehicleValueConfig
from .inventory import VehicleInventory, load_inventory
from .clock import current_year_clock, fixed_year_clock, YearClock

__all__ = [
    "config",
    "VehicleValueConfig",
    "VehicleInventory",
    "load_inventory",
    "current_year_clock",
    "fixed_year_clock",
    "YearClock",
]
