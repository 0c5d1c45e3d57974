"""
Inventory loading.

Loads the make/model allow-lists from inventory.yaml. The validator only
sees the resulting VehicleInventory, so another inventory can be injected
without touching the rules.
"""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterable, Optional, Tuple
import yaml


DEFAULT_INVENTORY_PATH = Path(__file__).resolve().parent.parent / "store" / "inventory.yaml"

# Cache of loaded inventories keyed by resolved path
_INVENTORY_CACHE: Dict[str, "VehicleInventory"] = {}


@dataclass(frozen=True)
class VehicleInventory:
    """
    Immutable inventory allow-lists.

    Values are stored lower-cased; tuples keep the configured order so
    suggestion messages stay stable.
    """
    makes: Tuple[str, ...]
    models: Tuple[str, ...]

    @classmethod
    def from_values(cls, makes: Iterable[str], models: Iterable[str]) -> "VehicleInventory":
        return cls(makes=_normalize(makes), models=_normalize(models))

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "VehicleInventory":
        """
        Create a VehicleInventory from a dictionary (as loaded from YAML).

        Raises:
            ValueError: If makes or models are missing or not lists of strings
        """
        section = data.get("inventory", data) if isinstance(data, dict) else None
        if not isinstance(section, dict):
            raise ValueError("Inventory must be a mapping with 'makes' and 'models'")
        makes = section.get("makes")
        models = section.get("models")
        for key, values in (("makes", makes), ("models", models)):
            if not isinstance(values, list) or not values:
                raise ValueError(f"Inventory '{key}' must be a non-empty list")
            if not all(isinstance(v, str) and v.strip() for v in values):
                raise ValueError(f"Inventory '{key}' must contain only non-empty strings")
        return cls.from_values(makes, models)

    def has_make(self, make: str) -> bool:
        return make.lower() in self.makes

    def has_model(self, model: str) -> bool:
        return model.lower() in self.models


def _normalize(values: Iterable[str]) -> Tuple[str, ...]:
    seen = []
    for value in values:
        v = value.strip().lower()
        if v not in seen:
            seen.append(v)
    return tuple(seen)


def load_inventory(path: Optional[str] = None) -> VehicleInventory:
    """Load the inventory from a YAML file (bundled inventory.yaml by default)."""
    resolved = Path(path).resolve() if path else DEFAULT_INVENTORY_PATH
    key = str(resolved)
    cached = _INVENTORY_CACHE.get(key)
    if cached is not None:
        return cached
    with resolved.open(encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}
    inventory = VehicleInventory.from_dict(raw)
    _INVENTORY_CACHE[key] = inventory
    return inventory
