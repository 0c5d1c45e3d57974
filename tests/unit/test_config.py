"""
Unit tests for vehicle_value.config: environment settings, inventory loading and clocks.
"""
from datetime import datetime, timezone

import pytest

from vehicle_value.config import (
    VehicleInventory,
    VehicleValueConfig,
    current_year_clock,
    fixed_year_clock,
    load_inventory,
)
from vehicle_value.config.clock import now_in_timezone


class TestVehicleValueConfig:
    """Tests for environment-driven configuration."""

    def test_defaults(self, monkeypatch):
        for var in ("VEHICLE_VALUE_INTENT", "VEHICLE_VALUE_TIMEZONE", "MIN_VEHICLE_YEAR_EXCLUSIVE", "INVENTORY_PATH"):
            monkeypatch.delenv(var, raising=False)
        cfg = VehicleValueConfig.from_env()
        assert cfg.INTENT_NAME == "VehicleValue"
        assert cfg.TIMEZONE == "America/New_York"
        assert cfg.MIN_VEHICLE_YEAR_EXCLUSIVE == 1991
        assert cfg.INVENTORY_PATH is None

    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv("VEHICLE_VALUE_INTENT", "TradeIn")
        monkeypatch.setenv("VEHICLE_VALUE_TIMEZONE", "UTC")
        monkeypatch.setenv("MIN_VEHICLE_YEAR_EXCLUSIVE", "2000")
        monkeypatch.setenv("API_DEBUG", "true")
        cfg = VehicleValueConfig.from_env()
        assert cfg.INTENT_NAME == "TradeIn"
        assert cfg.TIMEZONE == "UTC"
        assert cfg.MIN_VEHICLE_YEAR_EXCLUSIVE == 2000
        assert cfg.API_DEBUG is True

    def test_env_read_per_instance(self, monkeypatch):
        monkeypatch.setenv("VEHICLE_VALUE_INTENT", "TradeIn")
        cfg = VehicleValueConfig()
        assert cfg.INTENT_NAME == "TradeIn"
        assert "INTENT_NAME" in vars(cfg)
        assert not hasattr(VehicleValueConfig, "INTENT_NAME")

    def test_summary(self):
        summary = VehicleValueConfig().summary()
        assert "Vehicle Value Configuration" in summary
        assert "Timezone:" in summary


class TestInventory:
    """Tests for inventory loading."""

    def test_bundled_inventory(self):
        inventory = load_inventory()
        assert inventory.makes == ("ford", "honda", "chevrolet", "dodge")
        assert inventory.models == ("explorer", "civic", "malibu", "dakota")

    def test_load_from_path(self, tmp_path):
        path = tmp_path / "inventory.yaml"
        path.write_text("inventory:\n  makes: [Toyota, Kia]\n  models: [Corolla]\n", encoding="utf-8")
        inventory = load_inventory(str(path))
        assert inventory.makes == ("toyota", "kia")
        assert inventory.has_make("KIA")
        assert inventory.has_model("corolla")

    def test_top_level_sections_accepted(self):
        inventory = VehicleInventory.from_dict({"makes": ["ford"], "models": ["explorer"]})
        assert inventory.has_make("Ford")

    def test_duplicates_collapsed(self):
        inventory = VehicleInventory.from_values(["Ford", "ford ", "Honda"], ["civic"])
        assert inventory.makes == ("ford", "honda")

    @pytest.mark.parametrize("data", [
        {"inventory": {"makes": [], "models": ["civic"]}},
        {"inventory": {"makes": ["ford"]}},
        {"inventory": {"makes": ["ford"], "models": [1]}},
        {"inventory": ["ford"]},
    ])
    def test_malformed_inventory(self, data):
        with pytest.raises(ValueError):
            VehicleInventory.from_dict(data)


class TestClock:
    """Tests for year clocks."""

    def test_fixed_clock(self):
        assert fixed_year_clock(2020)() == 2020

    def test_current_year_clock(self):
        year = current_year_clock("America/New_York")()
        assert abs(year - datetime.now(timezone.utc).year) <= 1

    def test_now_in_timezone_is_aware(self):
        now = now_in_timezone("America/New_York")
        assert now.tzinfo is not None
