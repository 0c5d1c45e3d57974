"""
Vehicle Value Configuration

Centralized configuration for the code hook, its HTTP development server and logging.
All settings can be overridden via environment variables.
"""
import os
from typing import Optional


class VehicleValueConfig:
    """
    Central configuration for the vehicle value code hook.

    All settings have sensible defaults and can be overridden via environment variables.

    Example:
        >>> from vehicle_value.config import config
        >>> print(config.TIMEZONE)
        America/New_York

        # Override via environment:
        >>> os.environ["VEHICLE_VALUE_TIMEZONE"] = "UTC"
        >>> config = VehicleValueConfig.from_env()
        >>> print(config.TIMEZONE)
        UTC
    """

    def __init__(self):
        # ====================================================================
        # Dialog Settings
        # ====================================================================

        self.INTENT_NAME: str = os.getenv("VEHICLE_VALUE_INTENT", "VehicleValue")
        """Intent name handled by this hook"""

        self.TIMEZONE: str = os.getenv("VEHICLE_VALUE_TIMEZONE", "America/New_York")
        """Timezone used to decide the current year for the year rule"""

        self.MIN_VEHICLE_YEAR_EXCLUSIVE: int = int(os.getenv("MIN_VEHICLE_YEAR_EXCLUSIVE", "1991"))
        """Vehicle years must be strictly newer than this"""

        self.INVENTORY_PATH: Optional[str] = os.getenv("INVENTORY_PATH")
        """Optional: inventory YAML path (defaults to vehicle_value/store/inventory.yaml)"""

        # ====================================================================
        # Logging Settings
        # ====================================================================

        self.LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
        """Logging level: DEBUG, INFO, WARNING, ERROR, CRITICAL"""

        self.LOG_FORMAT: str = os.getenv("LOG_FORMAT", "json")
        """Log format: 'json' (structured) or 'pretty' (readable)"""

        self.LOG_FILE: Optional[str] = os.getenv("LOG_FILE")
        """Optional: Write logs to file (e.g., '/var/log/vehicle_value/api.log')"""

        self.ENABLE_REQUEST_LOGGING: bool = os.getenv(
            "ENABLE_REQUEST_LOGGING", "true").lower() == "true"
        """Log all HTTP requests/responses with timing"""

        # ====================================================================
        # API Settings
        # ====================================================================

        self.API_PORT: int = int(os.getenv("PORT", "9002"))
        """Port for Flask development server"""

        self.API_HOST: str = os.getenv("HOST", "0.0.0.0")
        """Host for Flask development server"""

        self.API_DEBUG: bool = os.getenv("API_DEBUG", "false").lower() == "true"
        """Enable Flask debug mode (DO NOT use in production)"""

    # ========================================================================
    # Helper Methods
    # ========================================================================

    @classmethod
    def from_env(cls):
        """
        Create config from environment variables.

        Returns:
            New VehicleValueConfig instance with current environment values
        """
        return cls()

    def summary(self) -> str:
        """
        Get configuration summary as formatted string.

        Returns:
            Multi-line string with all config values
        """
        lines = [
            "=" * 60,
            "Vehicle Value Configuration",
            "=" * 60,
            "",
            "Dialog:",
            f"  Intent:             {self.INTENT_NAME}",
            f"  Timezone:           {self.TIMEZONE}",
            f"  Years newer than:   {self.MIN_VEHICLE_YEAR_EXCLUSIVE}",
            f"  Inventory:          {self.INVENTORY_PATH or 'bundled'}",
            "",
            "API:",
            f"  Host:               {self.API_HOST}",
            f"  Port:               {self.API_PORT}",
            f"  Debug:              {'✅ Enabled' if self.API_DEBUG else '❌ Disabled'}",
            "",
            "Logging:",
            f"  Level:              {self.LOG_LEVEL}",
            f"  Format:             {self.LOG_FORMAT}",
            f"  File:               {self.LOG_FILE or 'None'}",
            f"  Request Logging:    {'✅ Enabled' if self.ENABLE_REQUEST_LOGGING else '❌ Disabled'}",
            "=" * 60,
        ]
        return "\n".join(lines)


# Global config instance
config = VehicleValueConfig()
