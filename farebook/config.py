"""Configuration for the fare booking engine."""

import logging
import os
from typing import Dict, Optional

from dotenv import load_dotenv

from farebook.models import FareParameters, TransportMode

load_dotenv()


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


class Settings:
    """Application settings."""

    TITLE = "FareBook Booking Engine"
    VERSION = "1.0.0"

    # Logging Settings
    LOG_LEVEL = os.getenv("FAREBOOK_LOG_LEVEL", "INFO")
    LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

    # Booking policy
    # An unknown route books a free ticket unless rejection is switched on.
    REJECT_UNKNOWN_ROUTES = _env_flag("FAREBOOK_REJECT_UNKNOWN_ROUTES", False)
    ENFORCE_UNIQUE_TICKET_IDS = _env_flag("FAREBOOK_ENFORCE_UNIQUE_TICKET_IDS", True)

    # price = distance * rate + surcharge
    FARE_PARAMETERS: Dict[TransportMode, FareParameters] = {
        TransportMode.AIRPLANE: FareParameters(rate=0.3, surcharge=100.0),
        TransportMode.TRAIN: FareParameters(rate=0.2, surcharge=50.0),
        TransportMode.BUS: FareParameters(rate=0.1, surcharge=30.0),
    }

    @classmethod
    def get_fare_parameters(cls, mode) -> FareParameters:
        """
        Get the pricing constants for a transport mode.

        Args:
            mode: TransportMode or anything TransportMode.parse accepts

        Returns:
            FareParameters for the mode
        """
        return cls.FARE_PARAMETERS[TransportMode.parse(mode)]


settings = Settings()


def configure_logging(level: Optional[str] = None) -> None:
    """Install a basic root handler at the configured level."""
    logging.basicConfig(
        level=(level or settings.LOG_LEVEL).upper(),
        format=settings.LOG_FORMAT,
    )
