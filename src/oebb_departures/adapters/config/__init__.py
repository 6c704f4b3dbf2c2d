"""Configuration adapters."""

from oebb_departures.adapters.config.app_config import AppConfig
from oebb_departures.adapters.config.button_configuration_loader import (
    ButtonConfigurationLoader,
)

__all__ = ["AppConfig", "ButtonConfigurationLoader"]
