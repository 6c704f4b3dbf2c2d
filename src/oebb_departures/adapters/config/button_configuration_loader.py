"""Button configuration loader."""

import logging

from oebb_departures.adapters.config.app_config import AppConfig
from oebb_departures.domain.models.button_configuration import ButtonConfiguration
from oebb_departures.domain.models.departure_settings import DepartureSettings
from oebb_departures.domain.models.display_field import DisplayField

logger = logging.getLogger(__name__)

DEFAULT_BUTTON_ID = "default"

# TOML buttons may use snake_case keys; settings payloads use the host's camelCase
SNAKE_TO_CAMEL = {
    "station_id": "stationId",
    "refresh_interval": "refreshInterval",
    "cycle_interval": "cycleInterval",
    "enable_scrolling": "enableScrolling",
    "departure_count": "departureCount",
    "train_filter": "trainFilter",
}


class ButtonConfigurationLoader:
    """Loads display button configurations from app config."""

    @staticmethod
    def load(config: AppConfig) -> list[ButtonConfiguration]:
        """Load button configurations.

        Buttons come from the [[buttons]] tables of the TOML file; without any,
        a single "default" button is built from the environment settings. Keys
        missing from a button fall back to the environment settings.

        Raises:
            ValueError: If a button selects an unknown line field.
        """
        buttons_data = config.get_buttons_config()
        defaults = config.default_button_payload()

        if not buttons_data:
            settings = DepartureSettings.from_payload(defaults)
            return [ButtonConfiguration(instance_id=DEFAULT_BUTTON_ID, settings=settings)]

        button_configs: list[ButtonConfiguration] = []
        for index, button_data in enumerate(buttons_data):
            instance_id = str(button_data.get("id") or f"button-{index + 1}")
            overrides = {
                SNAKE_TO_CAMEL.get(key, key): value
                for key, value in button_data.items()
                if key != "id"
            }
            payload = {**defaults, **overrides}
            for line_key in ("line1", "line2", "line3"):
                value = payload.get(line_key)
                if value is not None and value not in DisplayField.names():
                    raise ValueError(
                        f"Button '{instance_id}' has unknown {line_key} field {value!r}"
                    )
            settings = DepartureSettings.from_payload(payload)
            button_configs.append(ButtonConfiguration(instance_id=instance_id, settings=settings))
            logger.debug(f"Loaded button {instance_id} for station {settings.station_id}")

        return button_configs
