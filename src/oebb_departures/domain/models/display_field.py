"""Field selectors for the three display lines."""

from enum import StrEnum


class DisplayField(StrEnum):
    """Names of the departure fields a display line can show."""

    TRAIN = "train"
    TRAIN_WITH_PLATFORM = "trainWithPlatform"
    DESTINATION = "destination"
    SCHEDULED_TIME = "scheduledTime"
    ACTUAL_TIME = "actualTime"
    PLATFORM = "platform"
    DELAY = "delay"

    @classmethod
    def names(cls) -> set[str]:
        """All recognized field names."""
        return {field.value for field in cls}
