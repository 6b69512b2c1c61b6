from enum import IntEnum


class Season(IntEnum):
    """Competition years with a registered ranking schema."""

    Y2018 = 2018  # Power Up
    Y2019 = 2019  # Destination: Deep Space
    Y2022 = 2022  # Rapid React
