"""Location Schema"""

import zoneinfo
from dataclasses import dataclass


@dataclass
class Location:
    """
    Represents a farming location with weather observations.

    Attributes:
        id (str): Unique identifier for the location.
        name (str): Human readable name, e.g. "Harare".
        local_timezone (zoneinfo.ZoneInfo): Timezone of the location.
    """

    id: str
    name: str
    local_timezone: zoneinfo.ZoneInfo
