"""Input contract for the scouter lookup.

Spreadsheet cells hand us loosely typed values, so every check here takes
``Any`` and decides with runtime tests. The outcome is a tagged
``LookupValidation`` rather than a string, and only the outermost function
turns an error kind into its display message.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class AllianceColor(str, Enum):
    RED = "RED"
    BLUE = "BLUE"


class LookupValidationError(str, Enum):
    """Error kinds; the value is the literal message shown in the cell."""

    INVALID_MATCH = "Please enter a valid match"
    INVALID_COLOR = "Please enter a valid color"
    INVALID_DRIVER_STATION = "Please enter a valid Driverstation"


class LookupQuery(BaseModel):
    model_config = ConfigDict(frozen=True)

    match: int = Field(..., ge=1, description="Match number")
    alliance_color: AllianceColor = Field(..., description="RED or BLUE")
    driver_station: int = Field(..., ge=1, le=3, description="Driver station number (1-3)")

    @property
    def is_blue(self) -> bool:
        return self.alliance_color is AllianceColor.BLUE

    def to_payload(self) -> Dict[str, Any]:
        return {
            "Match": self.match,
            "isBlue": self.is_blue,
            "DriverStation": self.driver_station,
        }


@dataclass(frozen=True)
class LookupValidation:
    query: Optional[LookupQuery] = None
    error: Optional[LookupValidationError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def _as_integer(value: Any) -> Optional[int]:
    # Sheets passes every number as a float, so 5.0 counts as 5.
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return None


def validate_match(value: Any) -> Optional[int]:
    number = _as_integer(value)
    if number is None or number < 1:
        return None
    return number


def validate_color(value: Any) -> Optional[AllianceColor]:
    if not isinstance(value, str):
        return None
    try:
        return AllianceColor(value.upper())
    except ValueError:
        return None


def validate_driver_station(value: Any) -> Optional[int]:
    number = _as_integer(value)
    if number is None or not 1 <= number <= 3:
        return None
    return number


def validate_lookup(match: Any, color: Any, driver_station: Any) -> LookupValidation:
    """Run the checks in order; the first failure decides the error kind."""
    valid_match = validate_match(match)
    if valid_match is None:
        return LookupValidation(error=LookupValidationError.INVALID_MATCH)

    valid_color = validate_color(color)
    if valid_color is None:
        return LookupValidation(error=LookupValidationError.INVALID_COLOR)

    valid_station = validate_driver_station(driver_station)
    if valid_station is None:
        return LookupValidation(error=LookupValidationError.INVALID_DRIVER_STATION)

    query = LookupQuery(
        match=valid_match,
        alliance_color=valid_color,
        driver_station=valid_station,
    )
    return LookupValidation(query=query)
