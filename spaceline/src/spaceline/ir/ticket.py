"""Ticket row and generation parameter models."""

from typing import Literal, Tuple
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from spaceline.generation.constants import (
    BASE_PRICE_MILLIONS,
    CARRIERS,
    DEFAULT_ROW_COUNT,
    DISTANCE_KM,
    SECONDS_PER_DAY,
    SPEED_MAX_KM_S,
    SPEED_MIN_KM_S,
)

Carrier = Literal["Space Adventures", "SpaceX", "Virgin Galactic"]
TripType = Literal["One-way", "Round-trip"]


class TicketRow(BaseModel):
    """One generated ticket, rendered as one table line."""

    model_config = ConfigDict(frozen=True)

    carrier: Carrier
    duration_days: int = Field(ge=0)
    trip_type: TripType
    price: float = Field(ge=0, description="Price in millions of USD")

    @property
    def round_trip(self) -> bool:
        return self.trip_type == "Round-trip"


class GenerationParams(BaseModel):
    """Constants feeding the row generator."""

    model_config = ConfigDict(frozen=True)

    distance_km: int = DISTANCE_KM
    speed_min: int = SPEED_MIN_KM_S  # km/s, inclusive
    speed_max: int = SPEED_MAX_KM_S  # km/s, inclusive
    seconds_per_day: int = SECONDS_PER_DAY
    base_price: float = BASE_PRICE_MILLIONS
    row_count: int = DEFAULT_ROW_COUNT
    carriers: Tuple[Carrier, ...] = CARRIERS

    @field_validator("distance_km", "speed_min", "speed_max", "seconds_per_day")
    @classmethod
    def validate_positive(cls, v: int) -> int:
        """Ensure distance, speeds and day length are positive."""
        if v <= 0:
            raise ValueError("distance, speeds and seconds_per_day must be positive")
        return v

    @field_validator("base_price")
    @classmethod
    def validate_base_price(cls, v: float) -> float:
        if v < 0:
            raise ValueError("base_price must not be negative")
        return v

    @field_validator("carriers")
    @classmethod
    def validate_carriers(cls, v: Tuple[str, ...]) -> Tuple[str, ...]:
        if not v:
            raise ValueError("at least one carrier is required")
        return v

    @model_validator(mode="after")
    def validate_speed_range(self) -> "GenerationParams":
        """Ensure the speed range is not empty."""
        if self.speed_max < self.speed_min:
            raise ValueError(
                f"speed_max ({self.speed_max}) must be >= speed_min ({self.speed_min})"
            )
        return self
