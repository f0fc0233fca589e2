"""Pace value models.

A pace is either a single speed (km/h or mph) or a minutes/seconds pair
(per kilometer or per mile). The ``kind`` field tags which one it is.
"""

from typing import Annotated, Literal

from pydantic import BaseModel, Field


class SpeedPace(BaseModel):
    """Pace expressed as a speed."""

    kind: Literal["speed"] = "speed"
    value: float = Field(
        description="Speed in the unit of the owning slot (km/h or mph)",
        ge=0,
    )

    def __str__(self) -> str:
        return f"{self.value:.2f}"


class DurationPace(BaseModel):
    """Pace expressed as time per distance unit."""

    kind: Literal["duration"] = "duration"
    minutes: int = Field(
        description="Whole minutes per kilometer or mile",
        ge=0,
    )
    seconds: int = Field(
        description="Remaining seconds; normally 0-59, 60 only from unnormalized rounding",
        ge=0,
    )

    @property
    def total_minutes(self) -> float:
        """Pace as fractional minutes per distance unit."""
        return self.minutes + self.seconds / 60

    def __str__(self) -> str:
        return f"{self.minutes}:{self.seconds:02d}"


PaceValue = Annotated[SpeedPace | DurationPace, Field(discriminator="kind")]
