"""Pydantic v2 models for windtriangle."""

from __future__ import annotations

from pydantic import BaseModel

DEFAULT_GROUND_SPEED_KT = 458.0
DEFAULT_TRUE_HEADING_DEG = 97.7
DEFAULT_WIND_SPEED_KT = 23.0
DEFAULT_WIND_DIRECTION_DEG = 247.0


class AircraftState(BaseModel):
    """The four calculator inputs.

    Ranges are not enforced: headings outside [0, 360) or negative speeds
    flow into the solver as given.
    """

    ground_speed_kt: float = DEFAULT_GROUND_SPEED_KT
    true_heading_deg: float = DEFAULT_TRUE_HEADING_DEG
    wind_speed_kt: float = DEFAULT_WIND_SPEED_KT
    wind_direction_deg: float = DEFAULT_WIND_DIRECTION_DEG  # direction wind blows FROM

    def solve(self) -> WindSolution:
        """Solve the wind triangle for this state."""
        from windtriangle.analysis.wind import solve_wind_triangle

        return solve_wind_triangle(
            self.ground_speed_kt,
            self.true_heading_deg,
            self.wind_speed_kt,
            self.wind_direction_deg,
        )


class WindSolution(BaseModel):
    """Result of a wind triangle computation.

    wind_correction_deg: positive = correct right, negative = correct left.
    Values are whole numbers unless the inputs were degenerate (NaN).
    """

    true_airspeed_kt: int | float
    wind_correction_deg: int | float
    ground_speed_kt: float

    @property
    def correction_side(self) -> str | None:
        """'right', 'left', or None when no correction is needed."""
        if self.wind_correction_deg > 0:
            return "right"
        if self.wind_correction_deg < 0:
            return "left"
        return None

    @property
    def correction_magnitude_deg(self) -> int | float:
        """Absolute wind correction angle in degrees."""
        return abs(self.wind_correction_deg)
