"""True airspeed and wind correction angle from the wind triangle."""

from __future__ import annotations

import math

from windtriangle.models import WindSolution


def round_half_up(value: float) -> int | float:
    """Round to the nearest integer, halves towards +infinity.

    Non-finite values are returned unchanged so NaN propagates.
    """
    if not math.isfinite(value):
        return value
    return math.floor(value + 0.5)


def normalize_correction_angle(angle_deg: int | float) -> int | float:
    """Map a [0, 360) bearing difference into (-180, 180]."""
    if angle_deg > 180:
        angle_deg -= 360
    return angle_deg


def solve_wind_triangle(
    ground_speed_kt: float,
    true_heading_deg: float,
    wind_speed_kt: float,
    wind_direction_deg: float,
) -> WindSolution:
    """Derive true airspeed and wind correction angle.

    x points east, y points north, angles are clockwise from north.
    The wind blows FROM wind_direction_deg, so its velocity vector points the
    opposite way. The air vector is the ground vector minus the wind vector.

    No validation: out-of-range inputs are used as given. NaN inputs, and
    infinite angles, give NaN outputs.
    """
    if not (math.isfinite(true_heading_deg) and math.isfinite(wind_direction_deg)):
        return WindSolution(
            true_airspeed_kt=math.nan,
            wind_correction_deg=math.nan,
            ground_speed_kt=ground_speed_kt,
        )

    heading = math.radians(true_heading_deg)
    wind_dir = math.radians(wind_direction_deg)

    ground_x = ground_speed_kt * math.sin(heading)
    ground_y = ground_speed_kt * math.cos(heading)

    wind_x = -wind_speed_kt * math.sin(wind_dir)
    wind_y = -wind_speed_kt * math.cos(wind_dir)

    tas_x = ground_x - wind_x
    tas_y = ground_y - wind_y

    true_airspeed = round_half_up(math.hypot(tas_x, tas_y))

    air_heading = math.degrees(math.atan2(tas_x, tas_y))
    correction = round_half_up((air_heading - true_heading_deg + 360) % 360)

    return WindSolution(
        true_airspeed_kt=true_airspeed,
        wind_correction_deg=normalize_correction_angle(correction),
        ground_speed_kt=ground_speed_kt,
    )
