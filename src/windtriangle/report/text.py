"""Plain text formatter for wind triangle solutions."""

from __future__ import annotations

import math

from windtriangle.models import AircraftState, WindSolution

SEPARATOR = "=" * 40


def _whole(value: int | float) -> str:
    if isinstance(value, float) and not math.isfinite(value):
        return "--"
    return f"{value:.0f}"


def format_airspeed(solution: WindSolution) -> str:
    """'438 knots'."""
    return f"{_whole(solution.true_airspeed_kt)} knots"


def format_correction(solution: WindSolution) -> str:
    """Absolute angle with a left/right label, e.g. '2° right'.

    A zero correction is shown as '0°' with no side label, not '0° left'.
    """
    angle = f"{_whole(solution.correction_magnitude_deg)}°"
    side = solution.correction_side
    return f"{angle} {side}" if side else angle


def format_solution(state: AircraftState, solution: WindSolution) -> str:
    """Format inputs and results as a small text panel."""
    lines = [
        SEPARATOR,
        "  Aircraft Data",
        f"    Ground speed:    {state.ground_speed_kt:g} kt",
        f"    True heading:    {state.true_heading_deg:g}°",
        "  Wind Data",
        f"    Wind speed:      {state.wind_speed_kt:g} kt",
        f"    Wind direction:  {state.wind_direction_deg:g}°",
        SEPARATOR,
        f"  True airspeed:     {format_airspeed(solution)}",
        f"  Wind correction:   {format_correction(solution)}",
        SEPARATOR,
    ]
    return "\n".join(lines)
