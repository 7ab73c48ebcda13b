"""Calculator form state: four editable inputs driving a derived solution."""

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass

from windtriangle.models import AircraftState, WindSolution

logger = logging.getLogger(__name__)

# Leading decimal literal, as accepted by a browser's parseFloat.
_NUMBER_PREFIX = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


@dataclass(frozen=True)
class FormField:
    """Presentation metadata for one numeric input."""

    name: str
    label: str
    group: str
    min: float | None = None
    max: float | None = None
    step: float = 1


FIELDS: tuple[FormField, ...] = (
    FormField("ground_speed_kt", "Ground Speed (knots)", "aircraft", min=0),
    FormField("true_heading_deg", "True Heading (degrees)", "aircraft", min=0, max=360, step=0.1),
    FormField("wind_speed_kt", "Wind Speed (knots)", "wind", min=0),
    FormField("wind_direction_deg", "Wind Direction (degrees)", "wind", min=0, max=360),
)

FIELD_NAMES = tuple(f.name for f in FIELDS)


def parse_number(raw: str | None) -> float | None:
    """Parse user text into a finite float, or None if it is not numeric.

    A numeric prefix is enough ("12kt" -> 12.0).
    """
    if raw is None:
        return None
    match = _NUMBER_PREFIX.match(raw)
    if not match:
        return None
    value = float(match.group(1))
    if not math.isfinite(value):
        return None
    return value


class CalculatorForm:
    """Mutable holder for the four inputs.

    The solution is recomputed from the current state on every access.
    """

    def __init__(self, state: AircraftState | None = None) -> None:
        self._state = state or AircraftState()

    @property
    def state(self) -> AircraftState:
        return self._state

    @property
    def solution(self) -> WindSolution:
        return self._state.solve()

    def set_value(self, name: str, raw: str | None) -> bool:
        """Apply raw text to a field. Returns True if the value was accepted.

        Non-numeric text leaves the previous value in place.
        """
        if name not in FIELD_NAMES:
            raise KeyError(f"Unknown field '{name}'. Available: {', '.join(FIELD_NAMES)}")

        value = parse_number(raw)
        if value is None:
            logger.debug("Ignoring non-numeric input for %s: %r", name, raw)
            return False

        self._state = self._state.model_copy(update={name: value})
        return True

    def update(self, values: dict[str, str | None]) -> list[str]:
        """Apply several raw values; returns the names that were accepted."""
        return [name for name, raw in values.items() if self.set_value(name, raw)]
