"""API endpoints for wind triangle solutions."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Query, Request
from fastapi.responses import HTMLResponse
from pydantic import BaseModel

from windtriangle.config import load_defaults
from windtriangle.form import FIELD_NAMES, CalculatorForm
from windtriangle.models import AircraftState
from windtriangle.report.render import render_calculator
from windtriangle.report.text import format_airspeed, format_correction

logger = logging.getLogger(__name__)

router = APIRouter(tags=["solve"])


class SolveResponse(BaseModel):
    """Wind triangle solution with display strings for the result panel."""

    true_airspeed_kt: int | float
    wind_correction_deg: int | float
    ground_speed_kt: float
    correction_side: str | None
    airspeed_text: str
    correction_text: str


def _defaults(request: Request) -> AircraftState:
    return load_defaults(request.app.state.config_dir)


@router.get("/api/defaults", response_model=AircraftState)
def get_defaults(request: Request):
    """Initial calculator state."""
    return _defaults(request)


@router.get("/api/solve", response_model=SolveResponse)
def solve(
    request: Request,
    ground_speed_kt: float | None = Query(None, allow_inf_nan=False),
    true_heading_deg: float | None = Query(None, allow_inf_nan=False),
    wind_speed_kt: float | None = Query(None, allow_inf_nan=False),
    wind_direction_deg: float | None = Query(None, allow_inf_nan=False),
):
    """Solve the wind triangle. Omitted inputs take the configured defaults."""
    given = {
        "ground_speed_kt": ground_speed_kt,
        "true_heading_deg": true_heading_deg,
        "wind_speed_kt": wind_speed_kt,
        "wind_direction_deg": wind_direction_deg,
    }
    state = _defaults(request).model_copy(
        update={k: v for k, v in given.items() if v is not None}
    )

    solution = state.solve()
    return SolveResponse(
        **solution.model_dump(),
        correction_side=solution.correction_side,
        airspeed_text=format_airspeed(solution),
        correction_text=format_correction(solution),
    )


@router.get("/", response_class=HTMLResponse)
def calculator_page(request: Request):
    """Calculator page; query values are raw text and non-numeric ones are ignored."""
    form = CalculatorForm(_defaults(request))
    raw = {
        name: request.query_params[name]
        for name in FIELD_NAMES
        if name in request.query_params
    }
    rejected = set(raw) - set(form.update(raw))
    if rejected:
        logger.debug("Kept previous values for %s", ", ".join(sorted(rejected)))
    return HTMLResponse(render_calculator(form))
