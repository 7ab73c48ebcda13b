"""Render the calculator HTML page."""

from __future__ import annotations

from jinja2 import Environment, PackageLoader

from windtriangle.form import FIELDS, CalculatorForm
from windtriangle.report.text import format_airspeed, format_correction


def _build_template_context(form: CalculatorForm) -> dict:
    """Assemble the Jinja2 template context from the form state."""
    state = form.state.model_dump()
    solution = form.solution

    fields = [
        {
            "name": f.name,
            "label": f.label,
            "value": f"{state[f.name]:g}",
            "min": f.min,
            "max": f.max,
            "step": f.step,
        }
        for f in FIELDS
    ]

    return {
        "aircraft_fields": [f for f, meta in zip(fields, FIELDS) if meta.group == "aircraft"],
        "wind_fields": [f for f, meta in zip(fields, FIELDS) if meta.group == "wind"],
        "state": state,
        "airspeed_str": format_airspeed(solution),
        "correction_str": format_correction(solution),
    }


def _get_template_env() -> Environment:
    """Create Jinja2 environment pointing to the templates/ subdir."""
    return Environment(
        loader=PackageLoader("windtriangle.report", "templates"),
        autoescape=True,
    )


def render_calculator(form: CalculatorForm) -> str:
    """Render the calculator page with the form's current values and results."""
    env = _get_template_env()
    template = env.get_template("calculator.html")
    return template.render(**_build_template_context(form))
