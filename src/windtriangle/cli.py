"""CLI entry point."""

from __future__ import annotations

import argparse
import logging
import os
from pathlib import Path

from dotenv import load_dotenv

from windtriangle.analysis.wind import solve_wind_triangle
from windtriangle.config import load_defaults
from windtriangle.models import AircraftState
from windtriangle.report.text import format_solution

logger = logging.getLogger(__name__)


def _build_state(args: argparse.Namespace) -> AircraftState:
    """Configured defaults overridden by any values given on the command line."""
    state = load_defaults(args.config_dir)
    overrides = {
        "ground_speed_kt": args.ground_speed,
        "true_heading_deg": args.heading,
        "wind_speed_kt": args.wind_speed,
        "wind_direction_deg": args.wind_direction,
    }
    return state.model_copy(update={k: v for k, v in overrides.items() if v is not None})


def run_solve(state: AircraftState, as_json: bool = False) -> None:
    """Solve and print the result panel."""
    solution = solve_wind_triangle(
        state.ground_speed_kt,
        state.true_heading_deg,
        state.wind_speed_kt,
        state.wind_direction_deg,
    )
    logger.debug("Solved %s -> %s", state, solution)

    if as_json:
        print(solution.model_dump_json(indent=2))
    else:
        print(format_solution(state, solution))


def run_serve(host: str, port: int, config_dir: Path | None = None) -> None:
    """Serve the calculator web app."""
    import uvicorn

    # The app is imported by uvicorn and reads its config dir from the environment
    if config_dir is not None:
        os.environ["WINDTRIANGLE_CONFIG_DIR"] = str(config_dir)

    logger.info("Serving calculator on http://%s:%d", host, port)
    uvicorn.run("windtriangle.api.app:app", host=host, port=port)


def main(argv: list[str] | None = None) -> None:
    """CLI entry point."""
    load_dotenv()

    parser = argparse.ArgumentParser(
        prog="windtriangle",
        description="True airspeed and wind correction angle from the wind triangle",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--config-dir", type=Path, default=None,
        help="Directory holding defaults.yaml (or set WINDTRIANGLE_CONFIG_DIR)",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    # solve subcommand
    solve_parser = subparsers.add_parser(
        "solve", help="Compute true airspeed and wind correction angle"
    )
    solve_parser.add_argument(
        "--ground-speed", type=float, help="Ground speed in knots"
    )
    solve_parser.add_argument(
        "--heading", type=float, help="True heading in degrees"
    )
    solve_parser.add_argument(
        "--wind-speed", type=float, help="Wind speed in knots"
    )
    solve_parser.add_argument(
        "--wind-direction", type=float,
        help="Direction the wind blows from, in degrees",
    )
    solve_parser.add_argument(
        "--json", action="store_true", help="Print the solution as JSON"
    )

    # defaults subcommand
    subparsers.add_parser("defaults", help="Show the configured initial values")

    # serve subcommand
    serve_parser = subparsers.add_parser("serve", help="Run the web calculator")
    serve_parser.add_argument("--host", default="127.0.0.1")
    serve_parser.add_argument("--port", type=int, default=8000)

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
    )

    if args.command == "solve":
        run_solve(_build_state(args), as_json=args.json)
    elif args.command == "defaults":
        print(load_defaults(args.config_dir).model_dump_json(indent=2))
    elif args.command == "serve":
        run_serve(args.host, args.port, args.config_dir)
