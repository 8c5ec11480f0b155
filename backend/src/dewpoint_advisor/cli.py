"""CLI entry point for dewpoint-advisor."""

import argparse
import logging
import sys


def main() -> None:
    parser = argparse.ArgumentParser(
        prog="dewpoint-advisor",
        description="Compare indoor and outdoor dew points to decide when to ventilate",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    subparsers = parser.add_subparsers(dest="command")

    # serve subcommand
    serve_parser = subparsers.add_parser("serve", help="Start the FastAPI server")
    serve_parser.add_argument("--port", type=int, default=None, help="Port (default: $PORT or 8000)")

    # dewpoint subcommand
    dew_parser = subparsers.add_parser("dewpoint", help="Dew points and ventilation recommendation")
    dew_parser.add_argument("--indoor-temp", type=float, required=True, help="Indoor temperature (°C)")
    dew_parser.add_argument("--indoor-rh", type=float, required=True, help="Indoor relative humidity (%%)")
    dew_parser.add_argument("--outdoor-temp", type=float, required=True, help="Outdoor temperature (°C)")
    dew_parser.add_argument("--outdoor-rh", type=float, required=True, help="Outdoor relative humidity (%%)")

    # grid subcommand
    grid_parser = subparsers.add_parser("grid", help="Print the dew point chart")
    grid_parser.add_argument("--html", default=None, help="Write a plotly heatmap to this HTML file")

    # station subcommands
    for name, help_text in (("beach", "Nearest coastal sea station"), ("humidity", "Nearest humidity station")):
        station_parser = subparsers.add_parser(name, help=help_text)
        station_parser.add_argument("--lat", type=float, required=True, help="Latitude")
        station_parser.add_argument("--lon", type=float, required=True, help="Longitude")

    args = parser.parse_args()

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command == "serve":
        _serve(args)
    elif args.command == "dewpoint":
        _dewpoint(args)
    elif args.command == "grid":
        _grid(args)
    elif args.command == "beach":
        _beach(args)
    elif args.command == "humidity":
        _humidity(args)


def _serve(args: argparse.Namespace) -> None:
    import os
    try:
        import uvicorn
        from dewpoint_advisor.api.app import create_app  # noqa: F401

        port = args.port or int(os.environ.get("PORT", "8000"))
        uvicorn.run("dewpoint_advisor.api.app:create_app", factory=True, host="0.0.0.0", port=port)
    except ImportError as e:
        print(f"Missing dependency: {e}", file=sys.stderr)
        sys.exit(1)


def _dewpoint(args: argparse.Namespace) -> None:
    from dewpoint_advisor.compute.dewpoint import (
        dew_point_c,
        recommendation_text,
        ventilation_recommendation,
    )

    if not (0 < args.indoor_rh <= 100 and 0 < args.outdoor_rh <= 100):
        print("Error: relative humidity must be in (0, 100]", file=sys.stderr)
        sys.exit(1)

    indoor = dew_point_c(args.indoor_temp, args.indoor_rh)
    outdoor = dew_point_c(args.outdoor_temp, args.outdoor_rh)
    rec = ventilation_recommendation(indoor, outdoor)
    print(f"Indoor dew point:  {indoor:.1f} °C")
    print(f"Outdoor dew point: {outdoor:.1f} °C")
    print(f"{rec.value}: {recommendation_text(rec)}")


def _grid(args: argparse.Namespace) -> None:
    from dewpoint_advisor.compute.dewpoint import dew_point_grid

    grid = dew_point_grid()
    if args.html:
        from dewpoint_advisor.charts import dew_point_figure

        dew_point_figure(grid).write_html(args.html)
        print(f"Wrote {args.html}")
    else:
        print(grid.to_frame().to_string())


def _beach(args: argparse.Namespace) -> None:
    from dewpoint_advisor.compute.geo import nearest_station
    from dewpoint_advisor.errors import EnvirError
    from dewpoint_advisor.ingest.envir import fetch_beach_stations
    from dewpoint_advisor.models import GeoPoint

    try:
        stations = fetch_beach_stations()
    except EnvirError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    ranked = nearest_station(GeoPoint(args.lat, args.lon), stations)
    if ranked is None:
        print("No beach data available", file=sys.stderr)
        sys.exit(1)
    s = ranked.reading
    print(f"{s.name} ({ranked.distance_km:.1f} km): water {s.value:.1f} °C, measured {s.measured_at or '?'}")


def _humidity(args: argparse.Namespace) -> None:
    from dewpoint_advisor.compute.geo import nearest_station
    from dewpoint_advisor.ingest.envir import fetch_latest_humidity
    from dewpoint_advisor.models import GeoPoint

    snapshot = fetch_latest_humidity()
    ranked = nearest_station(GeoPoint(args.lat, args.lon), snapshot.stations) if snapshot else None
    if ranked is None:
        print("No recent humidity data available", file=sys.stderr)
        sys.exit(1)
    s = ranked.reading
    print(f"{s.name} ({ranked.distance_km:.1f} km): RH {s.value:.0f}% at {s.measured_at}")


if __name__ == "__main__":
    main()
